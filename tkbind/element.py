import itertools

from .interpreter import defaultInterpreter

_serials = itertools.count(1)

def generateHash() -> str:
  '''next process-wide unique token (upper hex), never reused even after elements are collected'''
  return "%X" %next(_serials)

class Element:
  '''
  Anything addressed by name inside the interpreter: widgets, windows, images, canvas items.
  The id is computed once from [kind], the parent's id and [generateHash], and never changes.
  The parent is only a back-reference, the native side owns the real object.
  '''
  kind = "element"
  def __init__(self, parent:"Element"=None, interp=None):
    self._parent = parent
    self._interp = interp
    self._hash = generateHash()
    self._id = self._makeId()

  def _makeId(self) -> str:
    base = self._parent.id if self._parent != None else ""
    if base == ".": base = ""
    return "%s.%s-%s" %(base, self.kind, self._hash)

  @property
  def id(self) -> str: return self._id
  @property
  def hash(self) -> str: return self._hash
  @property
  def parent(self) -> "Element": return self._parent
  @property
  def isAttached(self) -> bool:
    '''whether the native counterpart exists, so configure commands can be sent'''
    return self._parent != None

  @property
  def tk(self):
    '''the interpreter: the one given, else the parent's, else the process default'''
    if self._interp != None: return self._interp
    if self._parent != None: return self._parent.tk
    return defaultInterpreter()

  def __eq__(self, other): return isinstance(other, Element) and other.id == self.id
  def __hash__(self): return self.id.__hash__()
  def __str__(self): return self.id
  def __repr__(self): return "%s(%s)" %(type(self).__name__, self.id)
