import re

from .utils import kwargsNotNull

_MAGIC = re.compile(r"[\s{}\[\]$\\;\"]")
_ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r"}

def _isBalanced(word:str):
  depth = 0
  for ch in word:
    if ch == "{": depth += 1
    elif ch == "}":
      depth -= 1
      if depth < 0: return False
  return depth == 0

def _escape(mch):
  ch = mch.group(0)
  return _ESCAPES.get(ch) or "\\"+ch

def quote(word) -> str:
  '''render [word] as exactly one Tcl word: bare, {braced}, or backslash-escaped.
  lists and tuples become a (nested) Tcl list'''
  if isinstance(word, (list, tuple)):
    return quote(" ".join(quote(it) for it in word)) if len(word) != 0 else "{}"
  if isinstance(word, bool): text = "1" if word else "0"
  elif word == None: text = ""
  else: text = str(word)
  if text == "": return "{}"
  if _MAGIC.search(text) == None: return text
  if "\\" not in text and _isBalanced(text): return "{%s}" %text
  return _MAGIC.sub(_escape, text)

def optionName(name:str):
  '''from_ -> -from, -x -> -x'''
  return name if name.startswith("-") else "-"+name.rstrip("_")

class Command:
  '''
  A Tcl command as data: leading words plus ordered [option]s.
  All quoting happens in [str], the one place where commands become script text.
  '''
  def __init__(self, *words):
    self.words = list(words)
    self.options = [] # (name, value)
  def arg(self, *words):
    self.words.extend(words); return self
  def option(self, name, value):
    '''set option, last write wins but keeps its first position'''
    key = optionName(name)
    for (i, (k, _)) in enumerate(self.options):
      if k == key:
        self.options[i] = (key, value); return self
    self.options.append((key, value))
    return self
  def configure(self, **kwargs):
    '''like [option] for each keyword, None values are skipped'''
    for (name, v) in kwargsNotNull(**kwargs).items(): self.option(name, v)
    return self

  def __iter__(self):
    yield from self.words
    for (k, v) in self.options: yield k; yield v
  def __str__(self): return " ".join(quote(it) for it in self)
  def __repr__(self): return "Command(%s)" %str(self)
  def __eq__(self, other):
    return str(self) == (str(other) if isinstance(other, (Command, str)) else other)
  def __hash__(self): return str(self).__hash__()

class ScriptRecorder:
  '''transcript of evaluated scripts, see [Tcl.recordScript]'''
  useDebug = False
  def __init__(self):
    self.isEnabled = False
    self._sb = []
  def clear(self): self._sb.clear()
  def write(self, get_text):
    if not self.isEnabled: return
    self._sb.append(get_text())
  def getScript(self):
    code = "\n".join(self._sb)
    if ScriptRecorder.useDebug: print("\tScriptDump:"); print(code)
    return code
  def __len__(self): return len(self._sb)

  def enabled(self): return ScriptRecorder.Enabled(self)
  class Enabled:
    '''re-entrant: restores the previous switch when leaving'''
    def __init__(self, outter):
      self._outter = outter
      self._wasEnabled = False
    def __enter__(self):
      self._wasEnabled = self._outter.isEnabled
      self._outter.isEnabled = True
      return self._outter
    def __exit__(self, *args): self._outter.isEnabled = self._wasEnabled
