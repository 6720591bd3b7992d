from typing import Optional, Tuple

from .element import Element
from .image import Image
from .script import Command

class Window(Element):
  '''a toplevel window, see [MainWindow] for the root one'''
  kind = "window"
  def __init__(self, parent:Optional[Element]=None, title:str="Tkbind", interp=None):
    super().__init__(parent, interp)
    self._create()
    self.setTitle(title)
  def _create(self):
    self.tk.execute(Command("toplevel", self.id))
  @property
  def isAttached(self): return True

  def setTitle(self, title:str):
    self.tk.execute(Command("wm", "title", self.id, title))
    return self
  def getTitle(self) -> str: return self.tk.execute(Command("wm", "title", self.id))

  def setSize(self, dim:Tuple[int, int], xy:Tuple[int, int]=None):
    '''sets the actual size/position of window'''
    code = "x".join(str(i) for i in dim)
    if xy != None: code += "+%d+%d" %(xy[0],xy[1])
    self.tk.execute(Command("wm", "geometry", self.id, code))
    return self
  def getSize(self) -> Tuple[int, int]:
    code = self.tk.execute(Command("wm", "geometry", self.id))
    return tuple(int(d) for d in code.split("+")[0].split("x"))
  def setSizeBounds(self, min:tuple, max:tuple=None):
    '''set [min] to (1,1) if no limit'''
    self.tk.execute(Command("wm", "minsize", self.id, min[0], min[1]))
    if max: self.tk.execute(Command("wm", "maxsize", self.id, max[0], max[1]))
    return self
  def setIcon(self, *images:Image):
    self.tk.execute(Command("wm", "iconphoto", self.id, *[it.id for it in images]))
    return self
  def getScreenSize(self) -> Tuple[int, int]:
    self.tk.execute(Command("winfo", "screenwidth", self.id)); width = self.tk.getResult(int)
    self.tk.execute(Command("winfo", "screenheight", self.id)); height = self.tk.getResult(int)
    return (width, height)

  def focus(self):
    self.tk.execute(Command("focus", "-force", self.id))
    return self
  def listThemes(self) -> tuple:
    return self.tk.splitList(self.tk.execute(Command("ttk::style", "theme", "names")))
  def setTheme(self, name:str):
    self.tk.execute(Command("ttk::style", "theme", "use", name))
    return self
  def getTheme(self) -> str: return self.tk.execute(Command("ttk::style", "theme", "use"))

  def close(self):
    self.tk.execute(Command("destroy", self.id))

class MainWindow(Window):
  '''the root window "." that comes with Tk. closing it ends [run]'''
  def __init__(self, title:str="Tkbind", interp=None):
    super().__init__(None, title, interp)
  def _makeId(self): return "."
  def _create(self): pass

  def run(self):
    '''blocks in the event loop until this window is closed'''
    self.tk.run()
  def exit(self): self.tk.exit()
