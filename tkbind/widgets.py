'''
Widgets: each one emits its creation command in the constructor, then one command per setter.

Widgets(button/label/box): Frame, Label, Button, Canvas
Canvas items: CanvasRectangle, CanvasOval; they are created when added with [Canvas.addItem]
'''
from typing import List, Optional

from .common import Underline, OutlineColor, FillColor, DefaultButton, CommandCallback, Invoke
from .element import Element, generateHash
from .image import Image, ImagePosition
from .script import Command, optionName
from .utils import EventName, widgetCommand

class Widget(Element):
  kind = "widget"
  def __init__(self, parent:Optional[Element]=None, interp=None):
    super().__init__(parent, interp)
    self._bindings = {} # event pattern -> command name
  @property
  def isAttached(self): return True
  def _create(self, command_name:str, themed=True, **options):
    self.tk.execute(Command(widgetCommand(command_name, themed), self.id).configure(**options))

  def configure(self, **options):
    '''e.g. configure(width=8, from_=1) -> .w configure -width 8 -from 1'''
    self.tk.execute(Command(self.id, "configure").configure(**options))
    return self
  config = configure
  def cget(self, option:str) -> str:
    return self.tk.execute(Command(self.id, "cget", optionName(option)))

  def pack(self, **options):
    self.tk.execute(Command("pack", self.id).configure(**options))
    return self
  def focus(self):
    self.tk.execute(Command("focus", self.id))
    return self
  def setState(self, *states:str):
    '''ttk state flags, e.g. setState("disabled") / setState("!disabled")'''
    self.tk.execute(Command(self.id, "state", list(states)))
    return self
  def getState(self) -> tuple:
    return self.tk.splitList(self.tk.execute(Command(self.id, "state")))

  def on(self, event, callback):
    '''bind [callback]() to [event] (an EventName or pattern), replacing the previous one'''
    pattern = str(event) if isinstance(event, EventName) else EventName(event).name
    self.unbind(pattern)
    name = self.tk.createCommand("event-%s-%s" %(self.hash, generateHash()), callback)
    self._bindings[pattern] = name
    self.tk.execute(Command("bind", self.id, pattern, name))
    return self
  def unbind(self, event):
    pattern = str(event) if isinstance(event, EventName) else EventName(event).name
    name = self._bindings.pop(pattern, None)
    if name != None:
      self.tk.execute(Command("bind", self.id, pattern, ""))
      self.tk.deleteCommand(name)
    return self

  def destroy(self):
    self.tk.execute(Command("destroy", self.id))
    for name in self._bindings.values(): self.tk.deleteCommand(name)
    self._bindings.clear()

class Frame(Widget):
  kind = "frame"
  def __init__(self, parent=None, interp=None, **options):
    super().__init__(parent, interp)
    self._create("frame", **options)

class TextWidget(Widget, Underline):
  '''base of widgets showing a text (held in a Tcl variable) and an optional image'''
  kind = "textwidget"
  def __init__(self, parent=None, interp=None):
    super().__init__(parent, interp)
    self._textVariable = "variable-%s" %self.hash
    self._image:Optional[Image] = None
    self._imagePosition:Optional[str] = None
    self._characterWidth:Optional[int] = None
    self.tk.setVariable(self._textVariable, "")
  @property
  def textVariable(self) -> str: return self._textVariable

  def setText(self, text:str):
    self.tk.setVariable(self._textVariable, text)
    return self
  def getText(self) -> str: return self.tk.getVariable(self._textVariable)

  def underlineChar(self, index:int): return self.setUnderline(index)

  def setImage(self, image:Image, imagePosition:str=ImagePosition.image):
    self._image = image
    self.tk.execute(Command(self.id, "configure").option("image", image.id))
    return self.setImagePosition(imagePosition)
  def getImage(self) -> Optional[Image]: return self._image
  def setImagePosition(self, imagePosition:str):
    '''see [ImagePosition]'''
    self._imagePosition = imagePosition
    self.tk.execute(Command(self.id, "configure").option("compound", imagePosition))
    return self
  def getImagePosition(self): return self._imagePosition

  def setTextCharacterWidth(self, characterWidth:int):
    self._characterWidth = characterWidth
    self.tk.execute(Command(self.id, "configure").option("width", characterWidth))
    return self
  def getTextCharacterWidth(self): return self._characterWidth

class Label(TextWidget):
  kind = "label"
  def __init__(self, parent=None, text:str=None, interp=None):
    super().__init__(parent, interp)
    self._create("label", textvariable=self._textVariable)
    if text != None: self.setText(text)

class Button(TextWidget, Invoke, DefaultButton, CommandCallback):
  '''
  button = Button(frame, "Save").setCommand(save).setDefaultState(ButtonState.active)
  '''
  kind = "button"
  def __init__(self, parent=None, text:str=None, command=None, interp=None):
    super().__init__(parent, interp)
    self._create("button", textvariable=self._textVariable)
    if text != None: self.setText(text)
    if command != None: self.setCommand(command)
  def destroy(self):
    super().destroy()
    self._dropCommand()

class Canvas(Widget):
  kind = "canvas"
  def __init__(self, parent=None, width=None, height=None, background=None, interp=None):
    super().__init__(parent, interp)
    self._items:List["CanvasItem"] = []
    self._background = background
    self._create("canvas", False, width=width, height=height, background=background)
  def addItem(self, item:"CanvasItem"):
    item._attach(self)
    self._items.append(item)
    return self
  def getItems(self) -> List["CanvasItem"]: return list(self._items)
  def removeItem(self, item:"CanvasItem"):
    if item not in self._items: raise ValueError("%r is not on %r" %(item, self))
    item.destroy()
    return self
  def setBackgroundColor(self, color:str):
    self._background = color
    return self.configure(background=color)
  def getBackgroundColor(self): return self._background

class CanvasItem(Element):
  '''
  A shape on a [Canvas], addressed by a tag equal to its id.
  Until added to a canvas it has no parent: style setters then only remember the value.
  '''
  kind = "item"
  itemType = None
  def __init__(self, coords, interp=None):
    super().__init__(None, interp)
    self._coords = list(coords)
  def _makeId(self): return "%s-%s" %(self.kind, self.hash)
  def _styleTarget(self) -> Command:
    return Command(self._parent.id, "itemconfigure", self.id)

  def _attach(self, canvas:Canvas):
    if self._parent != None: raise ValueError("%r is already on %r" %(self, self._parent))
    self._parent = canvas
    self.tk.execute(Command(canvas.id, "create", self.itemType).arg(*self._coords).option("tags", self.id))

  def setCoords(self, coords):
    self._coords = list(coords)
    if self.isAttached: self.tk.execute(Command(self._parent.id, "coords", self.id, *self._coords))
    return self
  def getCoords(self) -> list: return list(self._coords)
  def destroy(self):
    '''delete from the canvas, the item can be added again afterwards'''
    if not self.isAttached: return
    canvas = self._parent
    self.tk.execute(Command(canvas.id, "delete", self.id))
    if self in canvas._items: canvas._items.remove(self)
    self._parent = None

class CanvasRectangle(CanvasItem, OutlineColor, FillColor):
  kind = "rectangle"
  itemType = "rectangle"

class CanvasOval(CanvasItem, OutlineColor, FillColor):
  kind = "oval"
  itemType = "oval"
