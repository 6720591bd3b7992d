'''
Capability mixins: small bundles of property accessors shared by the widgets that have the property.
Setters return self for chaining. Getters never ask the interpreter, they return what was set last.
'''
from .script import Command as TclCommand

class Styled:
  '''
  Base of the style mixins. A value is always remembered, but only sent when the element
  [isAttached] and the value is non-empty; attaching later does not send it.
  '''
  def _styleTarget(self) -> TclCommand:
    return TclCommand(self.id, "configure")
  def _setStyle(self, attr:str, option:str, value):
    setattr(self, attr, value)
    if self.isAttached and value != None and value != "":
      self.tk.execute(self._styleTarget().option(option, value))
    return self

class Underline(Styled):
  _underline = None
  def setUnderline(self, index:int):
    '''underline the character at [index] of the text, the keyboard traversal hint'''
    return self._setStyle("_underline", "underline", index)
  def getUnderline(self): return self._underline

class OutlineColor(Styled):
  '''colors are Tk color names or web style hex (#rrggbb)'''
  _outlineColor = None
  _activeOutlineColor = None
  _disabledOutlineColor = None

  def setOutlineColor(self, color:str): return self._setStyle("_outlineColor", "outline", color)
  def getOutlineColor(self): return self._outlineColor
  def setActiveOutlineColor(self, color:str): return self._setStyle("_activeOutlineColor", "activeoutline", color)
  def getActiveOutlineColor(self): return self._activeOutlineColor
  def setDisabledOutlineColor(self, color:str): return self._setStyle("_disabledOutlineColor", "disabledoutline", color)
  def getDisabledOutlineColor(self): return self._disabledOutlineColor

class FillColor(Styled):
  _fillColor = None
  _activeFillColor = None
  _disabledFillColor = None

  def setFillColor(self, color:str): return self._setStyle("_fillColor", "fill", color)
  def getFillColor(self): return self._fillColor
  def setActiveFillColor(self, color:str): return self._setStyle("_activeFillColor", "activefill", color)
  def getActiveFillColor(self): return self._activeFillColor
  def setDisabledFillColor(self, color:str): return self._setStyle("_disabledFillColor", "disabledfill", color)
  def getDisabledFillColor(self): return self._disabledFillColor

class ButtonState:
  active = "active"
  normal = "normal"
  disabled = "disabled"

class DefaultButton(Styled):
  '''[ButtonState.active] draws the button as the dialog default (the one <Return> triggers)'''
  _defaultState = None
  def setDefaultState(self, state:str): return self._setStyle("_defaultState", "default", state)
  def getDefaultState(self): return self._defaultState

class CommandCallback:
  '''-command: a python callback the widget calls when activated'''
  _commandName = None
  _callback = None
  def setCommand(self, callback):
    self.removeCommand()
    name = self.tk.createCommand("command-%s" %self.hash, callback)
    self._commandName, self._callback = name, callback
    self.tk.execute(TclCommand(self.id, "configure").option("command", name))
    return self
  def getCommand(self): return self._callback
  def removeCommand(self):
    if self._commandName != None:
      self.tk.execute(TclCommand(self.id, "configure").option("command", ""))
      self._dropCommand()
    return self
  def _dropCommand(self):
    '''unregister the callback only, for when the widget itself is gone'''
    if self._commandName != None: self.tk.deleteCommand(self._commandName)
    self._commandName, self._callback = None, None

class Invoke:
  def invoke(self) -> str:
    '''act as if the widget was clicked, returns what the command returned'''
    return self.tk.execute(TclCommand(self.id, "invoke"))
