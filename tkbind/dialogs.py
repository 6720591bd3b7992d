'''
Dialogs: configure with setters (any order, last write wins), then [Dialog.show] runs the native dialog
and keeps what the user chose in [Dialog.getResults].
'''
from typing import List, Optional

from .element import Element
from .script import Command

class Dialog(Element):
  kind = "dialog"
  def __init__(self, parent:Optional[Element]=None, title:str=None, interp=None):
    super().__init__(parent, interp)
    self._title = title
    self._results:List[str] = []

  def setTitle(self, title:str):
    self._title = title; return self
  def getTitle(self): return self._title
  def getResults(self) -> List[str]: return list(self._results)
  def getResult(self) -> Optional[str]:
    '''first result, None when cancelled or not shown yet'''
    return self._results[0] if len(self._results) != 0 else None

  def _command(self, name:str) -> Command:
    cmd = Command(name)
    if self._parent != None: cmd.option("parent", self._parent.id)
    if self._title != None: cmd.option("title", self._title)
    return cmd
  def show(self):
    raise NotImplementedError("show")

class MessageDialogButton:
  '''symbolic names of the message dialog buttons'''
  abort = "abort"
  cancel = "cancel"
  ignore = "ignore"
  no = "no"
  ok = "ok"
  retry = "retry"
  yes = "yes"

class MessageDialogIcon:
  error = "error"
  info = "info"
  question = "question"
  warning = "warning"

class MessageDialogType:
  '''predefined button sets'''
  abortretryignore = "abortretryignore"
  ok = "ok"
  okcancel = "okcancel"
  retrycancel = "retrycancel"
  yesno = "yesno"
  yesnocancel = "yesnocancel"

_DEFAULT_BUTTONS = {
  MessageDialogType.abortretryignore: MessageDialogButton.abort,
  MessageDialogType.retrycancel: MessageDialogButton.retry,
  MessageDialogType.yesno: MessageDialogButton.yes,
  MessageDialogType.yesnocancel: MessageDialogButton.yes,
}

class MessageDialog(Dialog):
  '''
  Pops up a dialog box with a message and a predefined set of buttons.
  answer = MessageDialog("Save file?").setIcon(MessageDialogIcon.question) \\
    .setMessage("Do you want to save this file?").setType(MessageDialogType.okcancel).show().getResult()
  The result is the symbolic name of the button pressed, see [MessageDialogButton]
  '''
  def __init__(self, parent:Optional[Element]=None, title:str="Information", interp=None):
    super().__init__(parent, title, interp)
    self._defaultButton:Optional[str] = None
    self._detailMessage = ""
    self._icon = MessageDialogIcon.info
    self._message = ""
    self._type = MessageDialogType.ok

  def setDefaultButton(self, button:str):
    self._defaultButton = button; return self
  def getDefaultButton(self) -> Optional[str]: return self._defaultButton
  def setDetailMessage(self, message:str):
    '''shown beneath the main message, in a less emphasized font where the OS supports it'''
    self._detailMessage = message; return self
  def getDetailMessage(self): return self._detailMessage
  def setIcon(self, icon:str):
    self._icon = icon; return self
  def getIcon(self): return self._icon
  def setMessage(self, message:str):
    self._message = message; return self
  def getMessage(self): return self._message
  def setType(self, type:str):
    self._type = type; return self
  def getType(self): return self._type

  def resolveDefaultButton(self) -> str:
    '''the explicit default button, else the first "positive" button of the type'''
    if self._defaultButton: return self._defaultButton
    return _DEFAULT_BUTTONS.get(self._type, MessageDialogButton.ok)

  def show(self):
    cmd = self._command("tk_messageBox") \
      .option("default", self.resolveDefaultButton()) \
      .option("detail", self._detailMessage) \
      .option("icon", self._icon) \
      .option("message", self._message) \
      .option("type", self._type)
    self.tk.execute(cmd)
    self._results = [self.tk.getResult(str)]
    return self

class FileDialog(Dialog):
  '''
  options shared by [OpenFileDialog] and [SaveFileDialog].
  file types are (description, pattern or patterns) pairs, e.g. [("Images", (".png", ".gif")), ("All", "*")]
  '''
  def __init__(self, parent=None, title:str=None, interp=None):
    super().__init__(parent, title, interp)
    self._fileTypes = None
    self._initialDirectory = None
    self._initialFile = None

  def setFileTypes(self, fileTypes):
    self._fileTypes = list(fileTypes); return self
  def getFileTypes(self): return self._fileTypes
  def setInitialDirectory(self, path:str):
    self._initialDirectory = path; return self
  def getInitialDirectory(self): return self._initialDirectory
  def setInitialFile(self, name:str):
    self._initialFile = name; return self
  def getInitialFile(self): return self._initialFile
  def _options(self, cmd:Command) -> Command:
    return cmd.configure(filetypes=self._fileTypes, initialdir=self._initialDirectory, initialfile=self._initialFile)

class OpenFileDialog(FileDialog):
  def __init__(self, parent=None, title:str="Open", interp=None):
    super().__init__(parent, title, interp)
    self._multiple = False
  def setMultiple(self, multiple:bool=True):
    self._multiple = multiple; return self
  def isMultiple(self): return self._multiple

  def show(self):
    cmd = self._options(self._command("tk_getOpenFile"))
    if self._multiple: cmd.option("multiple", True)
    text = self.tk.execute(cmd)
    if text == "": self._results = []
    elif self._multiple: self._results = list(self.tk.splitList(text))
    else: self._results = [text]
    return self

class SaveFileDialog(FileDialog):
  def __init__(self, parent=None, title:str="Save", interp=None):
    super().__init__(parent, title, interp)
    self._defaultExtension = None
    self._confirmOverwrite = True

  def setDefaultExtension(self, extension:str):
    '''appended when the user types a name without extension, e.g. ".txt"'''
    self._defaultExtension = extension; return self
  def getDefaultExtension(self): return self._defaultExtension
  def setConfirmOverwrite(self, confirm:bool):
    self._confirmOverwrite = confirm; return self
  def getConfirmOverwrite(self): return self._confirmOverwrite

  def show(self):
    cmd = self._options(self._command("tk_getSaveFile")) \
      .configure(defaultextension=self._defaultExtension) \
      .option("confirmoverwrite", self._confirmOverwrite)
    text = self.tk.execute(cmd)
    self._results = [text] if text != "" else []
    return self

class DirectoryDialog(Dialog):
  def __init__(self, parent=None, title:str="Directory", interp=None):
    super().__init__(parent, title, interp)
    self._initialDirectory = None
    self._mustExist = False

  def setInitialDirectory(self, path:str):
    self._initialDirectory = path; return self
  def getInitialDirectory(self): return self._initialDirectory
  def setDirectoryMustExist(self, mustExist:bool):
    self._mustExist = mustExist; return self
  def getDirectoryMustExist(self): return self._mustExist

  def show(self):
    cmd = self._command("tk_chooseDirectory") \
      .configure(initialdir=self._initialDirectory) \
      .option("mustexist", self._mustExist)
    text = self.tk.execute(cmd)
    self._results = [text] if text != "" else []
    return self

class ColorDialog(Dialog):
  '''result is a hex color like #rrggbb'''
  def __init__(self, parent=None, title:str="Color", interp=None):
    super().__init__(parent, title, interp)
    self._initialColor = None

  def setInitialColor(self, color:str):
    self._initialColor = color; return self
  def getInitialColor(self): return self._initialColor

  def show(self):
    cmd = self._command("tk_chooseColor").configure(initialcolor=self._initialColor)
    text = self.tk.execute(cmd)
    self._results = [text] if text != "" else []
    return self
