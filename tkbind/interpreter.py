'''
Interpreter facade: every widget command ends up in [Tcl.eval] / [Tcl.execute].

The native side is any object with the `_tkinter` app interface
(eval, globalgetvar, globalsetvar, splitlist, createcommand, deletecommand, mainloop, loadtk),
by default the one created by [tkinter.Tcl]. Pass app= to use another one (e.g. a test double).
'''
import logging
import tkinter
from functools import wraps

from .errors import InitError, EvalError, ResultError
from .script import Command, ScriptRecorder
from .utils import EventCallback, EventPoller

_logger = logging.getLogger(__name__)

_TCL_BOOLEANS = {"1": True, "0": False, "true": True, "false": False,
  "yes": True, "no": False, "on": True, "off": False}

def _parseBool(text:str) -> bool:
  value = _TCL_BOOLEANS.get(text.strip().lower())
  if value == None: raise ValueError("expected boolean but got %r" %text)
  return value

class Tcl:
  '''
  Simple singleton wrapper for the Tcl interpreter.
  Use [getInstance] for the process-wide one, or construct your own (with app=) for an isolated interpreter.
  '''
  _instance = None
  resultParsers = {str: str, int: int, float: float, bool: _parseBool}

  def __init__(self, app=None):
    self._root = None
    if app == None:
      _logger.info("Initialising Tcl")
      try: self._root = tkinter.Tcl()
      except tkinter.TclError as e: raise InitError(str(e)) from e
      app = self._root.tk
    self._app = app
    self._result = ""
    self.script = ScriptRecorder()

  @classmethod
  def getInstance(cls):
    '''If an instance doesn't exist, one is created and returned. If one already exists, that is returned'''
    if cls._instance == None: cls._instance = cls()
    return cls._instance

  @property
  def app(self): return self._app

  def eval(self, script:str, *args) -> str:
    '''evaluate [script] with [args] substituted (%-format, no quoting). see [execute] for built commands'''
    code = script %args if len(args) != 0 else script
    return self._eval(code)
  def execute(self, command:Command) -> str:
    return self._eval(str(command))
  def _eval(self, code:str) -> str:
    _logger.debug("eval: %s", code)
    self.script.write(lambda: code)
    try: result = self._app.eval(code)
    except tkinter.TclError as e:
      self._result = str(e)
      raise EvalError(self._result, code) from e
    self._result = result if isinstance(result, str) else str(result)
    return self._result

  def getResult(self, type=str):
    '''the last result as [type] (str, int, float or bool)'''
    parse = Tcl.resultParsers.get(type)
    if parse == None:
      raise ResultError("unsupported result type: %s" %getattr(type, "__name__", type), self._result)
    try: return parse(self._result)
    except ValueError as e:
      raise ResultError("can't convert %r to %s" %(self._result, type.__name__), self._result) from e

  def getVariable(self, name:str) -> str:
    try: value = self._app.globalgetvar(name)
    except tkinter.TclError as e: raise EvalError(str(e), name) from e
    return value if isinstance(value, str) else str(value)
  def setVariable(self, name:str, value):
    _logger.debug("set %s %r", name, value)
    try: self._app.globalsetvar(name, value)
    except tkinter.TclError as e: raise EvalError(str(e), name) from e

  def splitList(self, text:str) -> tuple:
    try: return tuple(str(it) for it in self._app.splitlist(text))
    except tkinter.TclError as e: raise EvalError(str(e), text) from e

  def createCommand(self, name:str, callback):
    '''make [callback] callable from Tcl as [name]'''
    self._app.createcommand(name, callback)
    return name
  def deleteCommand(self, name:str):
    try: self._app.deletecommand(name)
    except tkinter.TclError as e: raise EvalError(str(e), name) from e

  def recordScript(self):
    '''with interp.recordScript(): ... -- then [getScript]'''
    return self.script.enabled()
  def getScript(self) -> str: return self.script.getScript()

  def __repr__(self): return "%s(%r)" %(type(self).__name__, self._app)

class Tk(Tcl, EventPoller):
  '''Tcl interpreter with Tk loaded, owns the event loop'''
  _instance = None

  def __init__(self, app=None):
    Tcl.__init__(self, app)
    EventPoller.__init__(self)
    self.onQuit = EventCallback()
    _logger.info("Initialising Tk")
    try: self._app.loadtk()
    except tkinter.TclError as e: raise InitError(str(e)) from e

  def run(self):
    '''Run the tk main loop, show the gui and start processing events. returns when the main window is gone'''
    _logger.info("Running Tk main loop")
    try: self._app.mainloop(0)
    finally: self.onQuit.run()
  def exit(self):
    '''destroy the main window, so [run] returns'''
    self.execute(Command("destroy", "."))

def defaultInterpreter() -> Tk: return Tk.getInstance()

def makeThreadSafe(op):
  '''
  A decorator that makes a function safe to be called from any thread, (and it runs in the main thread).
  Requires [Tk.initLooper] on the default interpreter. [op] should not block the main event loop.
  '''
  @wraps(op)
  def safe(*args, **kwargs): return defaultInterpreter().callThreadSafe(op, args, kwargs).getValue()
  return safe
