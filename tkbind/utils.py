import threading
import queue
import traceback
from sys import stderr

MSG_CALL_FROM_THR_MAIN = "call from main thread."
MSG_CALLED_TWICE = "called twice"
NOT_THREADSAFE = RuntimeError("call initLooper() first")
TCL_CMD_POLLER = "tkbind_init_threads_queue_poller"

class BackendEnum():
  def __init__(self, name:str, module_name:str, prefix:str):
    self.name=name;self.module_name=module_name;self.prefix=prefix
  def __eq__(self, other): return other.name == self.name
  def __hash__(self): return self.name.__hash__()
  def __repr__(self): return "Backend(%s)" %self.name
  def isAvaliable(self):
    try: __import__(self.module_name); return True
    except ImportError: return False
  def use(self):
    global guiBackend
    if self.isAvaliable(): guiBackend = self
    else: next(filter(BackendEnum.isAvaliable, Backend.fallbackOrder)).use()
  def isUsed(self):
    global guiBackend; return guiBackend == self

class Backend:
  '''widget command family: themed (ttk::button) or classic (button)'''
  Tk = BackendEnum("tk", "tkinter", "")
  TTk = BackendEnum("ttk", "tkinter.ttk", "ttk::")
  fallbackOrder = [TTk, Tk]
  @staticmethod
  def current() -> BackendEnum: return guiBackend
guiBackend = Backend.TTk

def widgetCommand(name:str, themed=True):
  '''"button" -> "ttk::button" when the ttk backend is used. [themed]=False for widgets ttk lacks (canvas)'''
  return guiBackend.prefix+name if themed else name

def kwargsNotNull(**kwargs):
  to_del = []
  for key in kwargs:
    if kwargs[key] == None: to_del.append(key)
  for key in to_del: del kwargs[key]
  return kwargs

class EventName:
  '''a Tk event pattern, e.g. EventName("<Button-1>")'''
  def __init__(self, name:str):
    self.name = name if name.startswith("<") else "<%s>" %name
  def __str__(self):
    return self.name
  __repr__ = __str__

class Events:
  click = EventName("<Button-1>")
  doubleClick = EventName("<Double-1>")
  mouseM = EventName("<Button-2>")
  mouseR = EventName("<Button-3>")
  key = EventName("<Key>")
  enter = EventName("<Enter>"); leave = EventName("<Leave>")
  destroy = EventName("<Destroy>")

class EventCallback:
  """An object that calls functions. Use [bind] / [__add__] or [run]"""
  def __init__(self):
    self._callbacks = []

  class CallbackBreak(Exception): pass
  callbackBreak = CallbackBreak()
  @staticmethod
  def stopChain(): raise EventCallback.callbackBreak

  def isIgnoredFrame(self, frame):
    '''Is a stack trace frame ignored by [bind]'''
    return False
  def bind(self, op, args=(), kwargs={}):
    """Schedule `callback(*args, **kwargs) to [run]."""
    stack = traceback.extract_stack()
    while stack and self.isIgnoredFrame(stack[-1]): del stack[-1]
    stack_info = "".join(traceback.format_list(stack))
    self._callbacks.append((op, args, kwargs, stack_info))
  def __add__(self, op):
    self.bind(op); return self
  def __len__(self): return len(self._callbacks)

  def remove(self, op):
    """Undo a [bind] call. only [op] is used as its identity, args are ignored"""
    for (i, cb) in enumerate(self._callbacks):
      if cb[0] == op:
        del self._callbacks[i]
        return

    raise ValueError("not bound: %r" %op)

  def run(self) -> bool:
    """Run the connected callbacks(ignore result) and print errors. If one callback requested [stopChain], return False"""
    for (op, args, kwargs, stack_info) in self._callbacks:
      try: op(*args, **kwargs)
      except EventCallback.CallbackBreak: return False
      except Exception:
        # it's important that this does NOT call sys.stderr.write directly
        # because sys.stderr is None when running in windows, None.write is error
        (trace, rest) = traceback.format_exc().split("\n", 1)
        print(trace, file=stderr)
        print(stack_info+rest, end="", file=stderr)
        break
    return True

class FutureResult:
  '''pending operation result, use [getValue] / [getValueOr] to wait'''
  def __init__(self):
    self._cond = threading.Event()
    self._value = None
    self._error = None

  def setValue(self, value):
    self._value = value
    self._cond.set()

  def setError(self, exc):
    self._error = exc
    self._cond.set()

  def isDone(self): return self._cond.is_set()
  def getValueOr(self, on_error, timeout=None):
    if not self._cond.wait(timeout): raise TimeoutError("result not ready")
    if self._error != None: on_error(self._error)
    return self._value
  def getValue(self, timeout=None): return self.getValueOr(FutureResult.rethrow, timeout)
  def fold(self, done, fail):
    self._cond.wait()
    return done(self._value) if self._error == None else fail(self._error)
  @staticmethod
  def rethrow(ex): raise ex

class EventPoller:
  '''
  after-event loop operation dispatcher for an interpreter.
  Mixed into [tkbind.interpreter.Tk], which provides [execute], [createCommand] and [onQuit]
  '''
  def __init__(self):
      self._main_thread_ident = threading.get_ident() #< faster than threading.current_thread()
      self._init_looper_done = False
      self._call_queue = queue.Queue() # (func, args, kwargs, future)
  def isThreadMain(self): return threading.get_ident() == self._main_thread_ident
  def initLooper(self, poll_interval_ms=(1_000//20) ):
      from .script import Command
      assert self.isThreadMain(), MSG_CALL_FROM_THR_MAIN
      assert not self._init_looper_done, MSG_CALLED_TWICE #< there is a race condition, but just ignore this

      timer_id = None
      def poller():
        nonlocal timer_id
        self.pollQueue()
        timer_id = self.execute(Command("after", poll_interval_ms, TCL_CMD_POLLER))
      self.createCommand(TCL_CMD_POLLER, poller)

      def quit_cancel_poller():
        if timer_id != None: self.execute(Command("after", "cancel", timer_id))

      self.onQuit += quit_cancel_poller

      poller()
      self._init_looper_done = True

  def pollQueue(self):
    '''run every queued call, settling its future'''
    while True:
      try: item = self._call_queue.get(block=False)
      except queue.Empty: break

      (func, args, kwargs, future) = item
      try: value = func(*args, **kwargs)
      except Exception as ex: future.setError(ex)
      else: future.setValue(value)

  def callThreadSafe(self, op, args=(), kwargs={}) -> FutureResult:
    '''run [op] on the interpreter thread. from the main thread, the op runs now'''
    if self.isThreadMain():
      future = FutureResult()
      future.setValue(op(*args, **kwargs))
      return future

    if not self._init_looper_done: raise NOT_THREADSAFE

    future = FutureResult()
    self._call_queue.put((op, args, kwargs, future))
    return future
