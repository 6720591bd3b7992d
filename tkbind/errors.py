'''errors raised by the interpreter facade, native TclError is always wrapped'''

class TkBindError(Exception):
  '''base of all errors raised by tkbind'''

class InitError(TkBindError):
  '''the native Tcl/Tk runtime could not be started'''

class EvalError(TkBindError):
  '''a command (or variable access) was rejected by the interpreter'''
  def __init__(self, message, command=None):
    super().__init__(message)
    self.command = command

class ResultError(TkBindError, ValueError):
  '''the last result can't be converted to the requested type'''
  def __init__(self, message, result=None):
    super().__init__(message)
    self.result = result
