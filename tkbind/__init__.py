'''
This is an object-oriented binding for Tk, driven through the Tcl interpreter that ships with tkinter.
use MainWindow / Window from tkbind.window ; Button / Label / Canvas from tkbind.widgets ; MessageDialog from tkbind.dialogs

Common knowledges on Tk:
- every widget is a command named by its path (".window-1.button-2"), configured with "-option value" pairs
- Tk should be singleton (Tk.getInstance), use Window (toplevel) for a new window
- elements also take interp= so an isolated interpreter (or a test double app) can be used
- Parallelism: Tk cannot gurantee widgets can be updated correctly from other threads, use Tk.initLooper + callThreadSafe
Notice:
- setters return the element itself, so calls chain: Button(win, "OK").setCommand(ok).pack()
- canvas items only send style commands once added to a canvas, values set before are kept but not sent
- with interp.recordScript(): ... collects every evaluated command, see interp.getScript()
'''

__all__ = ["interpreter", "script", "element", "common", "widgets", "image", "window", "dialogs", "errors", "utils"]
from .errors import TkBindError, InitError, EvalError, ResultError
from .interpreter import Tcl, Tk
from .utils import Backend
