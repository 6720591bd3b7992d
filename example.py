from argparse import ArgumentParser
import logging

from tkbind.utils import Backend, Events
from tkbind.interpreter import Tk
from tkbind.script import ScriptRecorder
from tkbind.window import MainWindow, Window
from tkbind.widgets import Frame, Label, Button, Canvas, CanvasRectangle, CanvasOval
from tkbind.common import ButtonState
from tkbind.dialogs import MessageDialog, MessageDialogIcon, MessageDialogType, OpenFileDialog, ColorDialog

app = ArgumentParser(prog="tkbind-demo", description="widget tour for tkbind")
app.add_argument("-backend", choices=["tk", "ttk"], default="ttk", help="widget command family")
app.add_argument("-dump-script", action="store_true", default=False, help="print every Tcl command sent, on exit")
app.add_argument("-v", "--verbose", action="store_true", default=False, help="log each evaluated command")

class Demo:
  def __init__(self, tk:Tk):
    self.tk = tk
    self.root = MainWindow("Widget Tour", interp=tk)
    self.root.setSizeBounds((320, 240))
    self.box = Frame(self.root).pack(fill="both", expand=True, padx=8, pady=8)
    self.status = Label(self.box, "Hello world").pack()
    self.can = Canvas(self.box, 240, 120, background="white").pack()
    self.rect = CanvasRectangle((10, 10, 120, 80))
    self.rect.setOutlineColor("gray") # not sent: not on the canvas yet
    self.can.addItem(self.rect)
    self.rect.setOutlineColor("navy").setActiveOutlineColor("red").setFillColor("lightblue")
    self.can.addItem(CanvasOval((130, 20, 220, 100)).setFillColor("orange").setDisabledOutlineColor("gray"))
    self.can.addItem(CanvasOval((140, 30, 210, 90)))

    Button(self.box, "Ask", command=self.ask).setDefaultState(ButtonState.active).underlineChar(0).pack(side="left")
    Button(self.box, "Open...", command=self.open).pack(side="left")
    Button(self.box, "Color...", command=self.color).pack(side="left")
    Button(self.box, "New window", command=self.newWindow).pack(side="left")
    Button(self.box, "Quit", command=self.root.exit).pack(side="right")
    self.status.on(Events.doubleClick, lambda: self.status.setText("double clicked"))

  def ask(self):
    answer = MessageDialog(self.root, "Question").setIcon(MessageDialogIcon.question) \
      .setMessage("Paint it red?").setType(MessageDialogType.yesnocancel).show().getResult()
    if answer == "yes": self.rect.setFillColor("red")
    self.status.setText("answered: %s" %answer)
  def open(self):
    files = OpenFileDialog(self.root).setFileTypes([("Python", ".py"), ("All files", "*")]).setMultiple().show().getResults()
    self.status.setText("%d file(s) chosen" %len(files))
  def color(self):
    chosen = ColorDialog(self.root).setInitialColor(self.can.getBackgroundColor()).show().getResult()
    if chosen != None: self.can.setBackgroundColor(chosen)
  def newWindow(self):
    win = Window(self.root, "Another window").setSize((240, 80))
    Label(win, "Close me with the button").pack()
    Button(win, "Close", command=win.close).pack()

from sys import argv
def main(args = argv[1:]):
  cfg = app.parse_args(args)
  logging.basicConfig(level=logging.DEBUG if cfg.verbose else logging.INFO, format="%(name)s: %(message)s")
  (Backend.Tk if cfg.backend == "tk" else Backend.TTk).use()
  tk = Tk.getInstance()
  with tk.recordScript():
    Demo(tk)
    tk.run()
  ScriptRecorder.useDebug = cfg.dump_script
  tk.getScript()

if __name__ == "__main__": main()
