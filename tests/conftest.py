"""Shared fixtures: a stand-in for the native _tkinter app, so no display is needed."""

import tkinter

import pytest

from tkbind import utils
from tkbind.interpreter import Tcl, Tk
from tkbind.utils import Backend


class FakeApp:
    """Records evaluated scripts and answers them from ``results`` (script prefix -> text or exception)."""

    def __init__(self, results=None, tk_error=None):
        self.scripts = []
        self.results = dict(results or {})
        self.vars = {}
        self.commands = {}
        self.loop = []  # callables the simulated main loop runs, in order
        self.loopDone = False
        self.tkLoaded = False
        self.tkError = tk_error

    def loadtk(self):
        if self.tkError is not None:
            raise tkinter.TclError(self.tkError)
        self.tkLoaded = True

    def eval(self, script):
        self.scripts.append(script)
        for prefix, result in self.results.items():
            if script.startswith(prefix):
                if isinstance(result, Exception):
                    raise result
                return result
        return ""

    def globalgetvar(self, name):
        try:
            return self.vars[name]
        except KeyError:
            raise tkinter.TclError('can\'t read "%s": no such variable' % name) from None

    def globalsetvar(self, name, value):
        self.vars[name] = value

    def splitlist(self, text):
        return tuple(text.split())

    def createcommand(self, name, func):
        self.commands[name] = func

    def deletecommand(self, name):
        if name not in self.commands:
            raise tkinter.TclError('can\'t delete "%s": command doesn\'t exist' % name)
        del self.commands[name]

    def mainloop(self, threshold=0):
        while self.loop:
            self.loop.pop(0)()
        self.loopDone = True

    @property
    def last(self):
        return self.scripts[-1]


@pytest.fixture(autouse=True)
def isolated_state(monkeypatch):
    """Each test starts without default interpreters and with the ttk backend."""
    monkeypatch.setattr(Tcl, "_instance", None)
    monkeypatch.setattr(Tk, "_instance", None)
    monkeypatch.setattr(utils, "guiBackend", Backend.TTk)


@pytest.fixture
def make_app():
    """FakeApp factory, for tests needing scripted results or init failures."""
    return FakeApp


@pytest.fixture
def app():
    return FakeApp()


@pytest.fixture
def tk(app):
    return Tk(app=app)
