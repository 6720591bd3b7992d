"""Tests for tkbind.utils -- backend selection, callbacks, futures."""

import pytest

from tkbind.utils import Backend, EventCallback, FutureResult, kwargsNotNull, widgetCommand


def test_backend_selection():
    assert Backend.current() == Backend.TTk
    assert widgetCommand("button") == "ttk::button"
    assert widgetCommand("canvas", themed=False) == "canvas"
    Backend.Tk.use()
    assert Backend.Tk.isUsed()
    assert widgetCommand("button") == "button"


def test_kwargs_not_null():
    assert kwargsNotNull(a=1, b=None, c="") == {"a": 1, "c": ""}


def test_event_callback_runs_in_order():
    seen = []
    callbacks = EventCallback()
    callbacks += lambda: seen.append(1)
    callbacks.bind(seen.append, args=(2,))
    assert callbacks.run()
    assert seen == [1, 2]
    assert len(callbacks) == 2


def test_event_callback_stop_chain():
    seen = []
    callbacks = EventCallback()
    callbacks += EventCallback.stopChain
    callbacks += lambda: seen.append(1)
    assert not callbacks.run()
    assert seen == []


def test_event_callback_prints_errors_and_stops(capfd):
    seen = []

    def broken():
        raise KeyError("nope")

    callbacks = EventCallback()
    callbacks += broken
    callbacks += lambda: seen.append(1)
    assert callbacks.run()
    assert seen == []
    assert "KeyError" in capfd.readouterr().err


def test_event_callback_remove():
    def op():
        pass

    callbacks = EventCallback()
    callbacks += op
    callbacks.remove(op)
    assert len(callbacks) == 0
    with pytest.raises(ValueError):
        callbacks.remove(op)


def test_future_result():
    future = FutureResult()
    assert not future.isDone()
    with pytest.raises(TimeoutError):
        future.getValue(timeout=0.01)
    future.setValue(7)
    assert future.getValue() == 7
    assert future.fold(lambda v: v + 1, lambda e: None) == 8

    failed = FutureResult()
    failed.setError(ValueError("bad"))
    with pytest.raises(ValueError):
        failed.getValue()
    assert failed.fold(lambda v: "ok", lambda e: str(e)) == "bad"
