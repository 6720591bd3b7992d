"""Tests for tkbind.element -- identifiers and interpreter resolution."""

from tkbind.element import Element, generateHash
from tkbind.image import Png
from tkbind.widgets import Button, Canvas, CanvasOval, CanvasRectangle, Frame, Label
from tkbind.window import MainWindow, Window


def test_generate_hash_never_repeats():
    hashes = [generateHash() for _ in range(1000)]
    assert len(set(hashes)) == 1000
    assert all(hashes)


def test_every_element_gets_a_fresh_id(tk):
    elements = [Frame(interp=tk) for _ in range(20)]
    elements += [Button(interp=tk), Label(interp=tk), Png(interp=tk), Window(interp=tk)]
    elements += [CanvasRectangle((0, 0, 1, 1)), CanvasOval((0, 0, 1, 1))]
    ids = [it.id for it in elements]
    assert all(ids)
    assert len(set(ids)) == len(ids)


def test_ids_are_hierarchical(tk):
    win = Window(interp=tk)
    frame = Frame(win)
    button = Button(frame, "OK")
    assert win.id.startswith(".window-")
    assert frame.id.startswith(win.id + ".frame-")
    assert button.id.startswith(frame.id + ".button-")


def test_root_children_have_no_double_dot(tk):
    root = MainWindow(interp=tk)
    frame = Frame(root)
    assert root.id == "."
    assert frame.id.startswith(".frame-")
    assert ".." not in frame.id


def test_interpreter_is_inherited_from_parent(tk):
    frame = Frame(interp=tk)
    child = Frame(frame)
    assert child.tk is tk
    assert child.parent is frame


def test_elements_compare_by_id(tk):
    a = Element(interp=tk)
    b = Element(interp=tk)
    assert a == a
    assert a != b
    assert len({a, b, a}) == 2
    assert str(a) == a.id
    assert repr(a) == "Element(%s)" % a.id


def test_id_is_immutable_across_attachment(tk):
    item = CanvasRectangle((0, 0, 5, 5))
    before = item.id
    Canvas(interp=tk).addItem(item)
    assert item.id == before
