#!/bin/env python3
# -*- coding: utf-8 -*-

from setuptools import setup, find_packages

setup(
  name="tkbind", version="0.1.0",
  python_requires=">=3.6",
  author="duangsuse", author_email="fedora-opensuse@outlook.com",
  description="Object-oriented Tk binding that drives the Tcl interpreter with built commands",
  long_description="""
tkbind wraps Tk widgets, windows and dialogs as objects whose setters each send one Tcl command,
through a singleton (or injected) interpreter, with chainable setters and a recordable command script
""",

  packages=find_packages(exclude=["tests"]),
  extras_require={"test": ["pytest"]})
