"""Graviton: remembers what user input last resolved to."""

__version__ = "0.1.0"
