"""Demonstrations of the seven structural design patterns, one module each."""

__version__ = "1.0.0"