"""Coding assistant hooks for MetaSaver projects."""

__version__ = "0.1.0"
