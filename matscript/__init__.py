"""Interpreter for scripts of named integer matrices and matrix expressions."""

__version__ = "0.1.0"
__all__ = ["matrix", "tree", "expr", "script"]