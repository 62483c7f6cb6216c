"""Helpers for characters, numbers, byte buffers, strings, linked lists, output, printf-style formatting and line reading."""

__version__ = "0.1.0"

__all__ = ["chars", "numbers", "memory", "strings", "linked", "output", "printf", "lines"]