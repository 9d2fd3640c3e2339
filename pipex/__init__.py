"""Run two commands joined by a pipe, with input from a file and output to a file."""

__version__ = "0.1.0"
__all__ = ["cli", "paths", "printf", "strutil"]