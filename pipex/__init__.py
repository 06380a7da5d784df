"""Run a chain of commands between an input file or here-document and an output file, with small text, buffer and I/O helpers."""

__version__ = "1.0.0"