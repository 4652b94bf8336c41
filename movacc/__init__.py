"""Compiler from a token stream of a small Belarusian-keyword language to x86-64 assembly."""

__version__ = "0.1.0"