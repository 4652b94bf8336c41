"""Errors reported while compiling a program."""

from __future__ import annotations


class CompileError(Exception):
    """A fatal problem found in the source program or in the compiler state."""

    def __init__(self, message: str, line: int | None = None) -> None:
        self.message = message
        self.line = line
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"{self.message} on line {self.line}"