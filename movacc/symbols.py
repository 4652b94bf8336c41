"""The global symbol table."""

from __future__ import annotations

from .errors import CompileError

NUMBER_OF_SYMBOLS = 1024


class SymbolTable:
    """Names of global variables, each held in a numbered slot."""

    def __init__(self, capacity: int = NUMBER_OF_SYMBOLS) -> None:
        self.capacity = capacity
        self._names: list[str] = []

    def find(self, name: str) -> int | None:
        """Return the slot of ``name``, or None if it is not declared."""
        try:
            return self._names.index(name)
        except ValueError:
            return None

    def add(self, name: str) -> int:
        """Declare ``name`` if new and return its slot."""
        slot = self.find(name)
        if slot is not None:
            return slot
        if len(self._names) >= self.capacity:
            raise CompileError("Too many global symbols defined")
        self._names.append(name)
        return len(self._names) - 1

    def name_of(self, index: int) -> str:
        """Return the name held in slot ``index``."""
        if not 0 <= index < len(self._names):
            raise IndexError(f"no global symbol in slot {index}")
        return self._names[index]

    def __len__(self) -> int:
        return len(self._names)