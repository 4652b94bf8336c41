"""Token kinds and the token record produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token in the language."""

    EOF = 0
    PLUS = 1
    MINUS = 2
    STAR = 3
    SLASH = 4
    EQUALS = 5
    INTLIT = 6
    SEMICOLON = 7
    LEFTPAREN = 8
    RIGHTPAREN = 9
    IDENTIFIER = 10
    PRINT = 11
    INT = 12


@dataclass(frozen=True)
class Token:
    """One scanned token: its kind, integer value, identifier text and line."""

    kind: TokenType
    value: int = 0
    text: str = ""
    line: int = 1