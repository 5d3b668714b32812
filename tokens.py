"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small frozen `Token` dataclass that holds a token type, an
optional lexeme and the source offset it was read from. Tokens are the atomic
units produced by the lexer and consumed (one at a time) by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Keywords
    PROGRAM = auto()
    VAR = auto()
    BEGIN = auto()
    END = auto()

    # Type names
    INTEGER = auto()
    REAL = auto()

    # Literals
    INTEGER_CONST = auto()
    REAL_CONST = auto()
    IDENTIFIER = auto()

    # Punctuation
    DOT = auto()
    ASSIGN = auto()
    SEMICOLON = auto()
    COLON = auto()
    COMMA = auto()
    LPAREN = auto()
    RPAREN = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    INTEGER_DIV = auto()
    FLOAT_DIV = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[str] = None
    pos: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    def __str__(self) -> str:
        if self.value is None:
            return str(self.type)
        return f"{self.type}({self.value})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return self.value
