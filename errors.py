"""Exceptions raised by the front-end.

Every error here is fatal for the operation that raised it (one lex/parse,
one evaluation or one translation). Nothing in the core catches them; the
command-line driver in `main.py` reports them at its boundary.

The classes extend the closest built-in exception so callers can catch them
either precisely or by family (`SyntaxError` covers lexing and parsing,
`ArithmeticError` covers division by zero, and so on).
"""

from __future__ import annotations
from typing import Iterable, Optional


class LexicalError(SyntaxError):
    """Raised when the lexer meets a character it cannot classify."""

    def __init__(self, char: str, offset: int, line: int = 0, column: int = 0):
        super().__init__(
            f"Lexical error at offset {offset} (line {line}, column {column}): "
            f"unexpected character '{char}'"
        )
        self.char = char
        self.offset = offset
        self.line = line
        self.column = column


class ParseError(SyntaxError):
    """Raised when the current token does not fit the grammar."""

    def __init__(self, expected: Iterable[object], found: object, offset: int = 0):
        expected = tuple(expected)
        wanted = " or ".join(str(e) for e in expected)
        super().__init__(f"Expected {wanted}, got {found} at offset {offset}")
        self.expected = expected
        self.found = found
        self.offset = offset


class UnboundVariableError(NameError):
    def __init__(self, name: str):
        super().__init__(f"Variable '{name}' is not defined")
        self.name = name


class UnsupportedTranslationError(ValueError):
    def __init__(self, node_kind: object, notation: str):
        super().__init__(f"Can't translate {node_kind} to {notation} notation")
        self.node_kind = node_kind
        self.notation = notation


class DivisionByZeroError(ZeroDivisionError):
    def __init__(self, operator: Optional[object] = None):
        where = f" in '{operator}'" if operator is not None else ""
        super().__init__(f"Division by zero{where}")
        self.operator = operator


class UndefinedOperatorError(RuntimeError):
    def __init__(self, operator: object):
        super().__init__(f"Undefined operator: {operator!r}")
        self.operator = operator
