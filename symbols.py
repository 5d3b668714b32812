"""Declared types and the runtime variable environment.

This module defines the `SymbolType` enum for the types a `var` section can
declare, a `Symbol` dataclass holding one variable's display name and value,
and `Environment`, the evaluator's name-to-value store. Names are matched
case-insensitively, as Pascal identifiers are, but the spelling used by the
first assignment is the one shown when the environment is dumped.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Iterator, List, Tuple, Union

Number = Union[int, float]


class SymbolType(Enum):
    INTEGER = auto()
    REAL = auto()

    def __str__(self) -> str:
        return self.name.lower()


@dataclass
class Symbol:
    name: str
    value: Number = 0

    def __repr__(self) -> str:
        return f"Symbol({self.name}, {self.value!r})"


class Environment:
    def __init__(self):
        # Keyed by the lower-cased name.
        self.symbols: Dict[str, Symbol] = {}

    @staticmethod
    def normalize(name: str) -> str:
        return name.lower()

    def assign(self, name: str, value: Number) -> Symbol:
        """Insert or update a variable. An existing slot keeps its spelling."""
        key = self.normalize(name)
        symbol = self.symbols.get(key)
        if symbol is None:
            symbol = Symbol(name, value)
            self.symbols[key] = symbol
        else:
            symbol.value = value
        return symbol

    def lookup(self, name: str) -> Number:
        """Return the value bound to `name` in any letter case.

        Raises `KeyError` when the name was never assigned; the evaluator
        turns that into an `UnboundVariableError`.
        """
        return self.symbols[self.normalize(name)].value

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.normalize(name) in self.symbols

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[str]:
        return (symbol.name for symbol in self.symbols.values())

    def items(self) -> List[Tuple[str, Number]]:
        return [(symbol.name, symbol.value) for symbol in self.symbols.values()]

    def as_dict(self) -> Dict[str, Number]:
        """Snapshot keyed by display name."""
        return dict(self.items())

    def __repr__(self) -> str:
        inner = ", ".join(f"{n}={v!r}" for n, v in self.items())
        return f"Environment({inner})"
