"""
Cell marks for a Tic-Tac-Toe board.
Notes:
- A cell holds exactly one of three values: empty, X (player one), O (player two).
- Integer codes follow the usual digit encoding of a board: 0=empty, 1=X, 2=O.
"""
from __future__ import annotations

import operator
from enum import Enum
from typing import Union

from .errors import InvalidMarkError

_EMPTY_ALIASES = {"", ".", "-", "0"}


class Mark(Enum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def code(self) -> int:
        return self.value

    @property
    def symbol(self) -> str:
        return "" if self is Mark.EMPTY else self.name

    @property
    def is_empty(self) -> bool:
        return self is Mark.EMPTY

    def __str__(self) -> str:
        return self.symbol or "empty"

    @classmethod
    def parse(cls, value: Union["Mark", int, str]) -> "Mark":
        """Coerce a mark, an integer code, or a symbol string into a Mark."""
        if isinstance(value, Mark):
            return value
        if isinstance(value, str):
            raw = value.strip().upper()
            if raw in _EMPTY_ALIASES:
                return cls.EMPTY
            if raw in ("X", "1"):
                return cls.X
            if raw in ("O", "2"):
                return cls.O
            raise InvalidMarkError(value)
        # bool is an int subclass; True/False are never marks
        if isinstance(value, bool):
            raise InvalidMarkError(value)
        try:
            code = operator.index(value)  # type: ignore[arg-type]
        except TypeError:
            raise InvalidMarkError(value) from None
        for m in cls:
            if m.value == code:
                return m
        raise InvalidMarkError(value)


PLAYER_MARKS = (Mark.X, Mark.O)
