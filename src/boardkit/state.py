"""
Board state: the grid of cells and the operations that change it.
Notes:
- The grid is size x size (3x3 by default) and never changes shape.
- Positions are (row, col) pairs or flat row-major indices 0..size*size-1.
- Serialized form is one digit per cell, row-major: 0=empty, 1=X, 2=O.
- Nothing here knows how a board is displayed; see presenters.
"""
from __future__ import annotations

import logging
import math
import operator
from typing import Dict, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from . import config
from .errors import (
    BoardFormatError,
    InvalidMarkError,
    InvalidPositionError,
    InvalidSizeError,
    OccupiedCellError,
)
from .marks import PLAYER_MARKS, Mark

logger = logging.getLogger(__name__)

Position = Union[int, Tuple[int, int]]


def _as_int(value: object) -> int:
    if isinstance(value, bool):
        raise TypeError("bool is not a board coordinate")
    return operator.index(value)  # type: ignore[arg-type]


class BoardState:
    """Cells of one board, mutated one cell at a time."""

    __slots__ = ("_size", "_grid")

    def __init__(self, size: int = config.DEFAULT_SIZE, cells: Optional[Sequence[Mark]] = None):
        try:
            size = _as_int(size)
        except TypeError:
            raise InvalidSizeError(size) from None
        if size < 1:
            raise InvalidSizeError(size)
        self._size = size
        if cells is None:
            self._grid: List[List[Mark]] = [[Mark.EMPTY] * size for _ in range(size)]
        else:
            flat = [Mark.parse(c) for c in cells]
            if len(flat) != size * size:
                raise BoardFormatError(
                    ''.join(str(m.code) for m in flat),
                    f"expected {size * size} cells, got {len(flat)}",
                )
            self._grid = [flat[r * size:(r + 1) * size] for r in range(size)]

    @classmethod
    def initialize(cls, size: Optional[int] = None) -> "BoardState":
        """Return a new board with every cell empty.

        size=None takes the configured default (BOARDKIT_SIZE, else 3).
        """
        if size is None:
            size = config.board_size()
        state = cls(size)
        logger.debug("initialized %dx%d board", state.size, state.size)
        return state

    @property
    def size(self) -> int:
        return self._size

    def resolve(self, position: Position) -> Tuple[int, int]:
        """Normalize a position to a (row, col) pair on this board."""
        n = self._size
        try:
            if isinstance(position, tuple):
                if len(position) != 2:
                    raise InvalidPositionError(position, n)
                row, col = _as_int(position[0]), _as_int(position[1])
            else:
                idx = _as_int(position)
                if not 0 <= idx < n * n:
                    raise InvalidPositionError(position, n)
                row, col = divmod(idx, n)
        except TypeError:
            raise InvalidPositionError(position, n) from None
        if not (0 <= row < n and 0 <= col < n):
            raise InvalidPositionError(position, n)
        return row, col

    def get(self, position: Position) -> Mark:
        row, col = self.resolve(position)
        return self._grid[row][col]

    def is_empty(self, position: Position) -> bool:
        return self.get(position).is_empty

    def update(self, position: Position, mark: Union[Mark, int, str]) -> "BoardState":
        """Place a player's mark on an empty cell and return this board.

        Raises InvalidPositionError for a cell off the grid, InvalidMarkError
        unless the mark is X or O, and OccupiedCellError if the cell already
        holds a mark. The board is unchanged whenever an error is raised.
        """
        row, col = self.resolve(position)
        m = Mark.parse(mark)
        if m not in PLAYER_MARKS:
            raise InvalidMarkError(mark)
        current = self._grid[row][col]
        if not current.is_empty:
            raise OccupiedCellError((row, col), current)
        self._grid[row][col] = m
        logger.debug("set (%d, %d) to %s", row, col, m)
        return self

    def rows(self) -> Tuple[Tuple[Mark, ...], ...]:
        return tuple(tuple(r) for r in self._grid)

    def cells(self) -> Tuple[Mark, ...]:
        return tuple(m for r in self._grid for m in r)

    def __iter__(self) -> Iterator[Tuple[int, int, Mark]]:
        for r, row in enumerate(self._grid):
            for c, m in enumerate(row):
                yield r, c, m

    def empty_positions(self) -> List[Tuple[int, int]]:
        return [(r, c) for r, c, m in self if m.is_empty]

    def counts(self) -> Dict[Mark, int]:
        out = {m: 0 for m in Mark}
        for m in self.cells():
            out[m] += 1
        return out

    def copy(self) -> "BoardState":
        return BoardState(self._size, self.cells())

    def to_array(self) -> np.ndarray:
        """Integer codes as a fresh (size, size) int8 array."""
        return np.array([[m.code for m in r] for r in self._grid], dtype=np.int8)

    def serialize(self) -> str:
        return ''.join(str(m.code) for m in self.cells())

    @classmethod
    def deserialize(cls, text: str) -> "BoardState":
        raw = text.strip()
        if not raw:
            raise BoardFormatError(text, "empty")
        bad = sorted({ch for ch in raw if ch not in "012"})
        if bad:
            raise BoardFormatError(text, f"unexpected characters {''.join(bad)!r}")
        size = math.isqrt(len(raw))
        if size * size != len(raw):
            raise BoardFormatError(text, f"length {len(raw)} is not a square number")
        return cls(size, [Mark(int(ch)) for ch in raw])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoardState):
            return NotImplemented
        return self._size == other._size and self._grid == other._grid

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"BoardState(size={self._size}, cells={self.serialize()!r})"
