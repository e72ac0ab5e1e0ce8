"""
Board model: the 9-cell grid, marks, and the board-string codec.
Teaching notes:
- Cells are 0=empty, 1=X, 2=O, row-major (index = row * 3 + col). X always starts.
- A placed mark is never removed or overwritten; `place` is the only mutation.
- Board strings are 9 digits of 0/1/2, e.g. "100020000".
"""
from __future__ import annotations

from enum import IntEnum
from typing import List, Tuple

EMPTY = 0
SIZE = 9


class Mark(IntEnum):
    X = 1
    O = 2

    def other(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X

    @property
    def symbol(self) -> str:
        return self.name


class InvalidMove(ValueError):
    """Raised for an out-of-range index, an occupied cell, or a finished match."""

    def __init__(self, index: int, reason: str):
        super().__init__(f"invalid move at {index}: {reason}")
        self.index = index
        self.reason = reason


def parse_board_string(raw: str) -> List[int]:
    raw = raw.strip()
    if len(raw) != SIZE or any(c not in "012" for c in raw):
        raise ValueError("Invalid board string. Must be 9 chars of 0/1/2.")
    return [int(c) for c in raw]


class Board:
    def __init__(self, cells: List[int] | None = None):
        if cells is None:
            cells = [EMPTY] * SIZE
        if len(cells) != SIZE or any(c not in (EMPTY, Mark.X, Mark.O) for c in cells):
            raise ValueError(f"Board needs {SIZE} cells of 0/1/2, got {cells!r}")
        self._cells: List[int] = [int(c) for c in cells]

    @classmethod
    def from_string(cls, raw: str) -> "Board":
        return cls(parse_board_string(raw))

    def to_string(self) -> str:
        return ''.join(str(c) for c in self._cells)

    @property
    def cells(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    def cell_at(self, index: int) -> int:
        return self._cells[index]

    def place(self, index: int, mark: Mark) -> None:
        if not 0 <= index < SIZE:
            raise InvalidMove(index, "out of range")
        if self._cells[index] != EMPTY:
            raise InvalidMove(index, "cell occupied")
        self._cells[index] = int(mark)

    def empty_cells(self) -> List[int]:
        return [i for i, v in enumerate(self._cells) if v == EMPTY]

    def is_full(self) -> bool:
        return EMPTY not in self._cells

    def copy(self) -> "Board":
        return Board(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Board('{self.to_string()}')"
