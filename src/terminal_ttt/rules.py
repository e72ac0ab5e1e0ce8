"""
Win/draw evaluation over the 8 fixed lines.
Teaching notes:
- Lines are scanned rows, then columns, then diagonals; the first uniform line wins.
- A verdict is recomputed from the cells every time; nothing is cached.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union

from .board import EMPTY, Board, Mark

Line = Tuple[int, int, int]

LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)


@dataclass(frozen=True)
class Ongoing:
    pass


@dataclass(frozen=True)
class Draw:
    pass


@dataclass(frozen=True)
class Win:
    mark: Mark
    line: Line


Verdict = Union[Ongoing, Win, Draw]

ONGOING = Ongoing()
DRAW = Draw()


def is_terminal(verdict: Verdict) -> bool:
    return not isinstance(verdict, Ongoing)


def evaluate(board: Board) -> Verdict:
    cells = board.cells
    for line in LINES:
        a, b, c = line
        v = cells[a]
        if v != EMPTY and v == cells[b] and v == cells[c]:
            return Win(Mark(v), line)
    if board.is_full():
        return DRAW
    return ONGOING


def describe(verdict: Verdict) -> str:
    if isinstance(verdict, Win):
        return f"Player {verdict.mark.symbol} wins!"
    if isinstance(verdict, Draw):
        return "It's a draw!"
    return "In progress"
