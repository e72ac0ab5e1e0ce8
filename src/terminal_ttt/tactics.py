"""
Tactics and simple motifs: completing moves (wins/blocks) and forks.
Teaching notes:
- A completing move fills the last empty cell of a line already holding two of one mark.
- Completing moves are reported in line order, which is the order the Hard opponent
  consults them in.
- Forks (two threats at once) are listed for analysis only; the Hard opponent does not
  look for them.
"""
from typing import List

from .board import EMPTY, Board, Mark
from .rules import LINES


def completing_moves(board: Board, mark: Mark) -> List[int]:
    cells = board.cells
    moves: List[int] = []
    for line in LINES:
        values = [cells[i] for i in line]
        if values.count(mark) == 2 and values.count(EMPTY) == 1:
            idx = line[values.index(EMPTY)]
            if idx not in moves:
                moves.append(idx)
    return moves


def fork_moves(board: Board, mark: Mark) -> List[int]:
    forks: List[int] = []
    for i in board.empty_cells():
        b = board.copy()
        b.place(i, mark)
        if len(completing_moves(b, mark)) >= 2:
            forks.append(i)
    return forks
