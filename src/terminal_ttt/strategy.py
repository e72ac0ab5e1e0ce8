"""
Computer opponents.

Easy picks uniformly among the empty cells. Hard is a one-ply heuristic:
take a winning cell if one exists, otherwise block the opponent's winning
cell, otherwise play like Easy. Neither searches deeper, so Hard can be beaten
with a fork.

The caller always tells a strategy which mark it plays; nothing here infers it
from the number of marks on the board.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Optional

import numpy as np

from .board import Board, Mark
from .tactics import completing_moves


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"


class NoLegalMoves(AssertionError):
    """A strategy was asked to move on a full board."""


class Strategy:
    difficulty: Difficulty

    def choose_move(self, board: Board, own_mark: Mark) -> int:
        raise NotImplementedError


class RandomStrategy(Strategy):
    difficulty = Difficulty.EASY

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose_move(self, board: Board, own_mark: Mark) -> int:
        moves = board.empty_cells()
        if not moves:
            raise NoLegalMoves(f"no empty cell for {own_mark.symbol} on {board.to_string()}")
        return int(self.rng.choice(moves))


class BlockingStrategy(Strategy):
    difficulty = Difficulty.HARD

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.fallback = RandomStrategy(rng)

    def choose_move(self, board: Board, own_mark: Mark) -> int:
        if board.is_full():
            raise NoLegalMoves(f"no empty cell for {own_mark.symbol} on {board.to_string()}")
        wins = completing_moves(board, own_mark)
        if wins:
            logging.debug("%s takes win at %d", own_mark.symbol, wins[0])
            return wins[0]
        blocks = completing_moves(board, own_mark.other())
        if blocks:
            logging.debug("%s blocks at %d", own_mark.symbol, blocks[0])
            return blocks[0]
        return self.fallback.choose_move(board, own_mark)


def strategy_for(difficulty: Difficulty, rng: Optional[np.random.Generator] = None) -> Strategy:
    difficulty = Difficulty(difficulty)
    if difficulty is Difficulty.HARD:
        return BlockingStrategy(rng)
    return RandomStrategy(rng)


def choose_move(
    board: Board,
    mark: Mark,
    difficulty: Difficulty,
    rng: Optional[np.random.Generator] = None,
) -> int:
    return strategy_for(difficulty, rng).choose_move(board, mark)
