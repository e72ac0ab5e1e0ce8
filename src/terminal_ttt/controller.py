"""
Turn controller: whose turn it is, who supplies the move, and when the match ends.

The controller is a two-state machine. It starts in ``AwaitingMove(X)``; each
accepted move either hands the turn to the other mark or moves it to
``Finished(verdict)``, after which every submission is rejected. A rejected
move leaves both the board and the state untouched, so the host loop can
simply ask again.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from .board import Board, InvalidMove, Mark
from .rules import Verdict, evaluate, is_terminal
from .strategy import Difficulty, Strategy, strategy_for

HUMAN = "human"
COMPUTER = "computer"


@dataclass(frozen=True)
class GameMode:
    """Who plays: two humans, or one human against a computer opponent.

    ``difficulty`` is None for two humans. With a computer opponent the human
    plays X when ``human_goes_first`` is set and O otherwise.
    """

    difficulty: Optional[Difficulty] = None
    human_goes_first: bool = True

    @classmethod
    def two_human(cls) -> "GameMode":
        return cls()

    @classmethod
    def vs_computer(cls, difficulty: Difficulty, human_goes_first: bool = True) -> "GameMode":
        return cls(Difficulty(difficulty), human_goes_first)

    @property
    def against_computer(self) -> bool:
        return self.difficulty is not None

    @property
    def human_mark(self) -> Optional[Mark]:
        if not self.against_computer:
            return None
        return Mark.X if self.human_goes_first else Mark.O

    @property
    def computer_mark(self) -> Optional[Mark]:
        human = self.human_mark
        return human.other() if human is not None else None


@dataclass(frozen=True)
class AwaitingMove:
    active: Mark


@dataclass(frozen=True)
class Finished:
    verdict: Verdict


@dataclass(frozen=True)
class Continued:
    next_mark: Mark


@dataclass(frozen=True)
class Ended:
    verdict: Verdict


State = Union[AwaitingMove, Finished]
TurnOutcome = Union[Continued, Ended]


class TurnController:
    def __init__(self, board: Board, mode: GameMode, rng: Optional[np.random.Generator] = None):
        self.board = board
        self.mode = mode
        self.state: State = AwaitingMove(Mark.X)
        self.history: List[Tuple[Mark, int]] = []
        self.strategy: Optional[Strategy] = (
            strategy_for(mode.difficulty, rng) if mode.against_computer else None
        )

    @property
    def active_mark(self) -> Optional[Mark]:
        if isinstance(self.state, AwaitingMove):
            return self.state.active
        return None

    @property
    def finished(self) -> bool:
        return isinstance(self.state, Finished)

    def mover(self, mark: Mark) -> str:
        if self.mode.against_computer and mark == self.mode.computer_mark:
            return COMPUTER
        return HUMAN

    def is_computer_turn(self) -> bool:
        active = self.active_mark
        return active is not None and self.mover(active) == COMPUTER

    def submit_move(self, index: int) -> TurnOutcome:
        if isinstance(self.state, Finished):
            raise InvalidMove(index, "match is over")
        mark = self.state.active
        self.board.place(index, mark)
        self.history.append((mark, index))
        logging.debug("%s -> %d board=%s", mark.symbol, index, self.board.to_string())

        verdict = evaluate(self.board)
        if is_terminal(verdict):
            self.state = Finished(verdict)
            logging.debug("match finished: %s", verdict)
            return Ended(verdict)
        self.state = AwaitingMove(mark.other())
        return Continued(mark.other())

    def computer_move(self) -> Tuple[int, TurnOutcome]:
        """Let the configured opponent play the active mark; returns (index, outcome)."""
        if not self.is_computer_turn():
            raise RuntimeError("not the computer's turn")
        assert self.strategy is not None
        mark = self.state.active  # type: ignore[union-attr]
        index = self.strategy.choose_move(self.board, mark)
        logging.debug("computer %s difficulty=%s picks %d", mark.symbol, self.strategy.difficulty.value, index)
        return index, self.submit_move(index)


def new_match(mode: GameMode, rng: Optional[np.random.Generator] = None) -> Tuple[Board, TurnController]:
    board = Board()
    return board, TurnController(board, mode, rng)
