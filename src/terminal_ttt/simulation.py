"""
Headless computer-vs-computer matches under given difficulties.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

import numpy as np

from .board import Mark
from .controller import Ended, GameMode, new_match
from .rules import Verdict
from .session import Score, SessionTracker
from .strategy import Difficulty, Strategy, strategy_for


def play_out(strategies: Dict[Mark, Strategy]) -> Tuple[Verdict, List[Tuple[Mark, int]]]:
    board, controller = new_match(GameMode.two_human())
    while True:
        mark = controller.active_mark
        assert mark is not None
        index = strategies[mark].choose_move(board, mark)
        outcome = controller.submit_move(index)
        if isinstance(outcome, Ended):
            return outcome.verdict, list(controller.history)


def run_series(
    x_difficulty: Difficulty,
    o_difficulty: Difficulty,
    rounds: int,
    seed: Optional[int] = None,
) -> Score:
    rng = np.random.default_rng(seed)
    strategies = {
        Mark.X: strategy_for(x_difficulty, rng),
        Mark.O: strategy_for(o_difficulty, rng),
    }
    tracker = SessionTracker()
    for r in range(rounds):
        verdict, history = play_out(strategies)
        tracker.record_result(verdict)
        logging.debug("round=%d moves=%s verdict=%s", r, [i for _, i in history], verdict)
    return tracker.score
