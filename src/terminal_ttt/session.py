"""
Session score: X wins, O wins and draws across replays within one process.
Teaching notes:
- `Score` is an immutable value; `record_result` returns a new one.
- Counts only ever go up; an ongoing verdict leaves the score as it was.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict

from .board import Mark
from .rules import Draw, Verdict, Win


@dataclass(frozen=True)
class Score:
    x_wins: int = 0
    o_wins: int = 0
    draws: int = 0

    @property
    def games(self) -> int:
        return self.x_wins + self.o_wins + self.draws

    def as_dict(self) -> Dict[str, int]:
        return {"x_wins": self.x_wins, "o_wins": self.o_wins, "draws": self.draws}


def record_result(score: Score, verdict: Verdict) -> Score:
    if isinstance(verdict, Win):
        if verdict.mark == Mark.X:
            return replace(score, x_wins=score.x_wins + 1)
        return replace(score, o_wins=score.o_wins + 1)
    if isinstance(verdict, Draw):
        return replace(score, draws=score.draws + 1)
    return score


class SessionTracker:
    def __init__(self, score: Score | None = None):
        self.score = score if score is not None else Score()

    def record_result(self, verdict: Verdict) -> Score:
        self.score = record_result(self.score, verdict)
        return self.score

    def snapshot(self) -> Dict[str, int]:
        return self.score.as_dict()
