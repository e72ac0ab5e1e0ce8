"""Environment-first defaults for the command line.

Each helper reads its environment variable and falls back to a built-in
default, so flags only need to be given when overriding either.
"""

from __future__ import annotations

import os

from .strategy import Difficulty


def default_seed() -> int | None:
    """Seed from TTT_SEED, or None for fresh entropy each run."""
    env = os.getenv("TTT_SEED")
    if not env:
        return None
    try:
        return int(env)
    except ValueError:
        return None


def default_difficulty() -> Difficulty:
    env = (os.getenv("TTT_DIFFICULTY") or "").strip().lower()
    try:
        return Difficulty(env)
    except ValueError:
        return Difficulty.HARD
