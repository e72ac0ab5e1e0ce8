from terminal_ttt.settings import default_difficulty, default_seed
from terminal_ttt.strategy import Difficulty


def test_defaults_without_env(monkeypatch):
    monkeypatch.delenv("TTT_SEED", raising=False)
    monkeypatch.delenv("TTT_DIFFICULTY", raising=False)
    assert default_seed() is None
    assert default_difficulty() is Difficulty.HARD


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("TTT_SEED", "17")
    monkeypatch.setenv("TTT_DIFFICULTY", "Easy")
    assert default_seed() == 17
    assert default_difficulty() is Difficulty.EASY


def test_bad_env_values_fall_back(monkeypatch):
    monkeypatch.setenv("TTT_SEED", "not-a-number")
    monkeypatch.setenv("TTT_DIFFICULTY", "impossible")
    assert default_seed() is None
    assert default_difficulty() is Difficulty.HARD
