from terminal_ttt.board import Mark
from terminal_ttt.rules import DRAW, ONGOING, Win
from terminal_ttt.session import Score, SessionTracker, record_result


def test_record_result_counts_each_verdict_once():
    s = Score()
    s = record_result(s, Win(Mark.X, (0, 1, 2)))
    s = record_result(s, Win(Mark.O, (2, 4, 6)))
    s = record_result(s, Win(Mark.O, (0, 3, 6)))
    s = record_result(s, DRAW)
    assert s == Score(x_wins=1, o_wins=2, draws=1)
    assert s.games == 4


def test_ongoing_does_not_change_score():
    s = Score(1, 2, 3)
    assert record_result(s, ONGOING) is s


def test_record_result_returns_new_value():
    s = Score()
    t = record_result(s, DRAW)
    assert s == Score()
    assert t.draws == 1


def test_tracker_snapshot_and_monotonic_counts():
    tracker = SessionTracker()
    assert tracker.snapshot() == {"x_wins": 0, "o_wins": 0, "draws": 0}
    seen = []
    for verdict in [DRAW, Win(Mark.X, (3, 4, 5)), ONGOING, DRAW]:
        tracker.record_result(verdict)
        seen.append(tracker.snapshot())
    assert tracker.snapshot() == {"x_wins": 1, "o_wins": 0, "draws": 2}
    for before, after in zip(seen, seen[1:]):
        assert all(after[k] >= before[k] for k in before)


def test_tracker_accepts_existing_score():
    tracker = SessionTracker(Score(x_wins=5))
    tracker.record_result(Win(Mark.X, (0, 4, 8)))
    assert tracker.score.x_wins == 6
