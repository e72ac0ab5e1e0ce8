import pytest

from terminal_ttt.board import Board, Mark
from terminal_ttt.rules import DRAW, LINES, ONGOING, Draw, Ongoing, Win, evaluate, is_terminal


def test_lines_are_rows_then_columns_then_diagonals():
    assert LINES == (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )


@pytest.mark.parametrize("key,mark,line", [
    ("111220000", Mark.X, (0, 1, 2)),
    ("110222100", Mark.O, (3, 4, 5)),
    ("120200111", Mark.X, (6, 7, 8)),
    ("210210201", Mark.O, (0, 3, 6)),
    ("120120020", Mark.O, (1, 4, 7)),
    ("201201001", Mark.X, (2, 5, 8)),
])
def test_evaluate_reports_winner_and_line(key: str, mark: Mark, line):
    assert evaluate(Board.from_string(key)) == Win(mark, line)


def test_evaluate_diagonals():
    assert evaluate(Board.from_string("120210001")) == Win(Mark.X, (0, 4, 8))
    assert evaluate(Board.from_string("221010100")) == Win(Mark.X, (2, 4, 6))


def test_first_line_in_order_wins_ties():
    # two uniform lines at once: row 0 is reported before column 0
    b = Board.from_string("111100100")
    assert evaluate(b) == Win(Mark.X, (0, 1, 2))


def test_full_board_without_line_is_draw():
    b = Board.from_string("121121212")
    assert evaluate(b) == DRAW
    assert isinstance(evaluate(b), Draw)


def test_win_on_full_board_is_not_draw():
    assert evaluate(Board.from_string("111221122")) == Win(Mark.X, (0, 1, 2))


def test_empty_board_is_ongoing():
    verdict = evaluate(Board())
    assert isinstance(verdict, Ongoing)
    assert not is_terminal(verdict)


def test_evaluate_is_pure():
    b = Board.from_string("110220000")
    assert evaluate(b) == evaluate(b) == ONGOING
    assert b.to_string() == "110220000"
