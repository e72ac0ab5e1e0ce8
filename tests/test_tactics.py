from terminal_ttt.board import Board, Mark
from terminal_ttt.tactics import completing_moves, fork_moves


def test_completing_moves_follow_line_order():
    b = Board.from_string("220211010")
    assert completing_moves(b, Mark.O) == [2, 6]
    assert completing_moves(b, Mark.X) == []


def test_completing_moves_deduplicate_shared_cell():
    # index 8 completes both row 2 and column 2 for X
    b = Board.from_string("001021110")
    assert completing_moves(b, Mark.X) == [8]


def test_no_completing_moves_on_empty_board():
    assert completing_moves(Board(), Mark.X) == []


def test_fork_moves_does_not_touch_board():
    b = Board.from_string("001020100")
    assert fork_moves(b, Mark.X) == [0, 8]
    assert b.to_string() == "001020100"
