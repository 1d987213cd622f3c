"""
Tests for the text rendering helpers.
"""
from gomoku_history.core.game import HistoryEntry, new_game
from gomoku_history.view.text import (
    history_label,
    history_lines,
    render_board,
    status_text,
    winning_cells,
)


def test_status_text(game, won_game):
    assert status_text(game) == "Next player: Black"
    game.play_move(0)
    assert status_text(game) == "Next player: White"
    assert status_text(won_game) == "Winner: Black"


def test_history_labels():
    assert history_label(HistoryEntry(0, True)) == "You are at game start"
    assert history_label(HistoryEntry(3, True)) == "You are at move #3"
    assert history_label(HistoryEntry(0, False)) == "Go to game start"
    assert history_label(HistoryEntry(2, False)) == "Go to move #2"


def test_history_lines_follow_current_ply(won_game):
    won_game.jump_to(2)
    lines = history_lines(won_game)

    assert len(lines) == 10
    assert lines[0] == "Go to game start"
    assert lines[2] == "You are at move #2"
    assert lines[9] == "Go to move #9"


def test_winning_cells(game, won_game):
    assert winning_cells(game) == frozenset()
    assert winning_cells(won_game) == frozenset({0, 1, 2, 3, 4})


def test_render_board_marks_stones_and_winning_line(won_game):
    lines = render_board(won_game).splitlines()

    # header, rule, 15 rows, rule, header
    assert len(lines) == 19
    row0 = lines[2]
    assert row0.count("[X]") == 5
    row1 = lines[3]
    assert row1.count(" O ") == 4
    assert "[" not in row1


def test_render_small_board():
    game = new_game(size=3, win_len=3).unwrap()
    game.play_move(4)
    lines = render_board(game).splitlines()

    assert lines[3] == "  1| .  X  . |1  "
