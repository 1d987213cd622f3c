"""
Tests for the interactive play script's command handling.
"""
import importlib.util
from pathlib import Path

import pytest

from gomoku_history.core.board import Mark
from gomoku_history.core.game import new_game


SCRIPT_PATH = Path(__file__).resolve().parent.parent / 'scripts' / 'play.py'


@pytest.fixture(scope='module')
def play():
    spec = importlib.util.spec_from_file_location('play_script', SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_parse_move(play):
    assert play.parse_move("7 7", 15) == 112
    assert play.parse_move("0,4", 15) == 4
    assert play.parse_move(" 1 , 2 ", 15) == 17
    assert play.parse_move("15 0", 15) == -1
    assert play.parse_move("7", 15) is None
    assert play.parse_move("a b", 15) is None


def test_parse_jump(play):
    assert play.parse_jump("start") == 0
    assert play.parse_jump("jump 4") == 4
    assert play.parse_jump("jump") is None
    assert play.parse_jump("jump x") is None


def test_handle_command_plays_and_jumps(play):
    game = new_game().unwrap()

    assert play.handle_command(game, "7 7")
    assert game.current_board()[112] == Mark.BLACK
    assert play.handle_command(game, "7 8")
    assert play.handle_command(game, "jump 1")
    assert game.current_ply == 1
    assert play.handle_command(game, "start")
    assert game.current_ply == 0
    assert game.history_length == 3


def test_handle_command_reports_errors(play, capsys):
    game = new_game().unwrap()
    play.handle_command(game, "7 7")
    play.handle_command(game, "7 7")
    play.handle_command(game, "20 20")
    play.handle_command(game, "jump 9")

    out = capsys.readouterr().out
    assert "Cell is already occupied" in out
    assert "Cell index is outside the board" in out
    assert "Ply is outside the recorded history" in out
    assert game.history_length == 2


def test_handle_command_history_and_quit(play, capsys):
    game = new_game().unwrap()
    play.handle_command(game, "0 0")
    assert play.handle_command(game, "history")
    out = capsys.readouterr().out
    assert "Go to game start" in out
    assert "You are at move #1" in out

    assert play.handle_command(game, "quit") is False
    assert play.handle_command(game, "Q") is False


def test_main_rejects_invalid_dimensions(play, capsys):
    assert play.main(["--size", "3", "--win-length", "5"]) == 1
    assert "ERROR" in capsys.readouterr().out


def test_main_quits_on_command(play, monkeypatch, capsys):
    commands = iter(["0 0", "quit"])
    monkeypatch.setattr('builtins.input', lambda prompt='': next(commands))

    assert play.main(["--size", "5", "--win-length", "3"]) == 0
    out = capsys.readouterr().out
    assert "Next player: White" in out
    assert "Thanks for playing!" in out
