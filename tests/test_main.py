# tests/test_main.py

import pytest

from main import build_parser, parse_move, resolve_difficulty, run_game
from engine.session import GameSession
from engine.state import GameStatus
from engine.utils import DIFFICULTIES, Difficulty


def test_parse_move_converts_to_zero_based():
    assert parse_move("r 3 4") == ("reveal", 2, 3)
    assert parse_move("open 1 1") == ("reveal", 0, 0)
    assert parse_move("F 2 5") == ("flag", 1, 4)


def test_parse_move_commands_without_cell():
    assert parse_move("q") == ("quit", -1, -1)
    assert parse_move("undo") == ("undo", -1, -1)
    assert parse_move("n") == ("new", -1, -1)


@pytest.mark.parametrize("raw", ["", "r 1", "x 1 1", "r a b"])
def test_parse_move_rejects_bad_input(raw):
    with pytest.raises(ValueError):
        parse_move(raw)


def test_resolve_difficulty_prefers_custom_dimensions():
    parser = build_parser()

    assert resolve_difficulty(parser.parse_args([])) == DIFFICULTIES["easy"]
    assert resolve_difficulty(parser.parse_args(["--difficulty", "hard"])) == DIFFICULTIES["hard"]
    args = parser.parse_args(["--rows", "4", "--cols", "5", "--mines", "3"])
    assert resolve_difficulty(args) == Difficulty(4, 5, 3)


def test_run_game_reads_moves_until_quit(monkeypatch, capsys):
    moves = iter(["r 1 4", "bogus", "u", "q"])
    monkeypatch.setattr("builtins.input", lambda _prompt: next(moves))
    session = GameSession()

    run_game(session, Difficulty(4, 4, 2), seed=6)

    out = capsys.readouterr().out
    assert session.status == GameStatus.RUNNING
    assert session.view.counts.revealed == 8
    assert "Invalid move" in out
    assert "There is no losing move to undo." in out
    assert "Goodbye!" in out
