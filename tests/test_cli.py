"""Tests for the command-line tools."""

import pytest

from dropfour.interfaces.cli import main, parse_moves


def test_parse_moves():
    assert parse_moves("3, 3,2") == [3, 3, 2]
    assert parse_moves("") == []
    with pytest.raises(ValueError):
        parse_moves("3,x")


def test_analyze_reports_block(capsys):
    assert main(["--depth", "2", "--seed", "5", "analyze", "--moves", "0,6,1,6,2"]) == 0
    out = capsys.readouterr().out
    assert "To move: TWO" in out
    assert "medium: column 3" in out
    assert "hard: column 3" in out


def test_analyze_single_difficulty(capsys):
    assert main(["analyze", "--moves", "3", "--difficulty", "medium"]) == 0
    out = capsys.readouterr().out
    assert "medium: column 3" in out
    assert "hard:" not in out


def test_analyze_finished_game(capsys):
    assert main(["analyze", "--moves", "3,0,3,0,3,0,3"]) == 0
    assert "Game over: PLAYER_ONE_WIN" in capsys.readouterr().out


def test_analyze_rejected_move(capsys):
    assert main(["analyze", "--moves", "9"]) == 1
    assert "rejected: INVALID_COLUMN" in capsys.readouterr().out


def test_analyze_bad_move_list(capsys):
    assert main(["analyze", "--moves", "a,b"]) == 1
    assert "Error:" in capsys.readouterr().out


def test_selfplay_tally(capsys):
    args = ["--seed", "7", "selfplay", "--first", "easy", "--second", "medium", "--games", "2"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert "easy (X) vs medium (O) over 2 games" in out
    assert "Draws:" in out


def test_benchmark_scores_agree(capsys):
    assert main(["--depth", "2", "--seed", "1", "benchmark", "--iterations", "2"]) == 0
    assert "Score mismatches: 0" in capsys.readouterr().out


def test_validate(capsys):
    assert main(["validate"]) == 0
    assert "8/8 scenarios passed" in capsys.readouterr().out


@pytest.mark.parametrize("rows, columns", [("4", "4"), ("5", "9"), ("8", "5")])
def test_validate_on_configured_board_size(capsys, rows, columns):
    assert main(["--rows", rows, "--columns", columns, "validate"]) == 0
    assert "8/8 scenarios passed" in capsys.readouterr().out


def test_missing_command(capsys):
    assert main([]) == 1
