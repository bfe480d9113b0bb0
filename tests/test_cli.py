import io
import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from tictactoe.cli import main

SRC = Path(__file__).resolve().parents[1] / "src"


def _run_cli(args: list[str], cwd: Path, stdin: str = "") -> subprocess.CompletedProcess:
    exe = [sys.executable, "-m", "tictactoe.cli"]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(p for p in [str(SRC), env.get("PYTHONPATH", "")] if p)
    return subprocess.run(exe + args, cwd=cwd, input=stdin, capture_output=True, text=True, env=env)


def test_replay_draw(capsys):
    assert main(["replay", "--moves", "5,2,6,4,1,9,7,3,8"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "O plays on 5"
    assert out[-1] == "Draw, board is full"
    assert len(out) == 10


def test_replay_x_first_wins(capsys):
    assert main(["replay", "--first", "X", "--moves", "1, 2, 4, 5, 7"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[-1] == "Game won by X"


def test_replay_runs_out_of_moves(capsys, caplog):
    caplog.set_level(logging.ERROR)
    assert main(["replay", "--moves", "1,2,3"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out == ["O plays on 1", "X plays on 2", "O plays on 3"]
    assert "No more input registered" in caplog.text


def test_state_reports_winner(caplog):
    caplog.set_level(logging.INFO)
    assert main(["state", "--board", "O   O   O"]) == 0
    assert "state=won winner=O full=False" in caplog.text


def test_state_reports_draw(caplog):
    caplog.set_level(logging.INFO)
    assert main(["state", "--board", "OXOXXOXOX"]) == 0
    assert "state=full winner=- full=True" in caplog.text


@pytest.mark.parametrize("bad", ["abc", "OX", "OXOXXOXOXO", "OXOXXOXO1"])
def test_state_invalid_boards(bad, caplog):
    caplog.set_level(logging.ERROR)
    assert main(["state", "--board", bad]) == 2
    assert "Invalid board string" in caplog.text


def test_play_on_console(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n2\nnope\n2\n4\n5\n7\n"))
    assert main(["play", "--first", "X"]) == 0
    out = capsys.readouterr().out
    assert "X, please enter a tile number (1-9):" in out
    assert "This tile is already marked. Please try another tile" in out
    assert "Please enter a number between 1 and 9" in out
    assert "X plays on 7" in out
    assert out.rstrip().splitlines()[-6] == "X Won the game!"


def test_play_aborts_when_input_ends(monkeypatch, caplog):
    caplog.set_level(logging.ERROR)
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main(["play", "--first", "O"]) == 1
    assert "aborted" in caplog.text


def test_play_first_player_from_environment(monkeypatch, capsys):
    monkeypatch.setenv("TTT_FIRST_PLAYER", "x")
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n2\n4\n5\n7\n"))
    assert main(["play"]) == 0
    out = capsys.readouterr().out
    assert "X plays on 1" in out
    assert "X Won the game!" in out


def test_play_bad_environment(monkeypatch, caplog):
    caplog.set_level(logging.ERROR)
    monkeypatch.setenv("TTT_FIRST_PLAYER", "nobody")
    assert main(["play"]) == 2
    assert "First player must be one of" in caplog.text


def test_play_seeded_first_player_is_reproducible(monkeypatch, capsys):
    firsts = []
    for _ in range(2):
        monkeypatch.setattr(sys, "stdin", io.StringIO("1\n2\n4\n5\n7\n"))
        assert main(["--seed", "7", "play", "--first", "random"]) == 0
        out = capsys.readouterr().out
        firsts.append([l for l in out.splitlines() if "plays on 1" in l])
    assert firsts[0] == firsts[1]


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage: ttt" in capsys.readouterr().out


def test_cli_subprocess_replay_and_state(tmp_path: Path):
    r = _run_cli(["replay", "--moves", "1,2,4,5,7"], cwd=tmp_path)
    assert r.returncode == 0
    assert "Game won by O" in r.stdout
    assert "state=won winner=O" in r.stderr

    r = _run_cli(["state", "--board", "111222111"], cwd=tmp_path)
    assert r.returncode == 2

    r = _run_cli(["play", "--first", "O"], cwd=tmp_path, stdin="5\n2\n6\n4\n1\n9\n7\n3\n8\n")
    assert r.returncode == 0
    assert "Board is full, it's a draw." in r.stdout


def test_replay_empty_entry_is_an_invalid_move(capsys):
    assert main(["replay", "--moves", "1,,2,4,5,7"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[:2] == ["O plays on 1", "X plays on 2"]
    assert out[-1] == "Game won by O"


def test_replay_very_long_move_is_reprompted(capsys):
    assert main(["replay", "--moves", "9" * 5000 + ",1,2,4,5,7"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Game won by O"
