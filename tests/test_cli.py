import io
from pathlib import Path

from astar2d import main


def test_main_runs_single_command(capsys, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main.main(["scenarios"]) == 0
    assert capsys.readouterr().out.split() == ["hill", "l_shape", "spikes"]


def test_main_accepts_slash_prefixed_command(capsys, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main.main(["/scenarios"]) == 0
    assert "spikes" in capsys.readouterr().out


def test_main_reads_commands_until_quit(capsys, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("/scenarios\n/quit\n/help\n"))
    assert main.main([]) == 0
    out = capsys.readouterr().out
    assert "l_shape" in out
    assert "Available commands" not in out


def test_main_stops_at_eof(capsys, tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("/help\n"))
    assert main.main([]) == 0
    assert "Available commands" in capsys.readouterr().out


def test_main_single_command_failure_returns_one(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main.main(["show", "maze"]) == 1
    assert main.main(["teleport"]) == 1
