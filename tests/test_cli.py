"""Tests for the othello-rules command line"""

import logging

import orjson
import pytest

from othello_rules.engine.board import Board
from othello_rules.engine.discs import Disc
from othello_rules.engine.notation import render_board
from othello_rules.logging_setup import LOG_FILE_NAME, reset_logging
from othello_rules.tools.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    config = tmp_path / "config.toml"
    config.write_text('[logging]\nlevel = "INFO"\n', encoding="utf-8")
    yield tmp_path
    reset_logging()


def run(workdir, *argv):
    return main(["--config", str(workdir / "config.toml"), *argv])


def test_show_prints_default_board(workdir, capsys):
    assert run(workdir, "show") == 0
    out = capsys.readouterr().out
    assert out.strip() == render_board(Board.default()).strip()


def test_legal_exit_codes(workdir, capsys):
    assert run(workdir, "legal", "d3", "--player", "1") == 0
    assert capsys.readouterr().out.strip() == "legal"
    assert run(workdir, "legal", "d3", "--player", "2") == 1
    assert capsys.readouterr().out.strip() == "illegal"


def test_legal_with_board_file(workdir, capsys):
    b = Board.empty()
    b[(0, 1)] = Disc.PLAYER2
    b[(0, 2)] = Disc.PLAYER2
    b[(0, 3)] = Disc.PLAYER1
    board_file = workdir / "board.txt"
    board_file.write_text(render_board(b), encoding="utf-8")
    assert run(workdir, "legal", "a1", "--player", "1", "--board", str(board_file)) == 0


def test_neighbours_lists_cells(workdir, capsys):
    assert run(workdir, "neighbours", "d4") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "d3 empty",
        "e3 empty",
        "e4 player1",
        "e5 player2",
        "d5 player1",
        "c5 empty",
        "c4 empty",
        "c3 empty",
    ]


def test_ray_walks_to_edge(workdir, capsys):
    assert run(workdir, "ray", "e4", "e3") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["direction up", "e3 empty", "e2 empty", "e1 empty"]


def test_errors_exit_with_status_2(workdir, capsys):
    assert run(workdir, "legal", "z9", "--player", "1") == 2
    assert run(workdir, "ray", "e4", "e2") == 2
    assert run(workdir, "show", "--board", str(workdir / "missing.txt")) == 2


def test_bad_config_exits_with_status_2(tmp_path, capsys):
    bad = tmp_path / "bad.toml"
    bad.write_text('[display]\nempty = "xx"\n', encoding="utf-8")
    assert main(["--config", str(bad), "show"]) == 2
    assert "othello-rules:" in capsys.readouterr().err


def test_commands_log_json_events(workdir, capsys):
    assert run(workdir, "legal", "e6", "--player", "1") == 0
    for h in logging.getLogger().handlers:
        h.flush()
    lines = (workdir / LOG_FILE_NAME).read_text(encoding="utf-8").splitlines()
    events = [l.split(" - ", 1)[1] for l in lines if " event.cli - " in l]
    assert len(events) == 1
    payload = orjson.loads(events[0])
    assert payload["event"] == "legal"
    assert payload["square"] == "e6"
    assert payload["legal"] is True


def test_undecodable_config_exits_with_status_2(tmp_path, capsys):
    bad = tmp_path / "binary.toml"
    bad.write_bytes(b"\xff\xfe[logging]\n")
    assert main(["--config", str(bad), "show"]) == 2
    assert "othello-rules:" in capsys.readouterr().err


def test_config_directory_exits_with_status_2(tmp_path, capsys):
    assert main(["--config", str(tmp_path), "show"]) == 2
    assert "othello-rules:" in capsys.readouterr().err


def test_unwritable_config_home_exits_with_status_2(tmp_path, monkeypatch, capsys):
    from othello_rules import settings as settings_mod

    # a regular file where the config directory should be
    blocker = tmp_path / "home"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setattr(settings_mod, "CONFIG_HOME", blocker)
    monkeypatch.setattr(settings_mod, "CONFIG_PATH", blocker / "config.toml")
    assert main(["show"]) == 2
    assert "othello-rules:" in capsys.readouterr().err
