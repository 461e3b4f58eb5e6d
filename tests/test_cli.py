"""Tests for the flagplay command line."""

import json
import sys

import pytest

from flagplay.__main__ import main


PLAY = {
    "offense": [
        {"id": "qb", "x": 0.5, "y": 0.85, "side": "offense", "position": "QB"},
        {
            "id": "x", "x": 0.8, "y": 0.8125, "side": "offense", "position": "WR",
            "route": {"segments": [{"points": [{"x": 0.8, "y": 0.75}, {"x": 0.99, "y": 0.75}]}]},
        },
    ],
    "defense": [],
}


@pytest.fixture
def play_file(tmp_path):
    path = tmp_path / "play.json"
    path.write_text(json.dumps(PLAY))
    return path


def run_cli(monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["flagplay", *args])
    main()


class TestCLI:
    """Tests for running a play file from the command line."""

    def test_play_by_play(self, monkeypatch, capsys, play_file):
        run_cli(monkeypatch, str(play_file), "--seed", "3")
        out = capsys.readouterr().out
        assert "Ball snapped!" in out
        assert "Result:" in out

    def test_json_output(self, monkeypatch, capsys, play_file):
        run_cli(monkeypatch, str(play_file), "--seed", "3", "--json", "--frames")
        data = json.loads(capsys.readouterr().out)
        assert data["phases"][-1] == "play_over"
        assert data["frames"]

    def test_missing_play_file_argument(self, monkeypatch):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch)
        assert exc.value.code == 2

    def test_invalid_play(self, monkeypatch, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"offense": []}))
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, str(path))
        assert exc.value.code == 2

    def test_play_file_not_found(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, str(tmp_path / "missing.json"))
        assert exc.value.code == 2
        assert "Cannot read play file" in capsys.readouterr().err

    def test_malformed_json(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json")
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, str(path))
        assert exc.value.code == 2
        assert "Cannot read play file" in capsys.readouterr().err

    def test_json_that_is_not_a_play(self, monkeypatch, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        with pytest.raises(SystemExit) as exc:
            run_cli(monkeypatch, str(path))
        assert exc.value.code == 2
