from __future__ import annotations

import json

import pytest
import typer

import tenfoot.cli as cli
from tenfoot.settings import Settings


@pytest.fixture(autouse=True)
def _settings(monkeypatch):
    monkeypatch.setattr(cli, "load_settings", lambda: Settings(_env_file=None))


def _walk(keys, items, **kwargs):
    params = dict(
        columns=None,
        start=0,
        wrap_horizontal=None,
        wrap_vertical=None,
        section_break=None,
        wasd=None,
        text_entry=False,
        json_out=True,
    )
    params.update(kwargs)
    cli.walk(keys, items=items, **params)


def test_cli_rank_json(capsys):
    cli.rank("mine", ["Terraria", "Minecraft", "Counter-Strike 2"], min_score=None, json_out=True)

    rows = json.loads(capsys.readouterr().out)
    assert rows == [{"label": "Minecraft", "score": 0.95}]


def test_cli_rank_table(capsys):
    cli.rank("h", ["Hades", "Hollow Knight", "Celeste"], min_score=None, json_out=False)

    out = capsys.readouterr().out
    assert "Hades" in out
    assert "Hollow Knight" in out
    assert "Celeste" not in out


def test_cli_rank_no_matches(capsys):
    cli.rank("xyz", ["abc"], min_score=None, json_out=False)
    assert "No matches" in capsys.readouterr().out


def test_cli_walk_wraps_right(capsys):
    _walk(["right"], 12, columns=3, start=2, wrap_horizontal=True)

    report = json.loads(capsys.readouterr().out)
    assert report["columns"] == 3
    assert report["steps"] == [{"key": "right", "handled": True, "index": 3, "left_grid": None}]


def test_cli_walk_reports_boundary_exit(capsys):
    _walk(["up", "left", "ArrowDown"], 9, columns=3)

    steps = json.loads(capsys.readouterr().out)["steps"]
    assert steps[0] == {"key": "up", "handled": True, "index": 0, "left_grid": "up"}
    assert steps[1] == {"key": "left", "handled": True, "index": 0, "left_grid": "left"}
    assert steps[2]["index"] == 3


def test_cli_walk_section_break(capsys):
    _walk(["w"], 12, columns=3, start=6, section_break=6)

    steps = json.loads(capsys.readouterr().out)["steps"]
    assert steps[0]["index"] == 5


def test_cli_walk_text_entry_blocks_wasd(capsys):
    _walk(["d"], 9, columns=3, text_entry=True)

    steps = json.loads(capsys.readouterr().out)["steps"]
    assert steps[0]["handled"] is False
    assert steps[0]["index"] == 0


def test_cli_walk_rejects_unknown_key():
    with pytest.raises(typer.Exit) as exc:
        _walk(["jump"], 9, columns=3)
    assert exc.value.exit_code == 2


def test_cli_walk_rejects_negative_items():
    with pytest.raises(typer.Exit):
        _walk(["up"], -1, columns=3)


def test_cli_walk_table(capsys):
    _walk(["right", "down"], 9, columns=3, json_out=False)

    out = capsys.readouterr().out
    assert "9 items" in out
    assert "right" in out


def test_cli_config(capsys):
    cli.config()
    out = capsys.readouterr().out
    assert "Configuration" in out
    assert "WASD" in out
