from __future__ import annotations

from pathlib import Path

import pytest

import main
from terminal.cli import ParsedArgs


def test_list_works_outside_a_project(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    assert main.run(ParsedArgs(list_items=True), tmp_path) == 0

    out = capsys.readouterr().out
    assert "button" in out
    assert "server-side-errors" in out


def test_missing_package_json_exits_nonzero(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert main.run(ParsedArgs(name="button", yes=True), tmp_path) == 1

    assert "Not a project directory" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_invalid_config_falls_back_to_defaults(
    monkeypatch: pytest.MonkeyPatch, project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(main, "install_sigint_handler", lambda console: None)
    (project / "arcui.json").write_text('{"max_retries": 0}', encoding="utf-8")

    assert main.run(ParsedArgs(name="carousel", yes=True), project) == 0
    assert "Invalid configuration, using defaults" in capsys.readouterr().out


def test_unknown_item_exits_zero_and_is_reported_once(
    monkeypatch: pytest.MonkeyPatch, project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(main, "install_sigint_handler", lambda console: None)

    assert main.run(ParsedArgs(name="carousel", yes=True), project) == 0

    out = capsys.readouterr().out
    assert out.count("not found") == 1
    assert not (project / "src").exists()
