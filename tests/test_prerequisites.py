from __future__ import annotations

import json
from pathlib import Path

import pytest

from core.prerequisites import TailwindChecker, parse_major_version


def _write_package(root: Path, deps: dict[str, str] | None = None, dev: dict[str, str] | None = None) -> None:
    data: dict[str, object] = {"name": "demo"}
    if deps is not None:
        data["dependencies"] = deps
    if dev is not None:
        data["devDependencies"] = dev
    (root / "package.json").write_text(json.dumps(data), encoding="utf-8")


@pytest.mark.parametrize(
    ("version_range", "major"),
    [
        ("3.4.1", 3),
        ("^3.4.1", 3),
        ("~3.3.0", 3),
        (">=3.0.0", 3),
        ("3.x", 3),
        ("v3.1.0", 3),
        ("^4.0.0", 4),
        ("latest", None),
        ("github:tailwindlabs/tailwindcss", None),
        ("", None),
    ],
)
def test_parse_major_version(version_range: str, major: int | None) -> None:
    assert parse_major_version(version_range) == major


def test_satisfied_when_installed_and_configured(tailwind_project: Path) -> None:
    status = TailwindChecker().check(tailwind_project)
    assert status.satisfied
    assert status.reason == ""


def test_runtime_dependency_counts(project: Path) -> None:
    _write_package(project, deps={"tailwindcss": "3.4.0"})
    (project / "tailwind.config.js").write_text("", encoding="utf-8")
    (project / "postcss.config.js").write_text("", encoding="utf-8")
    assert TailwindChecker().check(project).satisfied


def test_missing_package(project: Path) -> None:
    status = TailwindChecker().check(project)
    assert not status.satisfied
    assert "not installed" in status.reason


def test_unsupported_major_version_is_unsatisfied(tailwind_project: Path) -> None:
    _write_package(tailwind_project, dev={"tailwindcss": "^4.0.0"})
    status = TailwindChecker().check(tailwind_project)
    assert not status.satisfied
    assert "^4.0.0" in status.reason
    assert "3.x" in status.reason


@pytest.mark.parametrize("missing", ["tailwind.config.js", "postcss.config.js"])
def test_missing_config_file(tailwind_project: Path, missing: str) -> None:
    (tailwind_project / missing).unlink()
    status = TailwindChecker().check(tailwind_project)
    assert not status.satisfied
    assert missing in status.reason


def test_unreadable_descriptor_is_unsatisfied(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")
    status = TailwindChecker().check(tmp_path)
    assert not status.satisfied
    assert "package.json" in status.reason


def test_check_does_not_modify_project(project: Path) -> None:
    before = sorted(p.name for p in project.iterdir())
    TailwindChecker().check(project)
    assert sorted(p.name for p in project.iterdir()) == before


def test_descriptor_with_byte_order_mark(tailwind_project: Path) -> None:
    descriptor = tailwind_project / "package.json"
    descriptor.write_bytes(b"\xef\xbb\xbf" + descriptor.read_bytes())

    assert TailwindChecker().check(tailwind_project).satisfied


def test_non_utf8_descriptor_is_unsatisfied(tmp_path: Path) -> None:
    (tmp_path / "package.json").write_bytes(b'{"description": "caf\xe9"}')

    status = TailwindChecker().check(tmp_path)

    assert not status.satisfied
    assert "package.json" in status.reason
