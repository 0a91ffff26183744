from __future__ import annotations

from pathlib import Path

import pytest

from models.types import PackageManager
from utilities import package_manager
from utilities.package_manager import (
    build_install_command,
    detect_package_manager,
    format_command,
)


def test_detects_npm_without_lockfile(tmp_path: Path) -> None:
    assert detect_package_manager(tmp_path) == PackageManager.NPM


def test_detects_yarn(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
    assert detect_package_manager(tmp_path) == PackageManager.YARN


def test_detects_pnpm(tmp_path: Path) -> None:
    (tmp_path / "pnpm-lock.yaml").write_text("", encoding="utf-8")
    assert detect_package_manager(tmp_path) == PackageManager.PNPM


def test_yarn_lock_wins_over_pnpm_lock(tmp_path: Path) -> None:
    (tmp_path / "yarn.lock").write_text("", encoding="utf-8")
    (tmp_path / "pnpm-lock.yaml").write_text("", encoding="utf-8")
    assert detect_package_manager(tmp_path) == PackageManager.YARN


@pytest.mark.parametrize(
    ("manager", "dev", "expected"),
    [
        (PackageManager.NPM, False, ["npm", "install", "clsx", "react-icons"]),
        (PackageManager.NPM, True, ["npm", "install", "--save-dev", "clsx", "react-icons"]),
        (PackageManager.YARN, False, ["yarn", "add", "clsx", "react-icons"]),
        (PackageManager.YARN, True, ["yarn", "add", "--dev", "clsx", "react-icons"]),
        (PackageManager.PNPM, False, ["pnpm", "add", "clsx", "react-icons"]),
        (PackageManager.PNPM, True, ["pnpm", "add", "--save-dev", "clsx", "react-icons"]),
    ],
)
def test_build_install_command(manager: PackageManager, dev: bool, expected: list[str]) -> None:
    assert build_install_command(manager, ["clsx", "react-icons"], dev=dev) == expected


def test_build_install_command_dedupes_packages() -> None:
    command = build_install_command(PackageManager.NPM, ["clsx", " clsx ", "", "zod"])
    assert command == ["npm", "install", "clsx", "zod"]


def test_format_command_quotes_when_needed() -> None:
    assert format_command(["npm", "install", "tailwindcss@3"]) == "npm install tailwindcss@3"
    assert format_command(["npm", "install", "a b"]) == "npm install 'a b'"


def test_run_command_inherits_stdio_and_returns_code(monkeypatch, tmp_path: Path) -> None:
    seen: dict[str, object] = {}

    class _Completed:
        returncode = 3

    def fake_run(command, cwd, check):
        seen.update(command=command, cwd=cwd, check=check)
        return _Completed()

    monkeypatch.setattr(package_manager.shutil, "which", lambda name: f"/usr/bin/{name}")
    monkeypatch.setattr(package_manager.subprocess, "run", fake_run)

    assert package_manager.run_command(["npm", "install", "clsx"], tmp_path) == 3
    assert seen == {
        "command": ["/usr/bin/npm", "install", "clsx"],
        "cwd": str(tmp_path),
        "check": False,
    }
