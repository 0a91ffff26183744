"""Host package manager detection and command building."""

from __future__ import annotations

import shlex
import shutil
import subprocess
from collections.abc import Callable, Iterable
from pathlib import Path

from models.types import LOCKFILES, PackageManager

# Runs a command in a directory and returns its exit code
CommandRunner = Callable[[list[str], Path], int]

_ADD_COMMANDS: dict[PackageManager, tuple[str, ...]] = {
    PackageManager.NPM: ("npm", "install"),
    PackageManager.YARN: ("yarn", "add"),
    PackageManager.PNPM: ("pnpm", "add"),
}

_DEV_FLAGS: dict[PackageManager, str] = {
    PackageManager.NPM: "--save-dev",
    PackageManager.YARN: "--dev",
    PackageManager.PNPM: "--save-dev",
}


def detect_package_manager(project_root: Path) -> PackageManager:
    """Detect the package manager from the lockfile in the project root.

    yarn.lock wins over pnpm-lock.yaml; npm is the fallback.

    Args:
        project_root: Root of the consumer project.

    Returns:
        The package manager to invoke.
    """
    for lockfile, manager in LOCKFILES:
        if (project_root / lockfile).exists():
            return manager
    return PackageManager.NPM


def dedupe(packages: Iterable[str]) -> list[str]:
    """Drop blank and repeated package names, keeping first-seen order."""
    seen: set[str] = set()
    result: list[str] = []
    for name in packages:
        name = name.strip()
        if name and name not in seen:
            seen.add(name)
            result.append(name)
    return result


def build_install_command(
    manager: PackageManager,
    packages: Iterable[str],
    dev: bool = False,
) -> list[str]:
    """Build a single install command for all packages.

    Args:
        manager: Package manager to invoke.
        packages: Package specifiers.
        dev: Install as dev dependencies.

    Returns:
        Command as an argument list.
    """
    command = list(_ADD_COMMANDS[manager])
    if dev:
        command.append(_DEV_FLAGS[manager])
    command.extend(dedupe(packages))
    return command


def format_command(command: list[str]) -> str:
    """Render a command the way an operator would type it."""
    return shlex.join(command)


def run_command(command: list[str], cwd: Path) -> int:
    """Run a command synchronously with inherited stdio.

    Args:
        command: Argument list.
        cwd: Working directory.

    Returns:
        The process exit code.

    Raises:
        FileNotFoundError: If the executable is not on PATH.
    """
    # npm and friends are .cmd shims on Windows
    executable = shutil.which(command[0]) or command[0]
    result = subprocess.run([executable, *command[1:]], cwd=str(cwd), check=False)
    return result.returncode
