"""Installs npm packages through the project's package manager."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from rich.console import Console

from core.exceptions import DependencyInstallError
from core.operation_results import DependencyResult
from terminal.components import StatusIndicators
from utilities.logging_utils import log_exception, safe_log
from utilities.package_manager import (
    CommandRunner,
    build_install_command,
    dedupe,
    detect_package_manager,
    format_command,
    run_command,
)


class DependencyInstaller:
    """Runs one install command per dependency group.

    Failures are reported with the exact command to run by hand and never
    propagate: files written before this step stay in place.
    """

    def __init__(
        self,
        project_root: Path,
        console: Console,
        runner: CommandRunner = run_command,
    ) -> None:
        """Initialize DependencyInstaller.

        Args:
            project_root: Root of the consumer project; lockfile detection
                and the subprocess both run here.
            console: Console for status output.
            runner: Executes a command and returns its exit code.
        """
        self.project_root = project_root
        self.console = console
        self.runner = runner

    def install(self, packages: Iterable[str], dev: bool = False) -> DependencyResult:
        """Install packages in a single package-manager invocation.

        Args:
            packages: Package names or specifiers.
            dev: Install as dev dependencies.

        Returns:
            DependencyResult; ok is True for an empty input.
        """
        names = tuple(dedupe(packages))
        if not names:
            return DependencyResult(packages=(), dev=dev, ok=True)

        manager = detect_package_manager(self.project_root)
        command = build_install_command(manager, names, dev=dev)
        command_text = format_command(command)
        label = "dev dependencies" if dev else "dependencies"

        self.console.print(StatusIndicators.info(f"Installing {label} with {manager.value}..."))
        safe_log(f"Running: {command_text}\n", level="INFO")

        try:
            returncode = self.runner(command, self.project_root)
        except OSError as e:
            error = DependencyInstallError(command_text, None, str(e))
            log_exception(error, f"Installing {label}", level="ERROR")
            self._report_failure(label, command_text)
            return DependencyResult(packages=names, dev=dev, ok=False, command=command_text)

        if returncode != 0:
            log_exception(
                DependencyInstallError(command_text, returncode),
                f"Installing {label}",
                level="ERROR",
            )
            self._report_failure(label, command_text)
            return DependencyResult(packages=names, dev=dev, ok=False, command=command_text)

        self.console.print(StatusIndicators.success(f"Installed {label}: {', '.join(names)}"))
        return DependencyResult(packages=names, dev=dev, ok=True, command=command_text)

    def _report_failure(self, label: str, command_text: str) -> None:
        self.console.print(StatusIndicators.error(f"Failed to install {label}: {command_text}"))
        self.console.print(StatusIndicators.warning("Please install them manually:"))
        self.console.print(StatusIndicators.command(command_text))
