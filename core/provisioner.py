"""Installs and configures Tailwind CSS in the consumer project."""

from __future__ import annotations

from pathlib import Path

from rich.console import Console, Group
from rich.text import Text

from core.dependency_installer import DependencyInstaller
from core.exceptions import FileWriteError
from core.operation_results import StylesheetStatus
from core.stylesheet import StylesheetLocator
from models.types import (
    POSTCSS_CONFIG_CONTENT,
    POSTCSS_CONFIG_FILENAME,
    TAILWIND_CONFIG_CONTENT,
    TAILWIND_CONFIG_FILENAME,
    TAILWIND_DIRECTIVES,
    TAILWIND_INSTALL_PACKAGES,
)
from terminal.components import Panels, StatusIndicators
from terminal.theme import theme
from utilities.logging_utils import log_exception, safe_log
from utilities.package_manager import (
    build_install_command,
    detect_package_manager,
    format_command,
)


class TailwindProvisioner:
    """Sets up Tailwind in four steps: packages, two config files, stylesheet.

    A failed step prints the complete manual setup recipe and the run
    continues; provisioning is never fatal to the parent installation.
    """

    CONFIG_FILES: tuple[tuple[str, str], ...] = (
        (TAILWIND_CONFIG_FILENAME, TAILWIND_CONFIG_CONTENT),
        (POSTCSS_CONFIG_FILENAME, POSTCSS_CONFIG_CONTENT),
    )

    def __init__(
        self,
        dependency_installer: DependencyInstaller,
        stylesheet_locator: StylesheetLocator,
        console: Console,
    ) -> None:
        self.dependency_installer = dependency_installer
        self.stylesheet_locator = stylesheet_locator
        self.console = console

    def provision(self, project_root: Path) -> bool:
        """Install and configure Tailwind.

        Args:
            project_root: Root of the consumer project.

        Returns:
            True if every step succeeded, False otherwise (the manual
            recipe has already been printed).
        """
        self.console.print(StatusIndicators.info("Setting up Tailwind CSS..."))

        result = self.dependency_installer.install(TAILWIND_INSTALL_PACKAGES, dev=True)
        if not result.ok:
            self.print_manual_steps(project_root)
            return False

        for filename, content in self.CONFIG_FILES:
            if not self._write_config(project_root / filename, content):
                self.print_manual_steps(project_root)
                return False

        stylesheet = self.stylesheet_locator.ensure_directives(project_root)
        if stylesheet.status == StylesheetStatus.FAILED:
            self.print_manual_steps(project_root)
            return False

        safe_log("Tailwind provisioning completed\n", level="INFO")
        self.console.print(StatusIndicators.success("Tailwind CSS is set up"))
        return True

    def _write_config(self, path: Path, content: str) -> bool:
        """Create a configuration file unless it already exists."""
        if path.exists():
            self.console.print(StatusIndicators.info(f"{path.name} already exists, leaving it as is"))
            return True

        try:
            path.write_text(content, encoding="utf-8")
        except OSError as e:
            error = FileWriteError(str(path), str(e))
            log_exception(error, "Writing Tailwind configuration", level="ERROR")
            self.console.print(StatusIndicators.error(str(error)))
            return False

        self.console.print(StatusIndicators.success(f"Created {path.name}"))
        return True

    def manual_steps(self, project_root: Path) -> str:
        """Build the manual setup recipe for this project."""
        manager = detect_package_manager(project_root)
        command = format_command(
            build_install_command(manager, TAILWIND_INSTALL_PACKAGES, dev=True)
        )
        return (
            "1. Install Tailwind CSS and its peers:\n\n"
            f"    {command}\n\n"
            f"2. Create {TAILWIND_CONFIG_FILENAME}:\n\n"
            f"{_indent(TAILWIND_CONFIG_CONTENT)}\n"
            f"3. Create {POSTCSS_CONFIG_FILENAME}:\n\n"
            f"{_indent(POSTCSS_CONFIG_CONTENT)}\n"
            "4. Add these lines at the top of your main CSS file:\n\n"
            f"{_indent(TAILWIND_DIRECTIVES)}"
        )

    def print_manual_steps(self, project_root: Path) -> None:
        self.console.print(
            Panels.warning(
                Group(
                    Text("Tailwind CSS could not be set up automatically.", style=theme.styles.BOLD),
                    Text(""),
                    Text(self.manual_steps(project_root)),
                ),
                title="Manual Tailwind setup",
            )
        )


def _indent(block: str, prefix: str = "    ") -> str:
    return "".join(f"{prefix}{line}" if line.strip() else line for line in block.splitlines(True))
