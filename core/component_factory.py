"""Factory for creating and wiring the installer components.

Centralizes construction so the CLI and tests build the pipeline the same
way, swapping only the terminal- and network-facing collaborators.
"""

from __future__ import annotations

import signal
from collections.abc import Callable
from pathlib import Path
from types import FrameType

from rich.console import Console

from core.dependency_installer import DependencyInstaller
from core.fetcher import FileFetcher, HttpGetter, default_getter
from core.index_updater import IndexUpdater
from core.installer import Installer
from core.prerequisites import TailwindChecker
from core.provisioner import TailwindProvisioner
from core.stylesheet import StylesheetLocator
from models.config import AppConfig
from utilities.package_manager import CommandRunner, run_command


class ComponentFactory:
    """Factory for creating a configured Installer."""

    @staticmethod
    def create_fetcher(
        config: AppConfig,
        console: Console,
        http_get: HttpGetter | None = None,
    ) -> FileFetcher:
        """Create a FileFetcher bound to the configured source.

        Args:
            config: Application configuration.
            console: Console for status output.
            http_get: Optional getter overriding the network.

        Returns:
            Configured FileFetcher instance.
        """
        return FileFetcher(
            console=console,
            base_url=config.source_base_url,
            http_get=http_get or default_getter(config),
        )

    @staticmethod
    def create_provisioner(
        dependency_installer: DependencyInstaller,
        console: Console,
        ask_path: Callable[[str], str],
    ) -> TailwindProvisioner:
        """Create a TailwindProvisioner sharing the dependency installer."""
        return TailwindProvisioner(
            dependency_installer=dependency_installer,
            stylesheet_locator=StylesheetLocator(ask_path=ask_path, console=console),
            console=console,
        )

    @classmethod
    def create_installer(
        cls,
        config: AppConfig,
        project_root: Path,
        console: Console,
        confirm: Callable[[str], bool],
        ask_path: Callable[[str], str],
        http_get: HttpGetter | None = None,
        runner: CommandRunner = run_command,
    ) -> Installer:
        """Create an Installer with all components configured.

        Args:
            config: Application configuration.
            project_root: Root of the consumer project.
            console: Console shared by every step.
            confirm: Yes/no question callable.
            ask_path: Free-text path question callable.
            http_get: Optional getter overriding the network.
            runner: Command runner for the package manager.

        Returns:
            Ready-to-use Installer.
        """
        dependency_installer = DependencyInstaller(project_root, console, runner=runner)
        return Installer(
            console=console,
            checker=TailwindChecker(),
            provisioner=cls.create_provisioner(dependency_installer, console, ask_path),
            fetcher=cls.create_fetcher(config, console, http_get),
            dependency_installer=dependency_installer,
            index_updater=IndexUpdater(console),
            confirm=confirm,
        )


def install_sigint_handler(console: Console) -> None:
    """Install a SIGINT handler that leaves the terminal tidy.

    Args:
        console: Console to restore before re-raising as KeyboardInterrupt.
    """

    def _sigint_handler(sig: int, frame: FrameType | None) -> None:
        try:
            console.show_cursor(True)
            console.print()
        except Exception:
            pass
        raise KeyboardInterrupt

    signal.signal(signal.SIGINT, _sigint_handler)
