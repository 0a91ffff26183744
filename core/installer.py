"""Installation orchestrator.

Runs one linear pipeline per requested item:

    validate project -> lookup -> [tailwind check / provision]
    -> fetch files -> install deps (runtime, then dev) -> update index

Only a missing package.json aborts the run. An unknown item is skipped
without touching the file system. Every other failure is recorded as a
warning and the pipeline moves on to the next step.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from core import catalog
from core.dependency_installer import DependencyInstaller
from core.exceptions import ItemNotFoundError, ProjectNotFoundError
from core.fetcher import FileFetcher
from core.index_updater import IndexUpdater, module_path_for
from core.operation_results import (
    IndexStatus,
    InstallSummary,
    PrerequisiteOutcome,
)
from core.prerequisites import TailwindChecker
from core.provisioner import TailwindProvisioner
from models.manifest import Manifest
from models.request import InstallRequest
from models.types import PROJECT_DESCRIPTOR
from terminal.components import StatusIndicators, step_header
from utilities.logging_utils import log_exception, safe_log


def validate_project(project_root: Path) -> None:
    """Ensure the project root holds a package.json.

    Raises:
        ProjectNotFoundError: If the descriptor is missing.
    """
    descriptor = project_root / PROJECT_DESCRIPTOR
    if not descriptor.is_file():
        raise ProjectNotFoundError(str(descriptor))


class Installer:
    """Sequences the installation steps for a single request."""

    def __init__(
        self,
        console: Console,
        checker: TailwindChecker,
        provisioner: TailwindProvisioner,
        fetcher: FileFetcher,
        dependency_installer: DependencyInstaller,
        index_updater: IndexUpdater,
        confirm: Callable[[str], bool],
    ) -> None:
        """Initialize the installer.

        Args:
            console: Console for step headers.
            checker: Read-only Tailwind check.
            provisioner: Tailwind setup, run after confirmation.
            fetcher: Downloads manifest files.
            dependency_installer: Runs the package manager.
            index_updater: Maintains the barrel file.
            confirm: Asks the operator a yes/no question.
        """
        self.console = console
        self.checker = checker
        self.provisioner = provisioner
        self.fetcher = fetcher
        self.dependency_installer = dependency_installer
        self.index_updater = index_updater
        self.confirm = confirm

    def install(self, request: InstallRequest) -> InstallSummary:
        """Install one catalog item into the project.

        Args:
            request: The user's selection.

        Returns:
            InstallSummary describing every step.

        Raises:
            ProjectNotFoundError: If the project root has no package.json.
        """
        validate_project(request.project_root)

        summary = InstallSummary(
            name=request.name,
            kind=request.kind,
            output_format=request.output_format,
            target_dir=request.target_path,
        )

        manifest = catalog.lookup(request.name, request.kind)
        if manifest is None:
            error = ItemNotFoundError(request.name, request.kind.value)
            log_exception(error, "Catalog lookup", level="WARNING")
            summary.found = False
            return summary

        safe_log(
            f"Installing {request.kind.value} {request.name} "
            f"({request.output_format.value}) into {request.target_path}\n",
            level="INFO",
        )

        if manifest.requires_tailwind:
            self._ensure_tailwind(request.project_root, summary)

        self.console.print(step_header(f"Adding {request.name} {request.kind.value}..."))
        summary.files = self.fetcher.fetch(
            manifest, request.name, request.output_format, request.target_path
        )
        if summary.files_failed():
            summary.warnings.append(
                f"{summary.files_failed()} of {len(summary.files)} file(s) could not be added"
            )

        self._install_dependencies(manifest, summary)

        self.console.print(step_header("Updating index..."))
        summary.index = self.index_updater.append_export(
            request.target_path,
            manifest.export_name,
            module_path_for(request.name, manifest.export_name),
            request.output_format,
        )
        if summary.index.status == IndexStatus.FAILED:
            summary.warnings.append(f"Could not update {summary.index.path}")

        return summary

    def _ensure_tailwind(self, project_root: Path, summary: InstallSummary) -> None:
        self.console.print(step_header("Checking Tailwind CSS..."))
        status = self.checker.check(project_root)
        if status.satisfied:
            self.console.print(StatusIndicators.success("Tailwind CSS is installed and configured"))
            summary.prerequisite = PrerequisiteOutcome.SATISFIED
            return

        summary.prerequisite_reason = status.reason
        self.console.print(StatusIndicators.warning(f"Tailwind CSS check failed: {status.reason}"))

        if not self.confirm("This item needs Tailwind CSS. Install and configure it now?"):
            summary.prerequisite = PrerequisiteOutcome.DECLINED
            summary.warnings.append(
                "Tailwind CSS is not set up; the item's styles will not apply until it is"
            )
            return

        if self.provisioner.provision(project_root):
            summary.prerequisite = PrerequisiteOutcome.PROVISIONED
        else:
            summary.prerequisite = PrerequisiteOutcome.PROVISION_FAILED
            summary.warnings.append("Tailwind CSS setup failed; follow the manual steps above")

    def _install_dependencies(self, manifest: Manifest, summary: InstallSummary) -> None:
        for packages, dev in ((manifest.dependencies, False), (manifest.dev_dependencies, True)):
            result = self.dependency_installer.install(packages, dev=dev)
            if result.skipped:
                continue
            summary.dependencies.append(result)
            if not result.ok:
                summary.warnings.append(f"Dependency install failed: {result.command}")
