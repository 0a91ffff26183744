"""Core installation workflow: catalog, checks, fetching and reporting."""

from core.catalog import CATALOG, list_items, lookup
from core.component_factory import ComponentFactory, install_sigint_handler
from core.dependency_installer import DependencyInstaller
from core.fetcher import FileFetcher
from core.index_updater import IndexUpdater
from core.installer import Installer, validate_project
from core.operation_results import (
    DependencyResult,
    FileResult,
    IndexResult,
    IndexStatus,
    InstallSummary,
    PrerequisiteOutcome,
    PrerequisiteStatus,
    StylesheetResult,
    StylesheetStatus,
)
from core.prerequisites import TailwindChecker
from core.provisioner import TailwindProvisioner
from core.result_formatter import ResultFormatter
from core.result_printer import ResultPrinter
from core.stylesheet import StylesheetLocator

__all__ = [
    "CATALOG",
    "ComponentFactory",
    "DependencyInstaller",
    "DependencyResult",
    "FileFetcher",
    "FileResult",
    "IndexResult",
    "IndexStatus",
    "IndexUpdater",
    "install_sigint_handler",
    "Installer",
    "InstallSummary",
    "list_items",
    "lookup",
    "PrerequisiteOutcome",
    "PrerequisiteStatus",
    "ResultFormatter",
    "ResultPrinter",
    "StylesheetLocator",
    "StylesheetResult",
    "StylesheetStatus",
    "TailwindChecker",
    "TailwindProvisioner",
    "validate_project",
]
