"""Result objects produced by each installation step.

Steps never raise for recoverable failures; they return one of these
objects instead, and the orchestrator collects them into an
InstallSummary that the ResultPrinter renders after the run.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from models.types import ItemKind, OutputFormat


class PrerequisiteOutcome(Enum):
    """What happened with the Tailwind prerequisite for one install."""

    NOT_REQUIRED = "not_required"
    SATISFIED = "satisfied"
    PROVISIONED = "provisioned"
    PROVISION_FAILED = "provision_failed"
    DECLINED = "declined"


class StylesheetStatus(Enum):
    """Outcome of ensuring the Tailwind directives in the entry stylesheet."""

    ALREADY_PRESENT = "already_present"
    UPDATED = "updated"
    CREATED = "created"
    FAILED = "failed"


class IndexStatus(Enum):
    """Outcome of appending an export to the barrel file."""

    ADDED = "added"
    ALREADY_PRESENT = "already_present"
    FAILED = "failed"


@dataclass(frozen=True)
class PrerequisiteStatus:
    """Result of the read-only Tailwind check."""

    satisfied: bool
    reason: str = ""


@dataclass(frozen=True)
class FileResult:
    """Outcome of fetching and writing one manifest file."""

    filename: str
    path: Path
    ok: bool
    error: str | None = None


@dataclass(frozen=True)
class StylesheetResult:
    """Outcome of the stylesheet locator."""

    status: StylesheetStatus
    path: Path | None = None
    error: str | None = None


@dataclass(frozen=True)
class DependencyResult:
    """Outcome of one package-manager invocation."""

    packages: tuple[str, ...]
    dev: bool
    ok: bool
    command: str | None = None

    @property
    def skipped(self) -> bool:
        """True when there was nothing to install."""
        return not self.packages


@dataclass(frozen=True)
class IndexResult:
    """Outcome of the barrel-file update."""

    status: IndexStatus
    path: Path
    line: str
    error: str | None = None


@dataclass
class InstallSummary:
    """Everything that happened while installing one item.

    An item that is not in the catalog yields a summary with found=False
    and no step results.
    """

    name: str
    kind: ItemKind
    output_format: OutputFormat
    target_dir: Path
    found: bool = True
    prerequisite: PrerequisiteOutcome = PrerequisiteOutcome.NOT_REQUIRED
    prerequisite_reason: str = ""
    files: list[FileResult] = field(default_factory=lambda: [])
    dependencies: list[DependencyResult] = field(default_factory=lambda: [])
    index: IndexResult | None = None
    warnings: list[str] = field(default_factory=lambda: [])

    def files_written(self) -> int:
        """Number of files written successfully."""
        return sum(1 for f in self.files if f.ok)

    def files_failed(self) -> int:
        """Number of files that could not be fetched or written."""
        return sum(1 for f in self.files if not f.ok)

    def has_warnings(self) -> bool:
        """Check if any step reported a recoverable failure."""
        return len(self.warnings) > 0

    def succeeded(self) -> bool:
        """True when the item was found and at least one file was written."""
        return self.found and self.files_written() > 0
