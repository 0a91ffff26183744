"""Installation request model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from models.types import DEFAULT_TARGET_DIR, ItemKind, OutputFormat


@dataclass(frozen=True)
class InstallRequest:
    """A single user selection to install one catalog item.

    Attributes:
        kind: Component or template.
        name: Catalog key of the item.
        output_format: Typed or untyped source variant.
        target_dir: Output directory, relative to the project root.
        project_root: Root of the consumer project.
    """

    kind: ItemKind
    name: str
    output_format: OutputFormat = OutputFormat.TYPED
    target_dir: str = DEFAULT_TARGET_DIR
    project_root: Path = Path(".")

    @property
    def target_path(self) -> Path:
        """Absolute-or-relative path of the output directory."""
        return self.project_root / self.target_dir
