"""Manifest data models describing installable catalog items."""

from __future__ import annotations

from dataclasses import dataclass

from models.types import ItemKind, OutputFormat


@dataclass(frozen=True)
class ManifestFile:
    """One remote file belonging to a catalog item.

    Attributes:
        filename: Name written inside the item directory.
        source: Path relative to the remote raw-content root.
        output_format: Format variant this file belongs to, or None when the
            file is shared by every format (stylesheets).
    """

    filename: str
    source: str
    output_format: OutputFormat | None = None

    def resolve_url(self, base_url: str) -> str:
        """Build the download URL for this file.

        Args:
            base_url: Raw-content root URL.

        Returns:
            Absolute URL of the remote file.
        """
        return f"{base_url.rstrip('/')}/{self.source.lstrip('/')}"

    def matches(self, output_format: OutputFormat) -> bool:
        """Check whether the file is written for the given format."""
        return self.output_format is None or self.output_format == output_format


@dataclass(frozen=True)
class Manifest:
    """Catalog entry describing one item's files and dependencies."""

    kind: ItemKind
    export_name: str
    files: tuple[ManifestFile, ...]
    dependencies: tuple[str, ...] = ()
    dev_dependencies: tuple[str, ...] = ()
    requires_tailwind: bool = False
    category: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        """Validate manifest invariants."""
        if not self.files:
            raise ValueError(f"Manifest for {self.export_name} has no files")

        names = [f.filename for f in self.files]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(
                f"Duplicate filenames in manifest for {self.export_name}: "
                f"{', '.join(duplicates)}"
            )

        if self.category is not None and self.kind != ItemKind.TEMPLATE:
            raise ValueError("Only templates may carry a category")

    def files_for(self, output_format: OutputFormat) -> list[ManifestFile]:
        """Return the files written for an output format, in manifest order.

        Format-less files are always included; files tagged with another
        format are excluded.
        """
        return [f for f in self.files if f.matches(output_format)]
