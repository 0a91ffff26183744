"""Appends re-export lines to the generated barrel file.

The duplicate check is a plain substring test against the exact line this
module generates. A hand-edited entry with different quoting or spacing is
not recognised and the line is appended again.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from core.exceptions import FileWriteError
from core.operation_results import IndexResult, IndexStatus
from models.types import INDEX_FILENAMES, OutputFormat
from terminal.components import StatusIndicators
from utilities.logging_utils import log_exception, safe_log

# Plain JavaScript modules need the explicit extension under native ESM
_MODULE_SUFFIXES: dict[OutputFormat, str] = {
    OutputFormat.TYPED: "",
    OutputFormat.UNTYPED: ".jsx",
}


def index_path(target_dir: Path, output_format: OutputFormat) -> Path:
    """Path of the barrel file for an output format."""
    return target_dir / INDEX_FILENAMES[output_format]


def export_line(export_name: str, module_path: str, output_format: OutputFormat) -> str:
    """Build the canonical export statement, newline included.

    Args:
        export_name: Symbol to re-export (e.g. "Button").
        module_path: Module path relative to the barrel file, without
            extension (e.g. "./button/Button").
        output_format: Selects the module suffix.

    Returns:
        The export line.
    """
    suffix = _MODULE_SUFFIXES[output_format]
    return f"export {{ default as {export_name} }} from '{module_path}{suffix}';\n"


def module_path_for(item_name: str, export_name: str) -> str:
    """Relative module path of an installed item's main file."""
    return f"./{item_name}/{export_name}"


class IndexUpdater:
    """Keeps the barrel file in the target directory up to date."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def append_export(
        self,
        target_dir: Path,
        export_name: str,
        module_path: str,
        output_format: OutputFormat,
    ) -> IndexResult:
        """Append an export line unless the exact line is already present.

        Args:
            target_dir: Directory holding the barrel file.
            export_name: Symbol to re-export.
            module_path: Module path relative to the barrel file.
            output_format: Picks index.ts or index.js and the export syntax.

        Returns:
            IndexResult; write errors are reported, not raised.
        """
        path = index_path(target_dir, output_format)
        line = export_line(export_name, module_path, output_format)

        try:
            if not path.exists():
                path.parent.mkdir(parents=True, exist_ok=True)
                path.touch()

            # The barrel file is not necessarily UTF-8
            content = path.read_bytes()
            if line.rstrip("\n").encode("utf-8") in content:
                self.console.print(
                    StatusIndicators.info(f"{export_name} is already exported from {path.name}")
                )
                return IndexResult(IndexStatus.ALREADY_PRESENT, path, line)

            prefix = b"\n" if content and not content.endswith(b"\n") else b""
            with open(path, "ab") as f:
                f.write(prefix + line.encode("utf-8"))
        except OSError as e:
            error = FileWriteError(str(path), str(e))
            log_exception(error, "Updating barrel file", level="ERROR")
            self.console.print(StatusIndicators.error(f"Failed to update {path.name}: {e}"))
            return IndexResult(IndexStatus.FAILED, path, line, str(error))

        safe_log(f"Appended to {path}: {line}", level="INFO")
        self.console.print(StatusIndicators.success(f"Updated {path.name} with {export_name}"))
        return IndexResult(IndexStatus.ADDED, path, line)
