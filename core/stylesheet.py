"""Locate or create the entry stylesheet and ensure the Tailwind directives.

Known stylesheet locations are tried in order and the first existing file
is used. Only when none exists is the operator asked where to create one.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from rich.console import Console

from core.exceptions import FileWriteError
from core.operation_results import StylesheetResult, StylesheetStatus
from models.types import (
    DEFAULT_STYLESHEET_PATH,
    STYLESHEET_CANDIDATES,
    TAILWIND_DIRECTIVE_MARKER,
    TAILWIND_DIRECTIVES,
)
from terminal.components import StatusIndicators
from utilities.logging_utils import log_exception, safe_log


class StylesheetLocator:
    """Ensures one entry stylesheet carries the Tailwind directives."""

    def __init__(
        self,
        ask_path: Callable[[str], str],
        console: Console,
        candidates: Sequence[str] = STYLESHEET_CANDIDATES,
    ) -> None:
        """Initialize the locator.

        Args:
            ask_path: Asks the operator for a stylesheet path when no known
                location exists. Receives the question text.
            console: Console for status output.
            candidates: Conventional paths relative to the project root.
        """
        self.ask_path = ask_path
        self.console = console
        self.candidates = tuple(candidates)

    def find_existing(self, project_root: Path) -> Path | None:
        """Return the first conventional stylesheet that exists."""
        for candidate in self.candidates:
            path = project_root / candidate
            if path.is_file():
                return path
        return None

    def ensure_directives(self, project_root: Path) -> StylesheetResult:
        """Make sure an entry stylesheet starts with the Tailwind directives.

        Args:
            project_root: Root of the consumer project.

        Returns:
            StylesheetResult describing what was done.
        """
        existing = self.find_existing(project_root)
        if existing is not None:
            return self._update_existing(existing)
        return self._create_new(project_root)

    def _update_existing(self, path: Path) -> StylesheetResult:
        # Stylesheets are not necessarily UTF-8
        try:
            content = path.read_bytes()
            if TAILWIND_DIRECTIVE_MARKER.encode("ascii") in content:
                self.console.print(
                    StatusIndicators.info(f"Tailwind directives already present in {path}")
                )
                return StylesheetResult(StylesheetStatus.ALREADY_PRESENT, path)

            path.write_bytes(f"{TAILWIND_DIRECTIVES}\n".encode("utf-8") + content)
        except OSError as e:
            error = FileWriteError(str(path), str(e))
            log_exception(error, "Updating entry stylesheet", level="ERROR")
            self.console.print(StatusIndicators.error(str(error)))
            return StylesheetResult(StylesheetStatus.FAILED, path, str(error))

        safe_log(f"Prepended Tailwind directives to {path}\n", level="INFO")
        self.console.print(StatusIndicators.success(f"Added Tailwind directives to {path}"))
        return StylesheetResult(StylesheetStatus.UPDATED, path)

    def _create_new(self, project_root: Path) -> StylesheetResult:
        answer = self.ask_path(
            "No main CSS file found. Where should the Tailwind stylesheet be created?"
        )
        relative = answer.strip() or DEFAULT_STYLESHEET_PATH
        path = project_root / relative

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(TAILWIND_DIRECTIVES, encoding="utf-8")
        except OSError as e:
            error = FileWriteError(str(path), str(e))
            log_exception(error, "Creating entry stylesheet", level="ERROR")
            self.console.print(StatusIndicators.error(str(error)))
            return StylesheetResult(StylesheetStatus.FAILED, path, str(error))

        safe_log(f"Created entry stylesheet {path}\n", level="INFO")
        self.console.print(StatusIndicators.success(f"Created {relative} with Tailwind directives"))
        self.console.print(
            StatusIndicators.warning(
                f"Remember to import '{relative}' in your app entry point "
                "(e.g. main.tsx or _app.tsx)"
            )
        )
        return StylesheetResult(StylesheetStatus.CREATED, path)
