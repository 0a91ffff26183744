"""Printer for installation results.

All final console output for an install flows through here so summaries,
warnings and fatal errors share one visual style.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from core.operation_results import InstallSummary
from core.result_formatter import ResultFormatter
from terminal.components import Panels, StatusIndicators


class ResultPrinter:
    """
    Prints install summaries after the pipeline has finished.

    Step-by-step progress is printed by the components themselves while the
    install runs; this class only renders the final report.
    """

    def __init__(self, console: Console | None = None):
        """
        Initialize the result printer.

        Args:
            console: Optional Console instance. If not provided, creates one.
        """
        self.console = console or Console()

    def print_install_summary(self, summary: InstallSummary) -> None:
        """
        Print the summary of one install.

        Args:
            summary: InstallSummary returned by the installer
        """
        if not summary.found:
            self.console.print(
                StatusIndicators.error(
                    f"{summary.kind.value.capitalize()} \"{summary.name}\" not found, nothing installed"
                )
            )
            return

        self.console.print()
        content = "\n".join(ResultFormatter.format_install_summary(summary))
        self.console.print(
            Panels.summary(content, ResultFormatter.format_title(summary), subtitle=str(summary.target_dir))
        )

        if summary.has_warnings():
            self.print_warnings_panel(summary.warnings)
        elif summary.succeeded():
            self.console.print(
                StatusIndicators.success(f"{summary.name} {summary.kind.value} has been added successfully!")
            )

    def print_warnings_panel(self, warnings: list[str]) -> None:
        """
        Print warnings panel.

        Args:
            warnings: List of warning messages
        """
        if not warnings:
            return

        content = "\n".join(ResultFormatter.format_warnings(warnings))
        self.console.print(
            Panels.warning(content, title=ResultFormatter.format_warnings_title(len(warnings)))
        )

    def print_warning(self, message: str, title: str = "Warning") -> None:
        """Print a single warning that does not stop the run."""
        self.console.print(Panels.warning(Text(message), title=title))

    def print_fatal_error(self, message: str, title: str = "Error") -> None:
        """
        Print a run-aborting error.

        Args:
            message: Error description
            title: Panel title
        """
        self.console.print(Panels.error(Text(message), title=title))
