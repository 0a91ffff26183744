"""Formatting of installation results for console display.

Formatters only build strings; printing is left to ResultPrinter.
"""

from __future__ import annotations

from core.operation_results import (
    IndexStatus,
    InstallSummary,
    PrerequisiteOutcome,
)

_PREREQUISITE_LABELS: dict[PrerequisiteOutcome, str] = {
    PrerequisiteOutcome.NOT_REQUIRED: "Not required",
    PrerequisiteOutcome.SATISFIED: "Already configured",
    PrerequisiteOutcome.PROVISIONED: "Installed and configured",
    PrerequisiteOutcome.PROVISION_FAILED: "Setup failed (see manual steps)",
    PrerequisiteOutcome.DECLINED: "Skipped by user",
}

_INDEX_LABELS: dict[IndexStatus, str] = {
    IndexStatus.ADDED: "Export added",
    IndexStatus.ALREADY_PRESENT: "Already present",
    IndexStatus.FAILED: "Update failed",
}


class ResultFormatter:
    """Formats install summaries for display."""

    @staticmethod
    def format_install_summary(summary: InstallSummary) -> list[str]:
        """
        Format an install summary with Files, Dependencies and Project sections.

        Args:
            summary: InstallSummary with step results

        Returns:
            List[str]: Formatted summary lines for display
        """
        lines: list[str] = []

        lines.append("── Files ──")
        lines.append(f"• Written: {summary.files_written()}/{len(summary.files)}")
        for result in summary.files:
            marker = "✓" if result.ok else "✗"
            lines.append(f"    {marker} {result.path}")

        lines.append("")
        lines.append("── Dependencies ──")
        if not summary.dependencies:
            lines.append("• None")
        for dep in summary.dependencies:
            label = "Dev" if dep.dev else "Runtime"
            state = "installed" if dep.ok else "failed"
            lines.append(f"• {label}: {', '.join(dep.packages)} ({state})")

        lines.append("")
        lines.append("── Project ──")
        lines.append(f"• Tailwind CSS: {_PREREQUISITE_LABELS[summary.prerequisite]}")
        if summary.index is not None:
            lines.append(f"• {summary.index.path.name}: {_INDEX_LABELS[summary.index.status]}")

        return lines

    @staticmethod
    def format_title(summary: InstallSummary) -> str:
        """Build the summary panel title."""
        return f"{summary.name} ({summary.output_format.value}) | Summary"

    @staticmethod
    def format_warnings(warnings: list[str]) -> list[str]:
        """Format warnings as bullet lines."""
        return [f"• {warning}" for warning in warnings]

    @staticmethod
    def format_warnings_title(count: int) -> str:
        """Build the warnings panel title."""
        return f"Completed with {count} warning{'s' if count != 1 else ''}"
