"""Reusable Rich UI components for consistent terminal output."""

from __future__ import annotations

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from terminal.theme import theme


class Panels:
    """Factory for creating consistently styled panels."""

    @staticmethod
    def summary(
        content: RenderableType,
        title: str,
        subtitle: str | None = None,
    ) -> Panel:
        """Create a summary panel with primary styling.

        Args:
            content: Panel content.
            title: Panel title.
            subtitle: Optional subtitle.

        Returns:
            Configured Panel object.
        """
        return Panel(
            content,
            title=f"[{theme.styles.PANEL_TITLE_PRIMARY}]{title}",
            title_align=theme.panel.TITLE_ALIGN,
            subtitle=f"[{theme.colors.TEXT_DIM}]{subtitle}" if subtitle else None,
            subtitle_align="right",
            border_style=theme.colors.BORDER_SUCCESS,
            padding=theme.panel.PADDING,
        )

    @staticmethod
    def error(content: RenderableType, title: str = "Error") -> Panel:
        """Create an error panel with error styling."""
        return Panel(
            content,
            title=f"[{theme.styles.PANEL_TITLE_ERROR}]{title}",
            title_align=theme.panel.TITLE_ALIGN,
            border_style=theme.colors.BORDER_ERROR,
            padding=theme.panel.PADDING,
        )

    @staticmethod
    def warning(content: RenderableType, title: str = "Warning") -> Panel:
        """Create a warning panel with warning styling."""
        return Panel(
            content,
            title=f"[{theme.styles.PANEL_TITLE_WARNING}]{title}",
            title_align=theme.panel.TITLE_ALIGN,
            border_style=theme.colors.BORDER_WARNING,
            padding=theme.panel.PADDING,
        )


class StatusIndicators:
    """Factory for creating status indicator text."""

    @staticmethod
    def success(message: str) -> Text:
        return Text(f"  {theme.symbols.CHECK} {message}", style=theme.colors.SUCCESS)

    @staticmethod
    def error(message: str) -> Text:
        return Text(f"  {theme.symbols.CROSS} {message}", style=theme.colors.ERROR)

    @staticmethod
    def warning(message: str) -> Text:
        return Text(f"  {theme.symbols.WARNING} {message}", style=theme.colors.WARNING)

    @staticmethod
    def info(message: str) -> Text:
        return Text(f"  {theme.symbols.INFO} {message}", style=theme.colors.INFO)

    @staticmethod
    def command(command: str) -> Text:
        """Render a shell command the operator can copy."""
        return Text(f"    {command}", style=theme.styles.COMMAND)


def step_header(message: str) -> Text:
    """Render the heading printed before each installation step."""
    return Text(f"{theme.symbols.ARROW} {message}", style=theme.styles.STEP_HEADER)


def catalog_table(rows: list[tuple[str, str, str, str]]) -> Table:
    """Build the table shown by --list.

    Args:
        rows: (name, kind, category, description) tuples.

    Returns:
        Rich Table.
    """
    table = Table(title="Available items", title_style=theme.styles.TITLE, title_justify="left")
    table.add_column("Name", style=theme.styles.BOLD, no_wrap=True)
    table.add_column("Kind")
    table.add_column("Category", style=theme.colors.TEXT_MUTED)
    table.add_column("Description", style=theme.colors.TEXT_DIM)
    for name, kind, category, description in rows:
        table.add_row(name, Text(kind, style=theme.get_kind_style(kind)), category, description)
    return table


def create_console() -> Console:
    """Create a configured Console instance."""
    return Console(highlight=False)
