"""Centralized theme configuration for Rich UI components.

All colors, styles and symbols used in terminal output are defined here so
every step of an install reports in the same visual language.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

AlignMethod = Literal["left", "center", "right"]


@dataclass(frozen=True)
class ThemeColors:
    """Core color palette for the application."""

    # Status colors
    SUCCESS: str = "green"
    WARNING: str = "orange3"
    ERROR: str = "red"
    INFO: str = "bright_cyan"

    # Text colors
    TEXT_DIM: str = "dim"
    TEXT_MUTED: str = "grey70"

    # Panel borders
    BORDER_SUCCESS: str = "cyan"
    BORDER_WARNING: str = "orange3"
    BORDER_ERROR: str = "red"

    # Catalog kinds
    COMPONENT: str = "bright_green"
    TEMPLATE: str = "medium_purple"


@dataclass(frozen=True)
class ThemeStyles:
    """Composite styles combining colors with formatting."""

    TITLE: str = "bold bright_blue"
    STEP_HEADER: str = "bold bright_white"

    PANEL_TITLE_PRIMARY: str = "bold cyan"
    PANEL_TITLE_WARNING: str = "bold orange3"
    PANEL_TITLE_ERROR: str = "bold red"

    # Commands the operator may copy
    COMMAND: str = "bold yellow"

    BOLD: str = "bold"


@dataclass(frozen=True)
class ThemeSymbols:
    """Unicode symbols used in the UI."""

    CHECK: str = "✓"
    CROSS: str = "✗"
    ARROW: str = "→"
    WARNING: str = "!"
    INFO: str = "i"


@dataclass(frozen=True)
class PanelConfig:
    """Configuration for Rich Panel components."""

    PADDING: tuple[int, int] = (1, 2)
    TITLE_ALIGN: AlignMethod = "left"


class Theme:
    """Main theme class providing access to all theme components.

    Usage:
        from terminal.theme import theme

        console.print(f"[{theme.colors.SUCCESS}]Done![/{theme.colors.SUCCESS}]")
    """

    colors = ThemeColors()
    styles = ThemeStyles()
    symbols = ThemeSymbols()
    panel = PanelConfig()

    @classmethod
    def get_kind_style(cls, kind: str) -> str:
        """Get the style used to show a catalog item kind.

        Args:
            kind: "component" or "template".

        Returns:
            Style string.
        """
        if kind == "template":
            return cls.colors.TEMPLATE
        return cls.colors.COMPONENT


# Global theme instance for easy import
theme = Theme()
