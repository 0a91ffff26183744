"""Terminal presentation layer for the ARC UI installer.

Provides CLI parsing, theming, prompts and reusable UI components.
"""

from .cli import CLIParser, ParsedArgs, parse_arguments
from .components import (
    Panels,
    StatusIndicators,
    catalog_table,
    create_console,
    step_header,
)
from .prompts import InteractivePrompts
from .theme import Theme, theme

__all__ = [
    # CLI
    "CLIParser",
    "ParsedArgs",
    "parse_arguments",
    # Prompts
    "InteractivePrompts",
    # Theme
    "Theme",
    "theme",
    # Components
    "catalog_table",
    "create_console",
    "Panels",
    "StatusIndicators",
    "step_header",
]
