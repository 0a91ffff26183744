"""Command-line interface configuration and argument parsing."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from rich.console import Console

from models.types import ItemKind, OutputFormat


@dataclass
class ParsedArgs:
    """Structured representation of parsed CLI arguments.

    Fields left as None are asked for interactively.
    """

    name: str | None = None
    kind: ItemKind | None = None
    target_dir: str | None = None
    output_format: OutputFormat | None = None

    # Flags
    yes: bool = False
    list_items: bool = False
    debug: bool = False


class CLIParser:
    """CLI argument parser with validation."""

    def __init__(self) -> None:
        """Initialize the CLI parser."""
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create the argument parser with all arguments defined."""
        parser = argparse.ArgumentParser(
            prog="arc-ui",
            description="ARC UI - add components and templates to your project",
            add_help=False,
        )

        parser.add_argument(
            "name",
            nargs="?",
            help="Component or template to add (prompted if omitted)",
        )

        kinds = parser.add_mutually_exclusive_group()
        kinds.add_argument(
            "--component",
            "-c",
            action="store_true",
            help="Look NAME up among components",
        )
        kinds.add_argument(
            "--template",
            "-t",
            action="store_true",
            help="Look NAME up among templates",
        )

        options = parser.add_argument_group("options")
        options.add_argument(
            "--dir",
            "-d",
            metavar="DIR",
            help="Target directory relative to the project root (e.g. src/components)",
        )
        options.add_argument(
            "--format",
            "-f",
            choices=[f.value for f in OutputFormat],
            help="Write TypeScript (typed) or JavaScript (untyped) sources",
        )
        options.add_argument(
            "--yes",
            "-y",
            action="store_true",
            help="Automatically confirm prompts",
        )
        options.add_argument(
            "--list",
            "-l",
            action="store_true",
            help="List available components and templates",
        )
        options.add_argument(
            "--debug",
            action="store_true",
            help="Enable debug logging",
        )
        options.add_argument(
            "-h",
            "--help",
            action="store_true",
            help="Show help message",
        )

        return parser

    def parse(self, args: list[str] | None = None) -> ParsedArgs:
        """Parse command-line arguments.

        Args:
            args: Optional list of arguments. Uses sys.argv if None.

        Returns:
            ParsedArgs with validated arguments.

        Raises:
            SystemExit: If arguments are invalid or help is requested.
        """
        namespace = self.parser.parse_args(args)

        if namespace.help:
            console = Console()
            console.print(self.parser.format_help(), end="", markup=False)
            sys.exit(0)

        self._validate(namespace)

        return self._convert(namespace)

    def _validate(self, args: argparse.Namespace) -> None:
        """Validate argument combinations.

        Raises:
            SystemExit: If validation fails.
        """
        if args.list and args.name:
            self.parser.error("--list cannot be combined with an item name")
        if args.dir is not None and not args.dir.strip():
            self.parser.error("--dir cannot be empty")

    def _convert(self, args: argparse.Namespace) -> ParsedArgs:
        """Convert namespace to ParsedArgs."""
        result = ParsedArgs()

        result.name = args.name.strip() if args.name else None
        if args.template:
            result.kind = ItemKind.TEMPLATE
        elif args.component:
            result.kind = ItemKind.COMPONENT
        result.target_dir = args.dir.strip() if args.dir else None
        result.output_format = OutputFormat(args.format) if args.format else None

        result.yes = args.yes
        result.list_items = args.list
        result.debug = args.debug

        return result


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """Parse command-line arguments.

    Args:
        args: Optional argument list (defaults to sys.argv).

    Returns:
        ParsedArgs with validated arguments.
    """
    parser = CLIParser()
    return parser.parse(args)
