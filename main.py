#!/usr/bin/env python3
"""ARC UI - Main CLI Entry Point.

Adds UI components and page templates from the ARC UI library to the
JavaScript project in the current directory.
"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path
from types import TracebackType
from typing import cast

from configuration.manager import ConfigManager
from core.component_factory import install_sigint_handler
from core.exceptions import ConfigurationError, ProjectNotFoundError
from core.installer import validate_project
from core.result_printer import ResultPrinter
from handlers.install_handler import handle_install, handle_list
from models.config import AppConfig
from terminal import ParsedArgs, create_console, parse_arguments
from utilities.debug_logger import buffer as debug_buffer, finalize, init_debug
from utilities.logging_utils import log_exception


def run(parsed: ParsedArgs, project_root: Path) -> int:
    """Run one CLI invocation.

    Args:
        parsed: Parsed command-line arguments.
        project_root: Directory the tool was invoked in.

    Returns:
        Process exit status.
    """
    console = create_console()
    printer = ResultPrinter(console)

    if parsed.list_items:
        handle_list(console)
        return 0

    try:
        validate_project(project_root)
    except ProjectNotFoundError as e:
        printer.print_fatal_error(str(e), title="Not a project directory")
        return 1

    try:
        config = ConfigManager(project_root).load_config()
    except ConfigurationError as e:
        log_exception(e, "Loading configuration", level="WARNING")
        printer.print_warning(str(e), title="Invalid configuration, using defaults")
        config = AppConfig()

    install_sigint_handler(console)

    try:
        summary = handle_install(parsed, config, console, project_root)
    except ProjectNotFoundError as e:
        printer.print_fatal_error(str(e), title="Not a project directory")
        return 1

    printer.print_install_summary(summary)
    return 0


def setup_exception_hook() -> None:
    """Configure global exception handling for debug logging."""

    def _excepthook(
        exc_type: type[BaseException],
        exc_value: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            debug_buffer(
                f"Unhandled exception: {exc_type.__name__}: {exc_value}\n",
                level="ERROR",
            )
        except Exception:
            pass
        try:
            finalize()
        except Exception:
            pass
        sys.__excepthook__(exc_type, cast(BaseException, exc_value), exc_tb)

    sys.excepthook = _excepthook


def main() -> None:
    """Main entry point for the CLI application."""
    parsed = parse_arguments()

    if parsed.debug:
        init_debug(Path("logs"))
        debug_buffer(
            f"Debug mode enabled at "
            f"{datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')}\n",
            level="INFO",
        )

    setup_exception_hook()

    exit_code = 0
    try:
        exit_code = run(parsed, Path.cwd())
    except KeyboardInterrupt:
        debug_buffer("User interrupted execution (KeyboardInterrupt)\n", level="WARNING")
        exit_code = 130
    finally:
        finalize()

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
