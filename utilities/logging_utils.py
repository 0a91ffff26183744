"""Logging helpers that never raise.

Failures while installing are reported to the operator through the
console; these helpers additionally record them in the debug log when
--debug is active, and silently do nothing otherwise.
"""

from __future__ import annotations

from utilities.debug_logger import buffer as debug_buffer, get_logger


def log_exception(
    exception: BaseException,
    context: str = "",
    level: str = "DEBUG",
) -> None:
    """Log an exception with context in a safe manner.

    Args:
        exception: The exception that was caught.
        context: Description of what was being attempted when error occurred.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    if get_logger() is None:
        return

    try:
        exc_name = type(exception).__name__
        exc_msg = str(exception) or "(no message)"
        if context:
            debug_buffer(f"{context}: {exc_name}: {exc_msg}\n", level=level)
        else:
            debug_buffer(f"{exc_name}: {exc_msg}\n", level=level)
    except Exception:
        # Last resort: logging must not break an install
        pass


def safe_log(message: str, level: str = "DEBUG") -> None:
    """Log a message in a safe manner.

    Args:
        message: The message to log.
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    if get_logger() is None:
        return

    try:
        debug_buffer(message, level=level)
    except Exception:
        pass
