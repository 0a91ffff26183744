"""Debug logger used when --debug mode is enabled.

Messages go to a timestamped file under the log directory and are also
kept in an in-memory buffer that is appended to the file on finalization,
so nothing is lost when an install is interrupted.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path


_logger: logging.Logger | None = None
_buffer: list[str] = []
_log_file: Path | None = None

_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def init_debug(log_dir: Path | None = None) -> logging.Logger:
    """Initialize the debug logger.

    Safe to call more than once; later calls return the existing logger.

    Args:
        log_dir: Directory for the log file (defaults to cwd).

    Returns:
        The configured logger.
    """
    global _logger, _log_file

    if _logger is not None:
        return _logger

    log_dir = Path(log_dir) if log_dir is not None else Path.cwd()
    log_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    logfile = log_dir / f"arcui_debug_{ts}.log"
    _log_file = logfile

    logger = logging.getLogger("arcui_debug")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    # File only, the console belongs to rich
    fh = logging.FileHandler(str(logfile), encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(fh)

    _logger = logger
    _buffer.append(f"Debug log initialized: {logfile}\n")

    return logger


def get_logger() -> logging.Logger | None:
    return _logger


def get_log_file() -> Path | None:
    return _log_file


def buffer(msg: str, level: str = "DEBUG") -> None:
    """Store a message in the in-memory buffer and send it to the logger.

    Args:
        msg: Message text (usually newline-terminated).
        level: Level name; unknown names are logged as DEBUG.
    """
    _buffer.append(f"{level}: {msg}")

    if _logger is not None:
        try:
            _logger.log(_LEVELS.get(level.upper(), logging.DEBUG), msg.rstrip("\n"))
        except Exception:
            pass


def finalize() -> None:
    """Append the in-memory buffer to the log file.

    Safe to call multiple times; each call drains the buffer.
    """
    global _buffer

    if _log_file is None:
        return

    try:
        if _buffer:
            with open(_log_file, "a", encoding="utf-8") as f:
                f.write("\n# In-memory buffer:\n")
                for line in _buffer:
                    f.write(line.rstrip("\n") + "\n")
        _buffer = []
    except OSError:
        pass


def reset() -> None:
    """Detach handlers and forget the current logger."""
    global _logger, _log_file, _buffer

    if _logger is not None:
        for handler in list(_logger.handlers):
            handler.close()
            _logger.removeHandler(handler)

    _logger = None
    _log_file = None
    _buffer = []
