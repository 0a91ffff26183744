"""Utility modules for the ARC UI installer."""

from utilities.debug_logger import buffer as debug_buffer
from utilities.debug_logger import finalize as finalize_debug
from utilities.debug_logger import get_logger, init_debug
from utilities.logging_utils import log_exception, safe_log
from utilities.network import fetch_bytes, request_with_retries
from utilities.package_manager import (
    build_install_command,
    detect_package_manager,
    format_command,
    run_command,
)

__all__ = [
    "build_install_command",
    "debug_buffer",
    "detect_package_manager",
    "fetch_bytes",
    "finalize_debug",
    "format_command",
    "get_logger",
    "init_debug",
    "log_exception",
    "request_with_retries",
    "run_command",
    "safe_log",
]
