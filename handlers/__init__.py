"""Handlers module for the ARC UI installer.

Handlers do NOT print final results - they return result objects.
Result printing is handled by ResultPrinter after the handler completes.
"""

from handlers.install_handler import build_request, handle_install, handle_list

__all__ = [
    "build_request",
    "handle_install",
    "handle_list",
]
