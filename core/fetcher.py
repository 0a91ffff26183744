"""Downloads manifest files into the target project."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import requests
from rich.console import Console

from core.exceptions import DownloadError, FileWriteError
from core.operation_results import FileResult
from models.config import AppConfig
from models.manifest import Manifest, ManifestFile
from models.types import OutputFormat
from terminal.components import StatusIndicators
from utilities.logging_utils import log_exception, safe_log
from utilities.network import fetch_bytes

# Returns the body of a URL or raises requests.RequestException
HttpGetter = Callable[[str], bytes]


def default_getter(config: AppConfig) -> HttpGetter:
    """Build an HTTP getter honoring the configured timeout and retries."""

    def _get(url: str) -> bytes:
        return fetch_bytes(
            url,
            timeout=config.request_timeout,
            max_retries=config.max_retries,
            retry_backoff_sec=config.retry_backoff_sec,
        )

    return _get


class FileFetcher:
    """Fetches each file of a manifest and writes it under the item directory.

    Every file succeeds or fails on its own; one failure never stops the
    remaining files.
    """

    def __init__(
        self,
        console: Console,
        base_url: str,
        http_get: HttpGetter,
    ) -> None:
        """Initialize FileFetcher.

        Args:
            console: Console for per-file status lines.
            base_url: Raw-content root the manifest sources resolve against.
            http_get: Callable returning the body of a URL.
        """
        self.console = console
        self.base_url = base_url
        self.http_get = http_get

    def fetch(
        self,
        manifest: Manifest,
        item_name: str,
        output_format: OutputFormat,
        target_dir: Path,
    ) -> list[FileResult]:
        """Fetch and write the files selected for an output format.

        Args:
            manifest: Manifest of the item.
            item_name: Catalog key, used as the item directory name.
            output_format: Requested source variant.
            target_dir: Output directory (the item directory goes inside).

        Returns:
            One FileResult per selected file, in manifest order.
        """
        item_dir = target_dir / item_name
        return [
            self._fetch_one(entry, item_dir) for entry in manifest.files_for(output_format)
        ]

    def _fetch_one(self, entry: ManifestFile, item_dir: Path) -> FileResult:
        dest = item_dir / entry.filename
        url = entry.resolve_url(self.base_url)

        try:
            item_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return self._failed(entry, dest, FileWriteError(str(item_dir), str(e)))

        try:
            body = self.http_get(url)
        except requests.RequestException as e:
            return self._failed(entry, dest, DownloadError(entry.filename, str(e), url))

        try:
            dest.write_bytes(body)
        except OSError as e:
            return self._failed(entry, dest, FileWriteError(str(dest), str(e)))

        safe_log(f"Wrote {dest} ({len(body)} bytes) from {url}\n", level="INFO")
        self.console.print(StatusIndicators.success(f"Added {entry.filename}"))
        return FileResult(entry.filename, dest, ok=True)

    def _failed(self, entry: ManifestFile, dest: Path, error: Exception) -> FileResult:
        log_exception(error, f"Fetching {entry.filename}", level="ERROR")
        self.console.print(StatusIndicators.error(f"Failed to add {entry.filename}: {error}"))
        return FileResult(entry.filename, dest, ok=False, error=str(error))
