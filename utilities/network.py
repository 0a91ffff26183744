"""Network utilities for fetching raw files over HTTP."""

from __future__ import annotations

import time

import requests

from utilities.logging_utils import safe_log

USER_AGENT = "arc-ui-installer/1.0"


def request_with_retries(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: int | None = None,
    max_retries: int = 1,
    retry_backoff_sec: int = 2,
) -> requests.Response:
    """Make an HTTP GET request, optionally retrying on failure.

    Any non-2xx status is raised as ``requests.HTTPError``.

    Args:
        url: The URL to request.
        headers: HTTP headers to include (a User-Agent is always sent).
        timeout: Request timeout in seconds, or None to wait indefinitely.
        max_retries: Total number of attempts (1 means no retry).
        retry_backoff_sec: Base backoff time between attempts.

    Returns:
        requests.Response object.

    Raises:
        requests.RequestException: If all attempts fail.
    """
    request_headers = {"User-Agent": USER_AGENT}
    if headers:
        request_headers.update(headers)

    attempts = max(1, max_retries)
    for attempt in range(1, attempts + 1):
        try:
            resp = requests.get(url, headers=request_headers, timeout=timeout)
            resp.raise_for_status()
            return resp
        except requests.RequestException as e:
            if attempt >= attempts:
                raise
            safe_log(
                f"GET {url} failed (attempt {attempt}/{attempts}): {e}\n",
                level="WARNING",
            )
            time.sleep(retry_backoff_sec * attempt)

    # Unreachable: the final attempt either returns or raises
    raise requests.RequestException(f"Request failed: {url}")


def fetch_bytes(
    url: str,
    timeout: int | None = None,
    max_retries: int = 1,
    retry_backoff_sec: int = 2,
) -> bytes:
    """Fetch a remote file and return its body unchanged.

    Args:
        url: The URL to download.
        timeout: Request timeout in seconds, or None.
        max_retries: Total number of attempts.
        retry_backoff_sec: Base backoff time between attempts.

    Returns:
        Raw response body.
    """
    resp = request_with_retries(
        url,
        timeout=timeout,
        max_retries=max_retries,
        retry_backoff_sec=retry_backoff_sec,
    )
    return resp.content
