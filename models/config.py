"""Configuration data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

from models.types import (
    DEFAULT_SOURCE_BASE_URL,
    DEFAULT_TARGET_DIR,
    OutputFormat,
)


@dataclass
class AppConfig:
    """Main application configuration.

    Every field has a default so a project without a configuration file
    works out of the box.
    """

    source_base_url: str = DEFAULT_SOURCE_BASE_URL
    default_target_dir: str = DEFAULT_TARGET_DIR
    default_format: OutputFormat = OutputFormat.TYPED
    # None disables the timeout; requests block until the server answers
    request_timeout: int | None = None
    max_retries: int = 1
    retry_backoff_sec: int = 2

    @classmethod
    def from_dict(cls, data: dict[str, object]) -> AppConfig:
        """Create AppConfig from dictionary (loaded from JSON).

        Missing keys fall back to defaults. The dictionary is expected to
        have passed validation already.

        Args:
            data: Configuration dictionary from JSON.

        Returns:
            AppConfig instance.
        """
        defaults = cls()

        timeout_raw = data.get("request_timeout", defaults.request_timeout)
        request_timeout = None if timeout_raw is None else int(cast(int, timeout_raw))

        return cls(
            source_base_url=cast(str, data.get("source_base_url", defaults.source_base_url)),
            default_target_dir=cast(
                str, data.get("default_target_dir", defaults.default_target_dir)
            ),
            default_format=OutputFormat(
                cast(str, data.get("default_format", defaults.default_format.value))
            ),
            request_timeout=request_timeout,
            max_retries=int(cast(int, data.get("max_retries", defaults.max_retries))),
            retry_backoff_sec=int(
                cast(int, data.get("retry_backoff_sec", defaults.retry_backoff_sec))
            ),
        )

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for JSON serialization."""
        return {
            "source_base_url": self.source_base_url,
            "default_target_dir": self.default_target_dir,
            "default_format": self.default_format.value,
            "request_timeout": self.request_timeout,
            "max_retries": self.max_retries,
            "retry_backoff_sec": self.retry_backoff_sec,
        }
