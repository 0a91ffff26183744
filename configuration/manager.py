"""Configuration file loading with validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import cast

from core.exceptions import ConfigurationError, ConfigValidationError
from models.config import AppConfig
from models.types import CONFIG_FILENAME, OutputFormat
from utilities.logging_utils import safe_log


class ConfigManager:
    """Loads and validates the optional project configuration file.

    The file lives in the project root. When it does not exist, built-in
    defaults are used.
    """

    def __init__(self, project_root: Path | None = None, config_file: str = CONFIG_FILENAME) -> None:
        """Initialize ConfigManager.

        Args:
            project_root: Root of the consumer project (defaults to cwd).
            config_file: Name of the configuration file.
        """
        self.project_root = project_root if project_root is not None else Path.cwd()
        self.config_path = self.project_root / config_file

    def validate_config_dict(self, config: dict[str, object]) -> list[str]:
        """Validate configuration dictionary structure.

        Args:
            config: Configuration dictionary to validate.

        Returns:
            List of error messages (empty if valid).
        """
        errors: list[str] = []

        for key in ("source_base_url", "default_target_dir"):
            if key in config:
                value = config[key]
                if not isinstance(value, str) or not value.strip():
                    errors.append(f"Field '{key}' must be a non-empty string")

        if "source_base_url" in config:
            value = config["source_base_url"]
            if isinstance(value, str) and not value.startswith(("http://", "https://")):
                errors.append("Field 'source_base_url' must be an http(s) URL")

        if "default_format" in config:
            valid_formats = [f.value for f in OutputFormat]
            if config["default_format"] not in valid_formats:
                errors.append(
                    f"Field 'default_format' must be one of: {', '.join(valid_formats)}"
                )

        if "request_timeout" in config:
            value = config["request_timeout"]
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, int) or value <= 0
            ):
                errors.append("Field 'request_timeout' must be a positive integer or null")

        if "max_retries" in config:
            value = config["max_retries"]
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                errors.append("Field 'max_retries' must be an integer >= 1")

        if "retry_backoff_sec" in config:
            value = config["retry_backoff_sec"]
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append("Field 'retry_backoff_sec' must be a positive integer")

        return errors

    def load_config(self) -> AppConfig:
        """Load and validate configuration.

        Returns:
            AppConfig instance (defaults if the file does not exist).

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
            ConfigValidationError: If the file contents are invalid.
        """
        if not self.config_path.exists():
            safe_log(f"No {self.config_path.name} found, using defaults\n", level="DEBUG")
            return AppConfig()

        try:
            with open(self.config_path, "r", encoding="utf-8-sig") as f:
                data: object = json.load(f)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Error parsing {self.config_path}", str(e)) from e
        except OSError as e:
            raise ConfigurationError(f"Error reading {self.config_path}", str(e)) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"{self.config_path} must contain a JSON object")

        config_dict = cast(dict[str, object], data)
        errors = self.validate_config_dict(config_dict)
        if errors:
            raise ConfigValidationError(errors)

        safe_log(f"Loaded configuration from {self.config_path}\n", level="INFO")
        return AppConfig.from_dict(config_dict)
