"""Custom exceptions for the ARC UI installer.

Exception Hierarchy:
    ArcUiError (base)
    ├── ProjectError
    │   └── ProjectNotFoundError
    ├── CatalogError
    │   └── ItemNotFoundError
    ├── ConfigurationError
    │   └── ConfigValidationError
    ├── NetworkError
    │   └── DownloadError
    ├── FileOperationError
    │   ├── FileReadError
    │   └── FileWriteError
    └── InstallError
        └── DependencyInstallError

Only ProjectNotFoundError aborts a run. The others are caught at step
boundaries and turned into per-step results.
"""

from __future__ import annotations


class ArcUiError(Exception):
    """Base exception for all installer errors.

    Attributes:
        message: Human-readable error description.
        details: Optional additional context about the error.
    """

    def __init__(self, message: str, details: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            details: Optional additional context about the error.
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


# Project Errors


class ProjectError(ArcUiError):
    """Base exception for problems with the target project."""

    pass


class ProjectNotFoundError(ProjectError):
    """Raised when the target directory has no project descriptor."""

    def __init__(self, descriptor_path: str) -> None:
        """Initialize the exception.

        Args:
            descriptor_path: Path where package.json was expected.
        """
        super().__init__(
            f"Could not find {descriptor_path}",
            "Run this command in the root of a valid project directory.",
        )
        self.descriptor_path = descriptor_path


# Catalog Errors


class CatalogError(ArcUiError):
    """Base exception for catalog lookups."""

    pass


class ItemNotFoundError(CatalogError):
    """Raised when a requested item is not in the catalog."""

    def __init__(self, name: str, kind: str) -> None:
        """Initialize the exception.

        Args:
            name: The requested item name.
            kind: Component or template.
        """
        super().__init__(f"{kind.capitalize()} \"{name}\" not found")
        self.name = name
        self.kind = kind


# Configuration Errors


class ConfigurationError(ArcUiError):
    """Base exception for configuration-related errors."""

    pass


class ConfigValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: list[str]) -> None:
        """Initialize the exception.

        Args:
            errors: List of validation error messages.
        """
        error_list = "\n  - ".join(errors)
        super().__init__("Configuration validation failed", f"\n  - {error_list}")
        self.errors = errors


# Network Errors


class NetworkError(ArcUiError):
    """Base exception for network-related errors."""

    pass


class DownloadError(NetworkError):
    """Raised when a file download fails."""

    def __init__(self, filename: str, reason: str, url: str | None = None) -> None:
        """Initialize the exception.

        Args:
            filename: Name of the file that failed to download.
            reason: Why the download failed.
            url: The download URL if available.
        """
        detail = f"{reason} ({url})" if url else reason
        super().__init__(f"Failed to download {filename}", detail)
        self.filename = filename
        self.reason = reason
        self.url = url


# File Operation Errors


class FileOperationError(ArcUiError):
    """Base exception for file operation errors."""

    pass


class FileReadError(FileOperationError):
    """Raised when reading a file fails."""

    def __init__(self, filepath: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            filepath: Path to the file that couldn't be read.
            reason: Why the read operation failed.
        """
        super().__init__(f"Failed to read file: {filepath}", reason)
        self.filepath = filepath


class FileWriteError(FileOperationError):
    """Raised when writing a file fails."""

    def __init__(self, filepath: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            filepath: Path to the file that couldn't be written.
            reason: Why the write operation failed.
        """
        super().__init__(f"Failed to write file: {filepath}", reason)
        self.filepath = filepath


# Install Errors


class InstallError(ArcUiError):
    """Base exception for package manager failures."""

    pass


class DependencyInstallError(InstallError):
    """Raised when a package manager command fails."""

    def __init__(self, command: str, returncode: int | None, reason: str | None = None) -> None:
        """Initialize the exception.

        Args:
            command: The command line that failed.
            returncode: Exit code, or None if the command could not start.
            reason: Optional description when the command could not start.
        """
        if reason is None:
            reason = f"exited with status {returncode}"
        super().__init__(f"Command failed: {command}", reason)
        self.command = command
        self.returncode = returncode
