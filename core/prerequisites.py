"""Read-only check for an installed and configured Tailwind CSS."""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import cast

from core.exceptions import FileReadError
from core.operation_results import PrerequisiteStatus
from models.types import (
    POSTCSS_CONFIG_FILENAME,
    PROJECT_DESCRIPTOR,
    TAILWIND_CONFIG_FILENAME,
    TAILWIND_MAJOR_VERSION,
    TAILWIND_PACKAGE,
)
from utilities.logging_utils import safe_log

_MAJOR_RE = re.compile(r"^\s*(?:\^|~|>=|<=|>|<|=|v)*\s*v?(\d+)")


def parse_major_version(version_range: str) -> int | None:
    """Extract the major version from an npm version range.

    Handles plain versions and the common range prefixes (``^3.4.1``,
    ``~3.3``, ``>=3.0.0``, ``3.x``). Tags, URLs and anything else that does
    not start with a number yield None.

    Args:
        version_range: Version string from package.json.

    Returns:
        Major version, or None if it cannot be determined.
    """
    match = _MAJOR_RE.match(version_range)
    if match is None:
        return None
    return int(match.group(1))


def read_declared_dependencies(project_root: Path) -> dict[str, str]:
    """Merge runtime and dev dependency declarations from package.json.

    Args:
        project_root: Root of the consumer project.

    Returns:
        Mapping of package name to version range. Dev entries win on clash.

    Raises:
        FileReadError: If package.json is missing, unreadable or not JSON.
    """
    descriptor = project_root / PROJECT_DESCRIPTOR
    try:
        # utf-8-sig: npm accepts a leading byte order mark
        with open(descriptor, "r", encoding="utf-8-sig") as f:
            raw: object = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise FileReadError(str(descriptor), str(e)) from e

    if not isinstance(raw, dict):
        raise FileReadError(str(descriptor), "expected a JSON object")

    data = cast(dict[str, object], raw)
    merged: dict[str, str] = {}
    for section in ("dependencies", "devDependencies"):
        entries = data.get(section)
        if isinstance(entries, dict):
            for name, version in cast(dict[str, object], entries).items():
                merged[name] = str(version)
    return merged


class TailwindChecker:
    """Decides whether Tailwind is installed at the supported major version
    and has both of its configuration files."""

    def __init__(self, required_major: int = TAILWIND_MAJOR_VERSION) -> None:
        self.required_major = required_major

    def check(self, project_root: Path) -> PrerequisiteStatus:
        """Inspect the project without modifying it.

        Args:
            project_root: Root of the consumer project.

        Returns:
            PrerequisiteStatus with a human-readable reason when unsatisfied.
        """
        try:
            dependencies = read_declared_dependencies(project_root)
        except FileReadError as e:
            safe_log(f"Tailwind check could not read descriptor: {e}\n", level="WARNING")
            return PrerequisiteStatus(False, str(e))

        version = dependencies.get(TAILWIND_PACKAGE)
        if version is None:
            return PrerequisiteStatus(False, f"{TAILWIND_PACKAGE} is not installed")

        major = parse_major_version(version)
        if major != self.required_major:
            return PrerequisiteStatus(
                False,
                f"{TAILWIND_PACKAGE} {version} is installed, "
                f"but version {self.required_major}.x is required",
            )

        for config_name in (TAILWIND_CONFIG_FILENAME, POSTCSS_CONFIG_FILENAME):
            if not (project_root / config_name).exists():
                return PrerequisiteStatus(False, f"{config_name} is missing")

        safe_log(f"Tailwind {version} detected and configured\n", level="DEBUG")
        return PrerequisiteStatus(True)
