"""Data models for the ARC UI installer."""

from models.config import AppConfig
from models.manifest import Manifest, ManifestFile
from models.request import InstallRequest
from models.types import ItemKind, OutputFormat, PackageManager

__all__ = [
    "AppConfig",
    "InstallRequest",
    "ItemKind",
    "Manifest",
    "ManifestFile",
    "OutputFormat",
    "PackageManager",
]
