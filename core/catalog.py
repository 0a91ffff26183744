"""Static catalog of installable components and templates.

Each entry maps an item name to the manifest describing which remote files
to fetch, which npm packages it needs and whether it relies on Tailwind CSS.
File sources are relative to the raw-content root of the UI library
repository.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from models.manifest import Manifest, ManifestFile
from models.types import ItemKind, OutputFormat

TYPED = OutputFormat.TYPED
UNTYPED = OutputFormat.UNTYPED


_COMPONENTS: dict[str, Manifest] = {
    "button": Manifest(
        kind=ItemKind.COMPONENT,
        export_name="Button",
        description="Animated button with size, variant and color props",
        files=(
            ManifestFile("Button.tsx", "components/button/Button.tsx", TYPED),
            ManifestFile("Button.jsx", "components/button/Button.jsx", UNTYPED),
            ManifestFile("button-animations.css", "components/button/button-animations.css"),
        ),
        dependencies=("clsx",),
        requires_tailwind=True,
    ),
    "toaster": Manifest(
        kind=ItemKind.COMPONENT,
        export_name="Toaster",
        description="Toast notifications with provider, hook and service",
        files=(
            ManifestFile("Toaster.tsx", "components/toaster/Toaster.tsx", TYPED),
            ManifestFile("Toaster.jsx", "components/toaster/Toaster.jsx", UNTYPED),
            ManifestFile("useToastService.ts", "components/toaster/useToastService.ts", TYPED),
            ManifestFile("useToastService.js", "components/toaster/useToastService.js", UNTYPED),
            ManifestFile("toast-animations.css", "components/toaster/toast-animations.css"),
        ),
        requires_tailwind=True,
    ),
}

_TEMPLATES: dict[str, Manifest] = {
    "not-found": Manifest(
        kind=ItemKind.TEMPLATE,
        export_name="NotFound",
        category="errors",
        description="404 page with light/dark themes",
        files=(
            ManifestFile("NotFound.tsx", "templates/errors/404/NotFound.tsx", TYPED),
            ManifestFile("NotFound.jsx", "templates/errors/404/NotFound.jsx", UNTYPED),
        ),
        requires_tailwind=True,
    ),
    "server-side-errors": Manifest(
        kind=ItemKind.TEMPLATE,
        export_name="ServerSideErrors",
        category="errors",
        description="5xx error page with retry action",
        files=(
            ManifestFile(
                "ServerSideErrors.tsx",
                "templates/errors/ServerSideErrors/ServerSideErrors.tsx",
                TYPED,
            ),
            ManifestFile(
                "ServerSideErrors.jsx",
                "templates/errors/ServerSideErrors/ServerSideErrors.jsx",
                UNTYPED,
            ),
        ),
        requires_tailwind=True,
    ),
}

CATALOG: Mapping[str, Manifest] = MappingProxyType({**_COMPONENTS, **_TEMPLATES})


def lookup(name: str, kind: ItemKind | None = None) -> Manifest | None:
    """Find the manifest for an item.

    Args:
        name: Catalog key (case-sensitive).
        kind: Restrict the lookup to components or templates.

    Returns:
        The manifest, or None if no item of that name (and kind) exists.
    """
    manifest = CATALOG.get(name)
    if manifest is None:
        return None
    if kind is not None and manifest.kind != kind:
        return None
    return manifest


def list_items(kind: ItemKind | None = None) -> list[str]:
    """List catalog item names, sorted, optionally filtered by kind."""
    return sorted(
        name for name, manifest in CATALOG.items() if kind is None or manifest.kind == kind
    )
