"""Core type definitions for the ARC UI installer.

This module contains all shared enums and constants used throughout the
application.
"""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Source variant written into the target project."""

    TYPED = "typed"
    UNTYPED = "untyped"


class ItemKind(str, Enum):
    """Kind of installable catalog item."""

    COMPONENT = "component"
    TEMPLATE = "template"


class PackageManager(str, Enum):
    """Supported host package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"


# Remote source
DEFAULT_SOURCE_BASE_URL = "https://raw.githubusercontent.com/arkia1/ARC-UI-LIB/main"

# Target project layout
PROJECT_DESCRIPTOR = "package.json"
DEFAULT_TARGET_DIR = "src/components"
CONFIG_FILENAME = "arcui.json"

# Lockfiles, checked in this order
LOCKFILES: tuple[tuple[str, PackageManager], ...] = (
    ("yarn.lock", PackageManager.YARN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
)

# Barrel file per output format
INDEX_FILENAMES: dict[OutputFormat, str] = {
    OutputFormat.TYPED: "index.ts",
    OutputFormat.UNTYPED: "index.js",
}

# Tailwind prerequisite
TAILWIND_PACKAGE = "tailwindcss"
TAILWIND_MAJOR_VERSION = 3
TAILWIND_INSTALL_PACKAGES: tuple[str, ...] = (
    "tailwindcss@3",
    "postcss@8",
    "autoprefixer@10",
)
TAILWIND_CONFIG_FILENAME = "tailwind.config.js"
POSTCSS_CONFIG_FILENAME = "postcss.config.js"
TAILWIND_DIRECTIVE_MARKER = "@tailwind"
TAILWIND_DIRECTIVES = (
    "@tailwind base;\n"
    "@tailwind components;\n"
    "@tailwind utilities;\n"
)

TAILWIND_CONFIG_CONTENT = """/** @type {import('tailwindcss').Config} */
module.exports = {
  content: [
    "./index.html",
    "./src/**/*.{js,ts,jsx,tsx}",
    "./app/**/*.{js,ts,jsx,tsx}",
    "./pages/**/*.{js,ts,jsx,tsx}",
    "./components/**/*.{js,ts,jsx,tsx}",
  ],
  theme: {
    extend: {},
  },
  plugins: [],
};
"""

POSTCSS_CONFIG_CONTENT = """module.exports = {
  plugins: {
    tailwindcss: {},
    autoprefixer: {},
  },
};
"""

# Conventional entry stylesheet locations, searched in order
STYLESHEET_CANDIDATES: tuple[str, ...] = (
    "src/index.css",
    "src/App.css",
    "src/styles/globals.css",
    "src/globals.css",
    "src/app/globals.css",
    "app/globals.css",
    "styles/globals.css",
)
DEFAULT_STYLESHEET_PATH = "src/index.css"
