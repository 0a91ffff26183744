from __future__ import annotations

import io
import json
import sys
from pathlib import Path

import pytest
import requests
from rich.console import Console

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from models.types import DEFAULT_SOURCE_BASE_URL  # noqa: E402


class FakeRunner:
    """Records package-manager commands instead of running them."""

    def __init__(self, returncode: int = 0) -> None:
        self.returncode = returncode
        self.calls: list[tuple[list[str], Path]] = []

    def __call__(self, command: list[str], cwd: Path) -> int:
        self.calls.append((list(command), cwd))
        return self.returncode


class FakeGetter:
    """Serves canned bodies keyed by URL; unknown URLs fail like a 404."""

    def __init__(self, bodies: dict[str, bytes] | None = None) -> None:
        self.bodies = dict(bodies or {})
        self.requested: list[str] = []

    def __call__(self, url: str) -> bytes:
        self.requested.append(url)
        if url not in self.bodies:
            raise requests.HTTPError(f"404 Client Error: Not Found for url: {url}")
        return self.bodies[url]


def raw_url(source: str) -> str:
    return f"{DEFAULT_SOURCE_BASE_URL}/{source}"


def console_output(console: Console) -> str:
    return console.file.getvalue()  # type: ignore[attr-defined]


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=200, color_system=None, highlight=False)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    (tmp_path / "package.json").write_text(
        json.dumps({"name": "demo", "dependencies": {"react": "^18.2.0"}}),
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def tailwind_project(project: Path) -> Path:
    (project / "package.json").write_text(
        json.dumps(
            {
                "name": "demo",
                "dependencies": {"react": "^18.2.0"},
                "devDependencies": {"tailwindcss": "^3.4.1"},
            }
        ),
        encoding="utf-8",
    )
    (project / "tailwind.config.js").write_text("export default {};\n", encoding="utf-8")
    (project / "postcss.config.js").write_text("export default {};\n", encoding="utf-8")
    return project


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def button_getter() -> FakeGetter:
    return FakeGetter(
        {
            raw_url("components/button/Button.tsx"): b"export default function Button() {}\n",
            raw_url("components/button/Button.jsx"): b"export default function Button() {}\n",
            raw_url("components/button/button-animations.css"): b".btn { color: red; }\n",
        }
    )
