from __future__ import annotations

import json
from pathlib import Path

import pytest
from rich.console import Console

from core import catalog
from core.component_factory import ComponentFactory
from core.exceptions import ProjectNotFoundError
from core.installer import Installer, validate_project
from core.operation_results import IndexStatus, PrerequisiteOutcome
from models.config import AppConfig
from models.manifest import Manifest, ManifestFile
from models.request import InstallRequest
from models.types import (
    TAILWIND_DIRECTIVES,
    ItemKind,
    OutputFormat,
)
from tests.conftest import FakeGetter, FakeRunner, raw_url

BUTTON_LINE = "export { default as Button } from './button/Button';\n"


def _installer(
    project: Path,
    console: Console,
    getter: FakeGetter,
    runner: FakeRunner,
    confirm: bool = True,
    stylesheet_answer: str = "",
) -> Installer:
    return ComponentFactory.create_installer(
        config=AppConfig(),
        project_root=project,
        console=console,
        confirm=lambda question: confirm,
        ask_path=lambda question: stylesheet_answer,
        http_get=getter,
        runner=runner,
    )


def _button_request(project: Path, fmt: OutputFormat = OutputFormat.TYPED) -> InstallRequest:
    return InstallRequest(
        kind=ItemKind.COMPONENT,
        name="button",
        output_format=fmt,
        target_dir="src/components",
        project_root=project,
    )


def test_validate_project_requires_package_json(tmp_path: Path) -> None:
    with pytest.raises(ProjectNotFoundError) as excinfo:
        validate_project(tmp_path)
    assert "package.json" in str(excinfo.value)


def test_missing_package_json_aborts_before_any_work(
    tmp_path: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    installer = _installer(tmp_path, console, button_getter, runner)

    with pytest.raises(ProjectNotFoundError):
        installer.install(_button_request(tmp_path))

    assert list(tmp_path.iterdir()) == []
    assert button_getter.requested == []
    assert runner.calls == []


def test_unknown_item_touches_nothing(
    project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    before = sorted(p.name for p in project.iterdir())
    request = InstallRequest(
        kind=ItemKind.COMPONENT, name="carousel", target_dir="src/components", project_root=project
    )

    summary = _installer(project, console, button_getter, runner).install(request)

    assert not summary.found
    assert not summary.succeeded()
    assert sorted(p.name for p in project.iterdir()) == before
    assert button_getter.requested == []
    assert runner.calls == []


def test_button_into_fresh_project_provisions_tailwind(
    project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    summary = _installer(project, console, button_getter, runner).install(_button_request(project))

    assert summary.prerequisite == PrerequisiteOutcome.PROVISIONED
    assert (project / "tailwind.config.js").is_file()
    assert (project / "postcss.config.js").is_file()
    assert (project / "src" / "index.css").read_text(encoding="utf-8") == TAILWIND_DIRECTIVES

    item_dir = project / "src" / "components" / "button"
    assert sorted(p.name for p in item_dir.iterdir()) == ["Button.tsx", "button-animations.css"]

    assert [call[0] for call in runner.calls] == [
        ["npm", "install", "--save-dev", "tailwindcss@3", "postcss@8", "autoprefixer@10"],
        ["npm", "install", "clsx"],
    ]
    assert all(cwd == project for _, cwd in runner.calls)

    index = project / "src" / "components" / "index.ts"
    assert index.read_text(encoding="utf-8") == BUTTON_LINE
    assert summary.index is not None
    assert summary.index.status == IndexStatus.ADDED
    assert summary.succeeded()
    assert not summary.has_warnings()


def test_second_run_overwrites_files_and_keeps_single_export(
    tailwind_project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    installer = _installer(tailwind_project, console, button_getter, runner)
    installer.install(_button_request(tailwind_project))

    button_getter.bodies[raw_url("components/button/Button.tsx")] = b"// v2\n"
    summary = installer.install(_button_request(tailwind_project))

    button = tailwind_project / "src" / "components" / "button" / "Button.tsx"
    assert button.read_bytes() == b"// v2\n"
    assert summary.index is not None
    assert summary.index.status == IndexStatus.ALREADY_PRESENT
    index = tailwind_project / "src" / "components" / "index.ts"
    assert index.read_text(encoding="utf-8").count(BUTTON_LINE) == 1


def test_configured_project_skips_provisioning(
    tailwind_project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    def never(question: str) -> bool:
        raise AssertionError("should not ask")

    installer = ComponentFactory.create_installer(
        config=AppConfig(),
        project_root=tailwind_project,
        console=console,
        confirm=never,
        ask_path=lambda question: "",
        http_get=button_getter,
        runner=runner,
    )
    summary = installer.install(_button_request(tailwind_project))

    assert summary.prerequisite == PrerequisiteOutcome.SATISFIED
    assert [call[0] for call in runner.calls] == [["npm", "install", "clsx"]]
    assert not (tailwind_project / "src" / "index.css").exists()


def test_declining_tailwind_still_installs_files(
    project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    summary = _installer(project, console, button_getter, runner, confirm=False).install(
        _button_request(project)
    )

    assert summary.prerequisite == PrerequisiteOutcome.DECLINED
    assert not (project / "tailwind.config.js").exists()
    assert (project / "src" / "components" / "button" / "Button.tsx").is_file()
    assert summary.has_warnings()
    assert summary.succeeded()


def test_failed_provisioning_does_not_abort(
    project: Path, console: Console, button_getter: FakeGetter
) -> None:
    runner = FakeRunner(returncode=1)

    summary = _installer(project, console, button_getter, runner).install(_button_request(project))

    assert summary.prerequisite == PrerequisiteOutcome.PROVISION_FAILED
    assert not (project / "tailwind.config.js").exists()
    assert summary.files_written() == 2
    assert summary.index is not None
    assert summary.index.status == IndexStatus.ADDED
    assert len(summary.dependencies) == 1
    assert not summary.dependencies[0].ok
    assert len(summary.warnings) == 2


def test_untyped_button_writes_index_js(
    tailwind_project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    summary = _installer(tailwind_project, console, button_getter, runner).install(
        _button_request(tailwind_project, OutputFormat.UNTYPED)
    )

    components = tailwind_project / "src" / "components"
    assert (components / "button" / "Button.jsx").is_file()
    assert not (components / "button" / "Button.tsx").exists()
    assert not (components / "index.ts").exists()
    assert summary.index is not None
    assert summary.index.path == components / "index.js"


def test_file_failure_is_a_warning(
    tailwind_project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    del button_getter.bodies[raw_url("components/button/button-animations.css")]

    summary = _installer(tailwind_project, console, button_getter, runner).install(
        _button_request(tailwind_project)
    )

    assert summary.files_written() == 1
    assert summary.files_failed() == 1
    assert summary.has_warnings()
    assert summary.index is not None
    assert summary.index.status == IndexStatus.ADDED


def test_item_without_tailwind_never_checks(
    monkeypatch: pytest.MonkeyPatch,
    project: Path,
    console: Console,
    runner: FakeRunner,
) -> None:
    plain = Manifest(
        kind=ItemKind.COMPONENT,
        export_name="Badge",
        files=(ManifestFile("Badge.tsx", "components/badge/Badge.tsx"),),
        dev_dependencies=("@types/node",),
    )
    monkeypatch.setattr(catalog, "CATALOG", {"badge": plain})
    getter = FakeGetter({raw_url("components/badge/Badge.tsx"): b"badge"})

    def never(question: str) -> bool:
        raise AssertionError("should not ask")

    installer = ComponentFactory.create_installer(
        config=AppConfig(),
        project_root=project,
        console=console,
        confirm=never,
        ask_path=lambda question: "",
        http_get=getter,
        runner=runner,
    )
    summary = installer.install(
        InstallRequest(kind=ItemKind.COMPONENT, name="badge", project_root=project)
    )

    assert summary.prerequisite == PrerequisiteOutcome.NOT_REQUIRED
    assert [call[0] for call in runner.calls] == [["npm", "install", "--save-dev", "@types/node"]]
    assert (project / "src" / "components" / "badge" / "Badge.tsx").read_bytes() == b"badge"


def test_package_json_is_never_rewritten(
    project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    descriptor = project / "package.json"
    before = json.loads(descriptor.read_text(encoding="utf-8"))

    _installer(project, console, button_getter, runner).install(_button_request(project))

    assert json.loads(descriptor.read_text(encoding="utf-8")) == before


def test_non_utf8_stylesheet_does_not_stop_install(
    project: Path, console: Console, button_getter: FakeGetter, runner: FakeRunner
) -> None:
    stylesheet = project / "src" / "index.css"
    stylesheet.parent.mkdir(parents=True)
    stylesheet.write_bytes(b"/* caf\xe9 */\n")

    summary = _installer(project, console, button_getter, runner).install(_button_request(project))

    assert summary.prerequisite == PrerequisiteOutcome.PROVISIONED
    assert summary.files_written() == 2
    assert stylesheet.read_bytes().endswith(b"/* caf\xe9 */\n")
    assert (project / "src" / "components" / "index.ts").read_text(encoding="utf-8") == BUTTON_LINE
