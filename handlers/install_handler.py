"""Install and list handlers.

Handlers turn parsed CLI arguments into an InstallRequest (prompting for
anything not given on the command line), run the installer and return the
result object. Printing the final report is left to main.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console

from core import catalog
from core.component_factory import ComponentFactory
from core.fetcher import HttpGetter
from core.operation_results import InstallSummary
from models.config import AppConfig
from models.request import InstallRequest
from models.types import ItemKind
from terminal.cli import ParsedArgs
from terminal.components import catalog_table
from terminal.prompts import InteractivePrompts
from utilities.package_manager import CommandRunner, run_command


def resolve_kind(parsed: ParsedArgs, prompts: InteractivePrompts) -> ItemKind:
    """Work out whether the user wants a component or a template.

    An explicit flag wins. A name given without a flag takes the kind of
    the matching catalog entry, or component when the name is unknown.
    """
    if parsed.kind is not None:
        return parsed.kind
    if parsed.name:
        manifest = catalog.lookup(parsed.name)
        return manifest.kind if manifest is not None else ItemKind.COMPONENT
    return prompts.ask_kind()


def build_request(
    parsed: ParsedArgs,
    config: AppConfig,
    prompts: InteractivePrompts,
    project_root: Path,
) -> InstallRequest:
    """Build an InstallRequest from arguments, config defaults and prompts.

    Args:
        parsed: Parsed command-line arguments.
        config: Loaded configuration (supplies defaults).
        prompts: Prompts for missing selections.
        project_root: Root of the consumer project.

    Returns:
        InstallRequest ready for the installer.
    """
    kind = resolve_kind(parsed, prompts)

    name = parsed.name
    if not name:
        name = prompts.ask_item(kind, catalog.list_items(kind))

    target_dir = parsed.target_dir
    if target_dir is None:
        target_dir = (
            config.default_target_dir
            if prompts.assume_yes
            else prompts.ask_target_dir(config.default_target_dir)
        )

    output_format = parsed.output_format
    if output_format is None:
        output_format = (
            config.default_format
            if prompts.assume_yes
            else prompts.ask_format(config.default_format)
        )

    return InstallRequest(
        kind=kind,
        name=name,
        output_format=output_format,
        target_dir=target_dir,
        project_root=project_root,
    )


def handle_install(
    parsed: ParsedArgs,
    config: AppConfig,
    console: Console,
    project_root: Path,
    http_get: HttpGetter | None = None,
    runner: CommandRunner = run_command,
) -> InstallSummary:
    """Handle an install invocation.

    Args:
        parsed: Parsed command-line arguments.
        config: Loaded configuration.
        console: Console for prompts and progress.
        project_root: Root of the consumer project.
        http_get: Optional getter overriding the network.
        runner: Command runner for the package manager.

    Returns:
        InstallSummary of the run.

    Raises:
        ProjectNotFoundError: If the project root has no package.json.
    """
    prompts = InteractivePrompts(console, assume_yes=parsed.yes)
    request = build_request(parsed, config, prompts, project_root)

    installer = ComponentFactory.create_installer(
        config=config,
        project_root=project_root,
        console=console,
        confirm=prompts.confirm,
        ask_path=prompts.ask_path,
        http_get=http_get,
        runner=runner,
    )
    return installer.install(request)


def handle_list(console: Console) -> None:
    """Print every catalog item as a table."""
    rows: list[tuple[str, str, str, str]] = []
    for name in catalog.list_items():
        manifest = catalog.CATALOG[name]
        rows.append((name, manifest.kind.value, manifest.category or "", manifest.description))
    console.print(catalog_table(rows))
