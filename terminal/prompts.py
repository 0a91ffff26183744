"""Interactive prompts used to build an installation request.

The installer itself never talks to the terminal directly. It receives
``confirm`` and ``ask_path`` callables, and this module provides the
Rich-backed implementations used by the CLI.
"""

from __future__ import annotations

from collections.abc import Callable

from rich.console import Console
from rich.prompt import Confirm, Prompt

from models.types import DEFAULT_STYLESHEET_PATH, ItemKind, OutputFormat

ConfirmFn = Callable[[str], bool]
AskPathFn = Callable[[str], str]


class InteractivePrompts:
    """Rich prompts bound to one console.

    When ``assume_yes`` is set, confirmations succeed and path questions
    return their default without reading from the terminal.
    """

    def __init__(self, console: Console, assume_yes: bool = False) -> None:
        self.console = console
        self.assume_yes = assume_yes

    def confirm(self, question: str) -> bool:
        if self.assume_yes:
            return True
        return Confirm.ask(f"[orange3]{question}[/orange3]", console=self.console, default=True)

    def ask_path(self, question: str, default: str = DEFAULT_STYLESHEET_PATH) -> str:
        if self.assume_yes:
            return default
        answer = Prompt.ask(question, console=self.console, default=default)
        return answer.strip() or default

    def ask_kind(self) -> ItemKind:
        choice = Prompt.ask(
            "What do you want to add?",
            console=self.console,
            choices=[k.value for k in ItemKind],
            default=ItemKind.COMPONENT.value,
        )
        return ItemKind(choice)

    def ask_item(self, kind: ItemKind, names: list[str]) -> str:
        return Prompt.ask(
            f"Which {kind.value} do you want to add?",
            console=self.console,
            choices=names,
        )

    def ask_target_dir(self, default: str) -> str:
        answer = Prompt.ask(
            "Enter the directory where you want to add it (e.g., src/components)",
            console=self.console,
            default=default,
        )
        return answer.strip() or default

    def ask_format(self, default: OutputFormat) -> OutputFormat:
        choice = Prompt.ask(
            "Which output format?",
            console=self.console,
            choices=[f.value for f in OutputFormat],
            default=default.value,
        )
        return OutputFormat(choice)
