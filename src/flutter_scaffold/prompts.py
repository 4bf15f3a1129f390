"""Interactive questions asked while scaffolding."""

from __future__ import annotations

from typing import Protocol

import click

from .errors import PromptError

__all__ = ["ClickPrompter", "Prompter", "echo_status"]


class Prompter(Protocol):
    """Source of answers for the scaffolding session."""

    def text(self, message: str, default: str | None = None) -> str:
        ...

    def confirm(self, message: str, default: bool) -> bool:
        ...


class ClickPrompter:
    """Ask questions on the terminal with :func:`click.prompt` and :func:`click.confirm`."""

    def text(self, message: str, default: str | None = None) -> str:
        try:
            # An empty default lets a bare <enter> through as "".
            return click.prompt(
                message,
                default="" if default is None else default,
                show_default=bool(default),
            )
        except (click.Abort, EOFError) as exc:
            raise PromptError(f"no answer to '{message}'") from exc

    def confirm(self, message: str, default: bool) -> bool:
        try:
            return click.confirm(message, default=default)
        except (click.Abort, EOFError) as exc:
            raise PromptError(f"no answer to '{message}'") from exc


def echo_status(message: str) -> None:
    click.secho(message, fg="green")
