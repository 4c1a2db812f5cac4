"""Prompt service used by the recipe interview.

The interview only talks to a :class:`PromptService`.  :class:`RichPrompter`
is the terminal implementation built on ``rich.prompt``; tests substitute a
scripted implementation with the same two methods.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol

from rich.console import Console
from rich.prompt import Confirm, Prompt

from recipe_generator.utils import console as default_console


class ValidationError(ValueError):
    """Raised when a required answer is left empty."""


def validate_required(value: str | None) -> str:
    """Return *value* stripped, or raise :class:`ValidationError` if blank."""
    answer = (value or "").strip()
    if not answer:
        raise ValidationError("This value is required.")
    return answer


class PromptService(Protocol):
    """What the interview needs from whoever is asking the questions."""

    def ask(
        self, question: str, default: str | None = None, required: bool = False
    ) -> str: ...

    def confirm(self, question: str, default: bool = True) -> bool: ...


class RichPrompter:
    """Asks questions on a Rich console.

    Required questions are re-asked with the same text until a non-blank
    answer is given.  A blank answer (including whitespace) takes the default;
    optional questions return ``""`` when there is no default.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def ask(
        self, question: str, default: str | None = None, required: bool = False
    ) -> str:
        while True:
            if default is None:
                raw = Prompt.ask(question, console=self.console)
            else:
                raw = Prompt.ask(question, default=default, console=self.console)
            answer = (raw or "").strip() or (default or "")
            if not required:
                return answer
            try:
                return validate_required(answer)
            except ValidationError as exc:
                self.console.print(f"[prompt.invalid]{exc}")

    def confirm(self, question: str, default: bool = True) -> bool:
        return Confirm.ask(question, default=default, console=self.console)


def ask_until_empty(prompter: PromptService, question: str) -> Iterator[str]:
    """Yield answers to *question* until an empty answer is given.

    The empty answer only ends the sequence; it is never yielded.  Being a
    generator, nothing is asked until the caller pulls the next item, so the
    caller may ask follow-up questions between items.
    """
    while True:
        answer = prompter.ask(question)
        if not answer:
            return
        yield answer
