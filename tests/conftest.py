"""Shared pytest fixtures for the recipe generator test suite.

Provides reusable fixtures for:
- A scripted prompter that replays canned answers
- Answer scripts for the three reference interviews
- Temporary Drupal root directories
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------


class ScriptedPrompter:
    """Replays a list of answers in order.

    ``ask`` consumes strings and ``confirm`` consumes booleans.  A ``None``
    or blank answer to ``ask`` means "press enter", which returns the default.
    Blank answers to required questions without a default are recorded as
    re-prompts and the next answer is used, as a real terminal would.
    """

    def __init__(self, answers: list[Any]) -> None:
        self.answers = list(answers)
        self.questions: list[str] = []
        self.reprompts: list[str] = []

    def _next(self, question: str) -> Any:
        self.questions.append(question)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for: {question!r}")
        return self.answers.pop(0)

    def ask(self, question: str, default: str | None = None, required: bool = False) -> str:
        while True:
            answer = self._next(question)
            assert not isinstance(answer, bool), f"Expected text for {question!r}"
            answer = (answer or "").strip() or (default or "")
            if required and not answer:
                self.reprompts.append(question)
                continue
            return answer

    def confirm(self, question: str, default: bool = True) -> bool:
        answer = self._next(question)
        if answer is None:
            return default
        assert isinstance(answer, bool), f"Expected yes/no for {question!r}"
        return answer


@pytest.fixture
def make_prompter() -> Callable[[list[Any]], ScriptedPrompter]:
    """Factory for :class:`ScriptedPrompter` instances."""
    return ScriptedPrompter


# ---------------------------------------------------------------------------
# Reference interviews
# ---------------------------------------------------------------------------

CORE_ANSWERS = [
    "My Custom Recipe",
    "my-custom-recipe",
    "Content Type",
    "Adds a content type",
]


@pytest.fixture
def core_answers() -> list[Any]:
    return list(CORE_ANSWERS)


@pytest.fixture
def decline_all_answers() -> list[Any]:
    """Core answers, then no to composer, modules, config imports and actions."""
    return CORE_ANSWERS + [False, False, False, False]


@pytest.fixture
def composer_answers() -> list[Any]:
    """Composer with one dependency; everything else declined."""
    return CORE_ANSWERS + [
        True,
        "acme",
        "demo",
        "Jane",
        "drupal/pathauto",
        "^1.0",
        "",
        False,
        False,
        False,
    ]


@pytest.fixture
def config_answers() -> list[Any]:
    """Specific config files for ``node``; everything else declined."""
    return CORE_ANSWERS + [
        False,
        False,
        True,
        "node",
        False,
        "node.settings",
        "node.type.article",
        "",
        "",
        False,
    ]


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------


@pytest.fixture
def drupal_root(tmp_path: Path) -> Path:
    """Temporary Drupal root (auto-cleanup)."""
    root = tmp_path / "drupal"
    root.mkdir()
    yield root
