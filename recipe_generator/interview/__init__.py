"""Interactive interview that collects a recipe's answers."""

from recipe_generator.interview.context import (
    WILDCARD,
    ComposerInfo,
    ConfigImport,
    Dependency,
    InterviewContext,
)
from recipe_generator.interview.prompts import (
    PromptService,
    RichPrompter,
    ValidationError,
    ask_until_empty,
)
from recipe_generator.interview.steps import run_interview

__all__ = [
    "WILDCARD",
    "ComposerInfo",
    "ConfigImport",
    "Dependency",
    "InterviewContext",
    "PromptService",
    "RichPrompter",
    "ValidationError",
    "ask_until_empty",
    "run_interview",
]
