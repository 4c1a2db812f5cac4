"""The four interview steps.

Each step takes the prompter and the current :class:`InterviewContext` and
returns the context updated with the answers it collected.  Steps run in the
order they are listed in :data:`INTERVIEW_STEPS`.
"""

from __future__ import annotations

from collections.abc import Callable

from .context import WILDCARD, ComposerInfo, ConfigImport, Dependency, InterviewContext
from .prompts import PromptService, ask_until_empty


# ---------------------------------------------------------------------------
# Core questions
# ---------------------------------------------------------------------------


def collect_core(prompter: PromptService, context: InterviewContext) -> InterviewContext:
    """Ask for the recipe name, directory, type and description."""
    name = prompter.ask(
        "What is the name of this recipe?", "My Custom Recipe", required=True
    )
    directory = prompter.ask(
        'In what directory should this recipe be saved under /recipes (ex. "my-recipe")?',
        "my-custom-recipe",
        required=True,
    )
    recipe_type = prompter.ask(
        "What type of recipe is this (Site, Content Type, Workflow, etc)?",
        required=True,
    )
    description = prompter.ask("What does this recipe do?", required=True)
    return context.model_copy(
        update={
            "recipe_name": name,
            "recipe_directory": directory,
            "recipe_type": recipe_type,
            "recipe_description": description,
        }
    )


# ---------------------------------------------------------------------------
# composer.json
# ---------------------------------------------------------------------------


def collect_composer_info(
    prompter: PromptService, context: InterviewContext, default: bool = True
) -> InterviewContext:
    """Optionally collect package metadata and composer dependencies."""
    if not prompter.confirm(
        "Would you like to add a composer.json file for this recipe? "
        "This will let you declare dependencies.",
        default,
    ):
        return context.model_copy(update={"composer": None})

    composer = ComposerInfo(
        vendor_name=prompter.ask("Enter the vendor name.", "drupal"),
        package_name=prompter.ask("Enter the package name.", "my-custom-recipe"),
        author_name=prompter.ask(
            "What is your name? This will be set as the author.", "Developer"
        ),
    )

    for name in ask_until_empty(
        prompter, "Enter the name of the dependency to add (ex. drupal/pathauto)."
    ):
        version = prompter.ask("Enter the version of this dependency to require (ex. ^1.0)")
        composer.dependencies.append(Dependency(name=name, version=version))

    return context.model_copy(update={"composer": composer})


# ---------------------------------------------------------------------------
# Modules
# ---------------------------------------------------------------------------


def collect_modules(
    prompter: PromptService, context: InterviewContext, default: bool = True
) -> InterviewContext:
    modules: list[str] = []
    if prompter.confirm("Would you like to add modules to install for this recipe?", default):
        modules.extend(
            ask_until_empty(prompter, "Enter the name of the module to add (ex. node).")
        )
    return context.model_copy(update={"modules": modules})


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------


def collect_config(
    prompter: PromptService, context: InterviewContext, default: bool = True
) -> InterviewContext:
    """Collect config imports per module, then ask about config actions.

    Answering yes to "import all config" records the wildcard; answering no
    asks for individual files.  If no files are named the wildcard is still
    used.
    """
    imports: list[ConfigImport] = []

    if prompter.confirm("Would you like to run specific config imports for this recipe?", default):
        for module in ask_until_empty(
            prompter, "What module do you want to import config for (ex. node)?"
        ):
            files: list[str] = []
            if not prompter.confirm(
                f"Do you want to import all config for {module} (including optional config)?",
                default,
            ):
                files.extend(
                    ask_until_empty(
                        prompter,
                        f"Enter the config file you want to import for {module} "
                        "(without the .yml extension).",
                    )
                )
            imports.append(ConfigImport(module_name=module, config=files or WILDCARD))

    if prompter.confirm("Would you like to run config actions for this recipe?", default):
        # Config actions are not collected yet; the answer is discarded.
        pass

    return context.model_copy(update={"config_imports": imports})


Step = Callable[[PromptService, InterviewContext], InterviewContext]

INTERVIEW_STEPS: tuple[Step, ...] = (
    collect_core,
    collect_composer_info,
    collect_modules,
    collect_config,
)


def run_interview(prompter: PromptService) -> InterviewContext:
    """Run every step in order and return the completed context."""
    context = InterviewContext()
    for step in INTERVIEW_STEPS:
        context = step(prompter, context)
    return context
