"""The ``recipe`` generator.

Interviews the user about a Drupal recipe and requests ``recipe.yml`` (and,
when package metadata was given, ``composer.json``) for the destination
``<drupal_root>/recipes/custom/<recipe_directory>``.
"""

from __future__ import annotations

from pathlib import Path

from .config import Config
from .interview import InterviewContext, PromptService, run_interview
from .registry import GeneratorDescriptor, registry
from .scaffolder import AssetCollection

MANIFEST_FILE = "recipe.yml"
MANIFEST_TEMPLATE = "recipe/recipe.yml.j2"
COMPOSER_FILE = "composer.json"
COMPOSER_TEMPLATE = "composer/composer.json.j2"


class RecipeGenerator:
    """Generates a Recipe for adding new functionality to Drupal."""

    descriptor = GeneratorDescriptor(
        name="recipe",
        description="Generates a Recipe for adding new functionality to Drupal.",
        hidden=True,
        type="other",
        template_path=Path(__file__).parent / "scaffolder" / "templates",
    )

    def __init__(self, prompter: PromptService) -> None:
        self.prompter = prompter

    # -- Public API --------------------------------------------------------

    def generate(self) -> tuple[InterviewContext, AssetCollection]:
        """Run the interview and return the answers with the requested files."""
        context = run_interview(self.prompter)
        return context, self.build_assets(context)

    @staticmethod
    def build_assets(context: InterviewContext) -> AssetCollection:
        """Request the manifest, plus ``composer.json`` if it was asked for."""
        variables = context.to_vars()
        assets = AssetCollection()
        assets.add_file(MANIFEST_FILE, MANIFEST_TEMPLATE, variables)
        if variables["composer"]:
            assets.add_file(COMPOSER_FILE, COMPOSER_TEMPLATE, variables)
        return assets

    @staticmethod
    def destination(context: InterviewContext, config: Config) -> Path:
        return config.destination_for(context.recipe_directory)


registry.register(RecipeGenerator.descriptor, RecipeGenerator)
