"""Recipe generator configuration.

Typed configuration for the ``recipe`` command.  Settings use a Pydantic v2
model so they are validated at construction time and can be built from
environment variables or CLI flags without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field


class Config(BaseModel):
    """Global recipe generator configuration.

    Holds the Drupal root the recipes are written under and the template
    directory used for rendering.  Created once by the CLI entry point and
    passed to the writer and the destination resolver.
    """

    drupal_root: Path = Field(default_factory=Path.cwd)
    recipes_dir: str = Field(
        default="recipes/custom",
        description="Recipe directory relative to the Drupal root",
    )
    template_dir: Path | None = Field(
        default=None,
        description="Template directory override (defaults to the packaged templates)",
    )
    overwrite: bool = Field(default=False, description="Overwrite existing files")

    # ------------------------------------------------------------------
    # Derived paths
    # ------------------------------------------------------------------

    @property
    def recipes_path(self) -> Path:
        """Directory that holds every custom recipe."""
        return self.drupal_root / self.recipes_dir

    def destination_for(self, recipe_directory: str) -> Path:
        """Return ``<drupal_root>/recipes/custom/<recipe_directory>``."""
        return self.recipes_path / recipe_directory

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            RECIPE_DRUPAL_ROOT, RECIPE_RECIPES_DIR, RECIPE_TEMPLATE_DIR.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RECIPE_DRUPAL_ROOT"):
            kwargs["drupal_root"] = Path(os.environ["RECIPE_DRUPAL_ROOT"])
        if os.environ.get("RECIPE_RECIPES_DIR"):
            kwargs["recipes_dir"] = os.environ["RECIPE_RECIPES_DIR"]
        if os.environ.get("RECIPE_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["RECIPE_TEMPLATE_DIR"])
        return cls(**kwargs)
