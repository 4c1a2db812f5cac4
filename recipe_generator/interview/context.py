"""Pydantic models for the answers collected by the recipe interview."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

WILDCARD = "*"


class Dependency(BaseModel):
    """A single composer requirement."""

    name: str
    version: str = Field(default="", description="Version constraint; blank means any")

    @property
    def constraint(self) -> str:
        return self.version or WILDCARD


class ComposerInfo(BaseModel):
    """Package metadata for the recipe's ``composer.json``."""

    vendor_name: str = "drupal"
    package_name: str = "my-custom-recipe"
    author_name: str = "Developer"
    dependencies: list[Dependency] = Field(default_factory=list)

    @property
    def package(self) -> str:
        """Full composer package name, ``<vendor>/<package>``."""
        return f"{self.vendor_name}/{self.package_name}"

    def require(self) -> dict[str, str]:
        """Return the ``require`` map, later duplicates winning."""
        return {dep.name: dep.constraint for dep in self.dependencies}


class ConfigImport(BaseModel):
    """Config to import for one module: everything, or named files."""

    module_name: str
    config: Literal["*"] | list[str] = WILDCARD


class InterviewContext(BaseModel):
    """Every answer gathered by the interview.

    Each interview step receives the context and returns an updated copy, so
    a single instance owns the answers from start to rendering.
    """

    recipe_name: str = ""
    recipe_directory: str = ""
    recipe_type: str = ""
    recipe_description: str = ""
    composer: ComposerInfo | None = None
    modules: list[str] = Field(default_factory=list)
    config_imports: list[ConfigImport] = Field(default_factory=list)

    def to_vars(self) -> dict[str, Any]:
        """Flatten into the variable mapping handed to the templates."""
        composer: dict[str, Any] = {}
        if self.composer is not None:
            composer = self.composer.model_dump()
            composer["package"] = self.composer.package
            composer["require"] = self.composer.require()

        return {
            "recipe_name": self.recipe_name,
            "recipe_directory": self.recipe_directory,
            "recipe_type": self.recipe_type,
            "recipe_description": self.recipe_description,
            "composer": composer,
            "modules": list(self.modules),
            "config": {
                "import": [item.model_dump() for item in merge_config_imports(self.config_imports)]
            },
        }


def merge_config_imports(imports: list[ConfigImport]) -> list[ConfigImport]:
    """Combine repeated modules into one record each, in first-seen order.

    A wildcard for a module absorbs any file list given for it.  File lists
    are joined in order without repeats.
    """
    merged: dict[str, ConfigImport] = {}
    for item in imports:
        current = merged.get(item.module_name)
        if current is None:
            merged[item.module_name] = item.model_copy(deep=True)
        elif current.config == WILDCARD or item.config == WILDCARD:
            current.config = WILDCARD
        else:
            for filename in item.config:
                if filename not in current.config:
                    current.config.append(filename)
    return list(merged.values())
