"""Recipe scaffolder -- renders requested files from Jinja2 templates.

Quick usage::

    from recipe_generator.scaffolder import AssetCollection, AssetWriter, TemplateRenderer

    assets = AssetCollection()
    assets.add_file("recipe.yml", "recipe/recipe.yml.j2", variables)
    writer = AssetWriter(TemplateRenderer())
    written = await writer.write(assets, "/var/www/html/recipes/custom/my-recipe")
"""

from recipe_generator.scaffolder.assets import Asset, AssetCollection, AssetWriter
from recipe_generator.scaffolder.templates import TemplateRenderer

__all__ = [
    "Asset",
    "AssetCollection",
    "AssetWriter",
    "TemplateRenderer",
]
