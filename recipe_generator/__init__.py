"""Recipe generator -- interactive scaffolding for Drupal recipes.

Asks a fixed sequence of questions about a recipe and writes ``recipe.yml``
(and optionally ``composer.json``) under ``recipes/custom/<directory>``.
"""

__version__ = "0.1.0"
