"""Command-line entry point for the recipe generator."""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from jinja2 import TemplateNotFound
from rich.table import Table

from .config import Config
from .generator import RecipeGenerator  # noqa: F401  registers the ``recipe`` command
from .interview import RichPrompter
from .registry import GeneratorRegistry, registry
from .scaffolder import AssetWriter, TemplateRenderer
from .utils import (
    console,
    print_error,
    print_header,
    print_success,
    print_summary_table,
    print_warning,
)


def build_parser(generators: GeneratorRegistry = registry) -> argparse.ArgumentParser:
    """Build the parser with one subcommand per registered generator."""
    parser = argparse.ArgumentParser(
        prog="recipe-generator",
        description="Interactive Drupal recipe generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  recipe-generator recipe\n"
            "  recipe-generator recipe --drupal-root /var/www/html\n"
            "  recipe-generator recipe -d ./recipes/custom/my-recipe --force\n"
        ),
    )

    visible = ["list"] + [d.name for d in generators.descriptors()]
    subparsers = parser.add_subparsers(
        dest="command", metavar="{" + ",".join(visible) + "}"
    )

    list_parser = subparsers.add_parser("list", help="List available generators")
    list_parser.add_argument(
        "--all", action="store_true", help="Include hidden generators"
    )

    for descriptor in generators.descriptors(include_hidden=True):
        kwargs = {} if descriptor.hidden else {"help": descriptor.description}
        sub = subparsers.add_parser(
            descriptor.name, description=descriptor.description, **kwargs
        )
        sub.add_argument(
            "--destination", "-d",
            default=None,
            help="Write files here instead of <drupal-root>/recipes/custom/<directory>",
        )
        sub.add_argument(
            "--drupal-root",
            default=None,
            help="Drupal root directory (default: $RECIPE_DRUPAL_ROOT or the current directory)",
        )
        sub.add_argument(
            "--force",
            action="store_true",
            help="Overwrite files that already exist",
        )

    return parser


def _list_generators(generators: GeneratorRegistry, include_hidden: bool) -> None:
    table = Table(title="Generators", show_header=True, header_style="bold cyan")
    table.add_column("Name", no_wrap=True)
    table.add_column("Type", style="dim")
    table.add_column("Description")
    for descriptor in generators.descriptors(include_hidden=include_hidden):
        name = f"{descriptor.name} (hidden)" if descriptor.hidden else descriptor.name
        table.add_row(name, descriptor.type, descriptor.description)
    console.print(table)


def _run_generator(args: argparse.Namespace, generators: GeneratorRegistry) -> None:
    config = Config.from_env()
    if args.drupal_root:
        config.drupal_root = Path(args.drupal_root)
    if args.force:
        config.overwrite = True

    descriptor = generators.descriptor(args.command)
    print_header(descriptor.description)

    generator = generators.create(args.command, RichPrompter())
    try:
        context, assets = generator.generate()
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_error("Aborted.")
        sys.exit(1)

    if args.destination:
        destination = Path(args.destination)
    else:
        destination = generator.destination(context, config)

    renderer = TemplateRenderer(config.template_dir or descriptor.template_path)
    writer = AssetWriter(renderer, overwrite=config.overwrite)
    try:
        written = asyncio.run(writer.write(assets, destination))
    except TemplateNotFound as exc:
        print_error(f"Error: template not found: {exc.name}")
        sys.exit(1)
    except OSError as exc:
        print_error(f"Error: could not write to {destination}: {exc}")
        sys.exit(1)

    if not written:
        print_warning(f"Nothing written: every file already exists in {destination} (use --force)")
        return

    print_summary_table(
        {path.name: str(path) for path in written}, title="Generated files"
    )
    print_success(f"Recipe '{context.recipe_name}' generated in {destination}")


def main(argv: list[str] | None = None, generators: GeneratorRegistry = registry) -> None:
    """CLI entry point for ``recipe-generator`` / ``python -m recipe_generator``."""
    parser = build_parser(generators)
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(2)

    if args.command == "list":
        _list_generators(generators, include_hidden=args.all)
        return

    _run_generator(args, generators)


if __name__ == "__main__":
    main()
