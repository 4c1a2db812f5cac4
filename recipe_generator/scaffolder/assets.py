"""Declarative file requests and the writer that renders them.

Generators only describe the files they want (:class:`AssetCollection`);
:class:`AssetWriter` turns those descriptions into files under a destination
directory.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from recipe_generator.utils import print_warning

from .templates import TemplateRenderer


class Asset(BaseModel):
    """One file to render: destination path, template and variables."""

    path: str = Field(..., description="Path relative to the destination directory")
    template: str = Field(..., description="Template path relative to the template root")
    variables: dict[str, Any] = Field(default_factory=dict)


class AssetCollection:
    """Ordered list of requested files."""

    def __init__(self) -> None:
        self._assets: list[Asset] = []

    def add_file(self, path: str, template: str, variables: dict[str, Any]) -> Asset:
        asset = Asset(path=path, template=template, variables=variables)
        self._assets.append(asset)
        return asset

    @property
    def paths(self) -> list[str]:
        return [asset.path for asset in self._assets]

    def __iter__(self) -> Iterator[Asset]:
        return iter(self._assets)

    def __len__(self) -> int:
        return len(self._assets)


class AssetWriter:
    """Renders every asset of a collection into a destination directory."""

    def __init__(self, renderer: TemplateRenderer, overwrite: bool = False) -> None:
        self.renderer = renderer
        self.overwrite = overwrite

    async def write(self, assets: AssetCollection, destination: str | Path) -> list[Path]:
        """Render *assets* under *destination*.

        Existing files are left alone (with a warning) unless the writer was
        created with ``overwrite=True``.

        Returns:
            List of written file paths, in request order.
        """
        out_base = Path(destination)
        written: list[Path] = []

        for asset in assets:
            output_file = out_base / asset.path
            if output_file.exists() and not self.overwrite:
                print_warning(f"Skipped existing file: {output_file}")
                continue
            path = await self.renderer.render_to_file(
                asset.template, output_file, asset.variables
            )
            written.append(path)

        return written
