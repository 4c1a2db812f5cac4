"""Generator descriptors and the registry the CLI dispatches through."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class GeneratorDescriptor:
    """Static metadata for one generator command."""

    name: str
    description: str
    hidden: bool = False
    type: str = "other"
    template_path: Path | None = None


class GeneratorRegistry:
    """Maps command names to a descriptor and a generator factory."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[GeneratorDescriptor, Callable[..., Any]]] = {}

    def register(self, descriptor: GeneratorDescriptor, factory: Callable[..., Any]) -> None:
        if descriptor.name in self._entries:
            raise ValueError(f"Generator already registered: {descriptor.name}")
        self._entries[descriptor.name] = (descriptor, factory)

    def descriptor(self, name: str) -> GeneratorDescriptor:
        return self._entries[name][0]

    def create(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """Instantiate the generator registered as *name*.

        Raises:
            KeyError: If no generator has that name.
        """
        _, factory = self._entries[name]
        return factory(*args, **kwargs)

    def descriptors(self, include_hidden: bool = False) -> Iterator[GeneratorDescriptor]:
        for descriptor, _ in self._entries.values():
            if include_hidden or not descriptor.hidden:
                yield descriptor

    def __contains__(self, name: object) -> bool:
        return name in self._entries


registry = GeneratorRegistry()
