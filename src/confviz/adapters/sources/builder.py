"""Merge ordered providers into a configuration root.

Contents:
    * :class:`MergedConfiguration` - immutable root: merged tree plus providers.
    * :class:`ConfigurationBuilder` - collects providers and builds the root.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from confviz.domain.model import (
    KEY_DELIMITER,
    ConfigurationNode,
    ConfigurationProvider,
    ConfigurationSection,
)

from .providers import CommandLineProvider, EnvironmentProvider, MemoryProvider, provider_for_file

logger = logging.getLogger(__name__)


class LoadableProvider(ConfigurationProvider, Protocol):
    """A provider that can (re)load its source and enumerate its paths."""

    def load(self) -> None: ...

    def paths(self) -> Iterable[str]: ...


@dataclass(frozen=True, slots=True)
class MergedConfiguration:
    """Merged configuration tree plus the providers it came from.

    Attributes:
        children: Top-level sections of the merged tree.
        providers: Providers in precedence order, lowest first.

    Example:
        >>> root = ConfigurationBuilder().add_mapping({"App": {"Name": "demo"}}).build()
        >>> root.get("app:name")
        'demo'
        >>> [node.key for node in root.get_section("App").children]
        ['Name']
    """

    children: tuple[ConfigurationNode, ...]
    providers: tuple[ConfigurationProvider, ...]

    def get(self, path: str) -> str | None:
        """Return the effective value at *path*, or ``None``."""
        node = self._find(path)
        return node.value if node is not None else None

    def get_section(self, path: str) -> ConfigurationSection:
        """Return a non-root view of the subtree at *path*; empty when missing."""
        node = self._find(path)
        return ConfigurationSection(path, node.children if node is not None else ())

    def _find(self, path: str) -> ConfigurationNode | None:
        parent = ConfigurationNode("", None, self.children)
        node: ConfigurationNode | None = parent
        for key in path.split(KEY_DELIMITER):
            if node is None:
                return None
            node = node.child(key)
        return node


@dataclass(slots=True)
class _DraftNode:
    key: str
    value: str | None = None
    children: dict[str, _DraftNode] = field(default_factory=dict)

    def freeze(self) -> ConfigurationNode:
        return ConfigurationNode(self.key, self.value, tuple(child.freeze() for child in self.children.values()))


def merge_providers(providers: Iterable[LoadableProvider]) -> tuple[ConfigurationNode, ...]:
    """Merge the paths of already loaded *providers* into one immutable tree.

    Keys match case-insensitively; the first spelling and position win. A
    node's value comes from the last (highest precedence) provider that has
    exactly that path.

    Example:
        >>> low, high = MemoryProvider({"A": {"B": "1"}}), MemoryProvider({"a": {"b": "2", "C": "3"}})
        >>> low.load(); high.load()
        >>> tree = merge_providers([low, high])
        >>> [(child.key, child.value) for child in tree[0].children]
        [('B', '2'), ('C', '3')]
    """
    root = _DraftNode("")
    for provider in providers:
        for path in provider.paths():
            node = root
            for key in path.split(KEY_DELIMITER):
                node = node.children.setdefault(key.casefold(), _DraftNode(key))
            node.value = provider.try_get(path)
    return root.freeze().children


class ConfigurationBuilder:
    """Collect providers in precedence order (lowest first) and build a root.

    Every ``add_*`` method returns the builder so calls can be chained.

    Example:
        >>> root = (
        ...     ConfigurationBuilder()
        ...     .add_mapping({"Mode": "safe"}, name="defaults")
        ...     .add_command_line(("Mode=fast",))
        ...     .build()
        ... )
        >>> root.get("Mode")
        'fast'
        >>> len(root.providers)
        2
    """

    def __init__(self) -> None:
        self._providers: list[LoadableProvider] = []

    @property
    def providers(self) -> tuple[LoadableProvider, ...]:
        return tuple(self._providers)

    def add(self, provider: LoadableProvider) -> ConfigurationBuilder:
        self._providers.append(provider)
        return self

    def add_mapping(self, data: Mapping[str, Any], *, name: str | None = None) -> ConfigurationBuilder:
        return self.add(MemoryProvider(data, name=name))

    def add_file(self, path: str | Path, *, optional: bool = False) -> ConfigurationBuilder:
        """Add a TOML, JSON or dotenv file, chosen by file name.

        Raises:
            SourceFormatError: If the file name has no supported format.
        """
        return self.add(provider_for_file(path, optional=optional))

    def add_environment(self, prefix: str | None = None) -> ConfigurationBuilder:
        return self.add(EnvironmentProvider(prefix))

    def add_command_line(self, definitions: tuple[str, ...]) -> ConfigurationBuilder:
        return self.add(CommandLineProvider(definitions))

    def build(self) -> MergedConfiguration:
        """Load every provider and merge them into a :class:`MergedConfiguration`.

        Raises:
            SourceNotFoundError: If a required file is missing.
            SourceFormatError: If a file cannot be parsed.
            ValueError: If a command-line definition is malformed.
        """
        for provider in self._providers:
            provider.load()
        children = merge_providers(self._providers)
        logger.debug("Built configuration", extra={"providers": len(self._providers), "sections": len(children)})
        return MergedConfiguration(children=children, providers=tuple(self._providers))


__all__ = [
    "ConfigurationBuilder",
    "LoadableProvider",
    "MergedConfiguration",
    "merge_providers",
]
