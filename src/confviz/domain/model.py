"""Configuration tree and provider value objects.

The report builder reads configuration through these types only. They carry
no I/O: providers that read files or the environment live in
:mod:`confviz.adapters.sources` and merely satisfy :class:`ConfigurationProvider`.

Contents:
    * :class:`ConfigurationNode` - immutable tree node (key, value, children).
    * :class:`FileBacked` / :class:`Named` - tagged provider kinds.
    * :class:`ConfigurationProvider` - protocol every provider satisfies.
    * :class:`ConfigurationView` / :class:`ConfigurationRoot` - what the report consumes.
    * :class:`ConfigurationSection` - non-root view over a subtree.
    * :func:`build_path` / :func:`display_name` - path and naming helpers.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

#: Separator between keys in a configuration path.
KEY_DELIMITER = ":"


@dataclass(frozen=True, slots=True)
class ConfigurationNode:
    """A named section of the configuration tree.

    Attributes:
        key: Name of the section, unique among its siblings.
        value: Scalar value, or ``None`` when the section only groups children.
        children: Child sections in declaration order.

    Example:
        >>> leaf = ConfigurationNode("Default", "Information")
        >>> node = ConfigurationNode("LogLevel", None, (leaf,))
        >>> node.is_leaf, leaf.is_leaf
        (False, True)
    """

    key: str
    value: str | None = None
    children: tuple[ConfigurationNode, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_leaf_with_value(self) -> bool:
        """True when the node has a non-empty value and no children.

        A node carrying both children and a value is not a leaf here, so its
        own value is never printed in a report.
        """
        return bool(self.value) and self.is_leaf

    def child(self, key: str) -> ConfigurationNode | None:
        """Return the child with *key* (case-insensitive) or ``None``."""
        folded = key.casefold()
        for child in self.children:
            if child.key.casefold() == folded:
                return child
        return None


@dataclass(frozen=True, slots=True)
class FileBacked:
    """Provider kind for sources loaded from a file."""

    path: str


@dataclass(frozen=True, slots=True)
class Named:
    """Provider kind for sources identified by a category name."""

    category: str


ProviderKind = FileBacked | Named
"""Tagged variant describing where a provider's values come from."""


def display_name(kind: ProviderKind | None) -> str | None:
    """Return the human-readable name of a provider kind.

    Example:
        >>> display_name(FileBacked("appsettings.json"))
        'appsettings.json'
        >>> display_name(Named("EnvironmentProvider"))
        'EnvironmentProvider'
        >>> display_name(None) is None
        True
    """
    if isinstance(kind, FileBacked):
        return kind.path
    if isinstance(kind, Named):
        return kind.category
    return None


@runtime_checkable
class ConfigurationProvider(Protocol):
    """A source of path/value pairs taking part in the merged configuration."""

    @property
    def key(self) -> str | None:
        """Stable identity of the provider, or ``None`` when it has none."""
        ...

    @property
    def kind(self) -> ProviderKind | None: ...

    def try_get(self, path: str) -> str | None:
        """Return the value stored at *path*, or ``None`` when absent."""
        ...


@runtime_checkable
class ConfigurationView(Protocol):
    """Anything exposing an ordered sequence of top-level sections."""

    @property
    def children(self) -> Sequence[ConfigurationNode]: ...


@runtime_checkable
class ConfigurationRoot(ConfigurationView, Protocol):
    """A configuration view that also knows its providers (lowest precedence first)."""

    @property
    def providers(self) -> Sequence[ConfigurationProvider]: ...


@dataclass(frozen=True, slots=True)
class ConfigurationSection:
    """Non-root view over a subtree; it carries no provider information.

    Example:
        >>> section = ConfigurationSection("Logging", (ConfigurationNode("Level", "Debug"),))
        >>> [child.key for child in section.children]
        ['Level']
        >>> isinstance(section, ConfigurationRoot)
        False
    """

    path: str
    children: tuple[ConfigurationNode, ...] = ()


def build_path(parent_path: str | None, key: str) -> str:
    """Join *key* onto *parent_path* with the key delimiter.

    Example:
        >>> build_path(None, "Logging")
        'Logging'
        >>> build_path("Logging:LogLevel", "Default")
        'Logging:LogLevel:Default'
    """
    return f"{parent_path}{KEY_DELIMITER}{key}" if parent_path else key


__all__ = [
    "KEY_DELIMITER",
    "ConfigurationNode",
    "ConfigurationProvider",
    "ConfigurationRoot",
    "ConfigurationSection",
    "ConfigurationView",
    "FileBacked",
    "Named",
    "ProviderKind",
    "build_path",
    "display_name",
]
