"""Collect which provider supplied which value for every configuration path."""

from __future__ import annotations

import logging

from .model import ConfigurationNode, ConfigurationProvider, ConfigurationRoot, build_path, display_name

logger = logging.getLogger(__name__)

ValueHistory = dict[str, list[tuple[str, str]]]
"""Path -> ``(provider_key, value)`` pairs, highest precedence first."""

ProviderNames = dict[str, str]
"""Provider key -> display name, highest precedence first."""


def collect_provider_information(root: ConfigurationRoot) -> tuple[ProviderNames, ValueHistory]:
    """Build the provider name table and the per-path value history.

    Providers are visited from highest to lowest precedence so the first
    history entry of every path is the value in effect. Providers without a
    key or display name are skipped.

    Args:
        root: Configuration root whose providers are listed lowest precedence first.

    Returns:
        Tuple of (provider names, value history).

    Example:
        >>> from confviz.domain.model import FileBacked
        >>> class Fixed:
        ...     def __init__(self, name, data):
        ...         self.key, self.kind, self._data = name, FileBacked(name), data
        ...     def try_get(self, path):
        ...         return self._data.get(path)
        >>> class Root:
        ...     children = (ConfigurationNode("Mode", "b"),)
        ...     providers = (Fixed("a.json", {"Mode": "a"}), Fixed("b.json", {"Mode": "b"}))
        >>> names, history = collect_provider_information(Root())
        >>> list(names.values())
        ['b.json', 'a.json']
        >>> history["Mode"]
        [('b.json', 'b'), ('a.json', 'a')]
    """
    providers: ProviderNames = {}
    history: ValueHistory = {}

    for provider in reversed(list(root.providers)):
        provider_key = provider.key
        provider_name = display_name(provider.kind)
        if provider_key is None or provider_name is None:
            logger.debug("Skipping provider without identity", extra={"provider": type(provider).__name__})
            continue
        providers[provider_key] = provider_name
        for child in root.children:
            _collect_values(child, None, provider, provider_key, history)

    return providers, history


def _collect_values(
    node: ConfigurationNode,
    parent_path: str | None,
    provider: ConfigurationProvider,
    provider_key: str,
    history: ValueHistory,
) -> None:
    current_path = build_path(parent_path, node.key)
    value = provider.try_get(current_path)
    if value is not None:
        entries = history.setdefault(current_path, [])
        if value:
            entries.append((provider_key, value))
    for child in node.children:
        _collect_values(child, current_path, provider, provider_key, history)


__all__ = [
    "ProviderNames",
    "ValueHistory",
    "collect_provider_information",
]
