"""Bridge a lib_layered_config ``Config`` into a visualizable configuration root.

lib_layered_config records only the winning layer for every dotted key, so
each origin (layer plus file path) becomes one provider holding the values it
won. Overridden values from lower layers are not recoverable from a merged
``Config``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config

from confviz.adapters.sources.builder import MergedConfiguration, merge_providers
from confviz.adapters.sources.flatten import flatten_mapping
from confviz.adapters.sources.providers import FlatProvider
from confviz.domain.model import KEY_DELIMITER, FileBacked, Named, ProviderKind, build_path

#: Layer names in lib_layered_config precedence order, lowest first.
LAYER_ORDER: tuple[str, ...] = ("defaults", "app", "host", "user", "dotenv", "env")

#: Layer name used for values that carry no provenance metadata.
UNKNOWN_LAYER = "unknown"


class LayerProvider(FlatProvider):
    """Values a single lib_layered_config origin won during the merge.

    File-backed origins are shown by path, in-memory ones (environment
    variables) by layer name.

    Example:
        >>> provider = LayerProvider("env", None, {"service:timeout": "30"})
        >>> provider.load()
        >>> provider.kind, provider.try_get("service:timeout")
        (Named(category='env'), '30')
    """

    def __init__(self, layer: str, path: str | None, values: Mapping[str, str]) -> None:
        super().__init__()
        self.layer = layer
        self.path = path
        self._values = dict(values)

    @property
    def kind(self) -> ProviderKind:
        return FileBacked(self.path) if self.path else Named(self.layer)

    def _read(self) -> Mapping[str, str]:
        return self._values


def root_from_layered_config(config: Config) -> MergedConfiguration:
    """Convert *config* into a root whose providers follow layer precedence.

    Dotted keys become colon paths. Values without provenance are grouped in
    an ``unknown`` provider with the lowest precedence.

    Example:
        >>> cfg = Config(
        ...     {"service": {"timeout": 30, "name": "demo"}},
        ...     {
        ...         "service.timeout": {"layer": "env", "path": None, "key": "service.timeout"},
        ...         "service.name": {"layer": "user", "path": "/home/u/.config/demo/config.toml", "key": "service.name"},
        ...     },
        ... )
        >>> root = root_from_layered_config(cfg)
        >>> [provider.kind for provider in root.providers]
        [FileBacked(path='/home/u/.config/demo/config.toml'), Named(category='env')]
        >>> root.get("service:timeout")
        '30'
    """
    grouped: dict[tuple[str, str | None], dict[str, str]] = {}
    _group_by_origin(config, config.as_dict(), [], grouped)

    providers = [LayerProvider(layer, path, values) for (layer, path), values in grouped.items()]
    providers.sort(key=lambda provider: _layer_rank(provider.layer))
    for provider in providers:
        provider.load()
    return MergedConfiguration(children=merge_providers(providers), providers=tuple(providers))


def _group_by_origin(
    config: Config,
    data: Mapping[str, Any],
    segments: list[str],
    grouped: dict[tuple[str, str | None], dict[str, str]],
) -> None:
    for key, value in data.items():
        dotted_segments = [*segments, str(key)]
        origin = config.origin(".".join(dotted_segments))
        if origin is None and isinstance(value, Mapping) and value:
            _group_by_origin(config, value, dotted_segments, grouped)
            continue
        layer, path = (origin["layer"], origin["path"]) if origin is not None else (UNKNOWN_LAYER, None)
        owned = flatten_mapping({str(key): value})
        parent = KEY_DELIMITER.join(segments)
        grouped.setdefault((layer, path), {}).update({build_path(parent, sub): item for sub, item in owned.items()})


def _layer_rank(layer: str) -> int:
    return LAYER_ORDER.index(layer) if layer in LAYER_ORDER else -1


__all__ = [
    "LAYER_ORDER",
    "LayerProvider",
    "root_from_layered_config",
]
