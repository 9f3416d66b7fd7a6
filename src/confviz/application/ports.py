"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function. Module-level functions satisfy
these protocols through structural subtyping (PEP 544).

System Role:
    Sits between domain and adapters. Infrastructure types (``Config``,
    ``MergedConfiguration``) are imported under ``TYPE_CHECKING`` only so the
    application layer stays free of adapter imports at runtime.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol, TextIO

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.sources.builder import MergedConfiguration


class GetConfig(Protocol):
    """Load confviz settings with the bundled defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize the lib_log_rich runtime from settings."""

    def __call__(self, config: Config) -> None: ...


class LoadConfiguration(Protocol):
    """Build a configuration root from files, environment and definitions."""

    def __call__(
        self,
        *,
        files: Sequence[str] = ...,
        optional_files: Sequence[str] = ...,
        environment: bool = ...,
        env_prefix: str | None = ...,
        definitions: tuple[str, ...] = ...,
    ) -> MergedConfiguration: ...


class DescribeSettings(Protocol):
    """Turn loaded settings into a visualizable configuration root."""

    def __call__(self, config: Config) -> MergedConfiguration: ...


class DisplayReport(Protocol):
    """Print a rendered report."""

    def __call__(self, report: str) -> None: ...


class EnableUnicodeConsole(Protocol):
    """Switch console streams to UTF-8 so Unicode glyphs render."""

    def __call__(self, *streams: TextIO) -> bool: ...


__all__ = [
    "DescribeSettings",
    "DisplayReport",
    "EnableUnicodeConsole",
    "GetConfig",
    "InitLogging",
    "LoadConfiguration",
]
