"""Configuration providers reading mappings, files, the environment and definitions.

Every provider flattens its source into colon paths when :meth:`FlatProvider.load`
is called and answers case-insensitive lookups afterwards. Providers satisfy
:class:`confviz.domain.model.ConfigurationProvider`.

Contents:
    * :class:`FlatProvider` - shared storage and lookup.
    * :class:`MemoryProvider` - in-memory mapping.
    * :class:`TomlFileProvider` / :class:`JsonFileProvider` / :class:`DotenvFileProvider` - files.
    * :class:`EnvironmentProvider` - process environment snapshot.
    * :class:`CommandLineProvider` - ``SECTION:KEY=VALUE`` definitions.
    * :func:`provider_for_file` - pick a file provider from the file name.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

import orjson
import rtoml
from dotenv import dotenv_values

from confviz.domain.enums import SourceFormat
from confviz.domain.errors import SourceFormatError, SourceNotFoundError
from confviz.domain.model import FileBacked, Named, ProviderKind, display_name

from .definitions import parse_definitions
from .flatten import flatten_mapping, normalize_env_key

logger = logging.getLogger(__name__)


class FlatProvider:
    """Base provider storing flattened path/value pairs.

    Subclasses implement :meth:`_read` and :attr:`kind`. Lookups fold case,
    and the first spelling of a path is kept for :meth:`paths`.

    Example:
        >>> provider = MemoryProvider({"Logging": {"Level": "Debug"}})
        >>> provider.load()
        >>> provider.try_get("logging:level")
        'Debug'
        >>> provider.try_get("Missing") is None
        True
    """

    def __init__(self) -> None:
        self._data: dict[str, tuple[str, str]] = {}

    @property
    def kind(self) -> ProviderKind | None:
        raise NotImplementedError

    @property
    def key(self) -> str | None:
        """Display name plus instance identity, so equal sources stay distinct."""
        name = display_name(self.kind)
        if name is None:
            return None
        return f"{type(self).__name__} for '{name}' ({id(self):#x})"

    def load(self) -> None:
        """(Re)read the source and replace the stored values."""
        data: dict[str, tuple[str, str]] = {}
        for path, value in self._read().items():
            folded = path.casefold()
            original = data[folded][0] if folded in data else path
            data[folded] = (original, value)
        self._data = data
        logger.debug("Loaded configuration source", extra={"source": display_name(self.kind), "keys": len(data)})

    def paths(self) -> Iterator[str]:
        """Yield every stored path in source order."""
        for path, _ in self._data.values():
            yield path

    def try_get(self, path: str) -> str | None:
        entry = self._data.get(path.casefold())
        return entry[1] if entry is not None else None

    def _read(self) -> Mapping[str, str]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({display_name(self.kind)!r})"


class MemoryProvider(FlatProvider):
    """Values supplied as a (nested) in-memory mapping.

    Example:
        >>> MemoryProvider({"a": 1}).kind
        Named(category='MemoryProvider')
    """

    def __init__(self, data: Mapping[str, Any], *, name: str | None = None) -> None:
        super().__init__()
        self._source = data
        self._name = name or type(self).__name__

    @property
    def kind(self) -> ProviderKind:
        return Named(self._name)

    def _read(self) -> Mapping[str, str]:
        return flatten_mapping(self._source)


class FileProvider(FlatProvider):
    """Base for providers reading a single file.

    A missing file raises :class:`SourceNotFoundError` unless *optional* is
    set, in which case it contributes no values.
    """

    def __init__(self, path: str | Path, *, optional: bool = False) -> None:
        super().__init__()
        self.path = Path(path)
        self.optional = optional
        self._display = str(path)

    @property
    def kind(self) -> ProviderKind:
        return FileBacked(self._display)

    def _read(self) -> Mapping[str, str]:
        if not self.path.is_file():
            if self.optional:
                logger.debug("Optional configuration file not found", extra={"path": self._display})
                return {}
            raise SourceNotFoundError(f"Configuration file not found: {self._display}")
        try:
            return self._parse(self.path)
        except SourceFormatError:
            raise
        except (OSError, ValueError) as exc:
            raise SourceFormatError(f"{self._display}: {exc}") from exc

    def _parse(self, path: Path) -> Mapping[str, str]:
        raise NotImplementedError


class TomlFileProvider(FileProvider):
    """TOML file; tables become sections."""

    def _parse(self, path: Path) -> Mapping[str, str]:
        return flatten_mapping(rtoml.load(path))


class JsonFileProvider(FileProvider):
    """JSON file; the top level must be an object."""

    def _parse(self, path: Path) -> Mapping[str, str]:
        document = orjson.loads(path.read_bytes())
        if not isinstance(document, dict):
            raise SourceFormatError(f"{self._display}: expected an object at top level")
        return flatten_mapping(document)


class DotenvFileProvider(FileProvider):
    """``.env`` file; ``__`` in a variable name separates sections.

    Values are kept as written: ``${VAR}`` references are not expanded, so a
    reported value is always the one the file holds.
    """

    def _parse(self, path: Path) -> Mapping[str, str]:
        values = dotenv_values(path, interpolate=False)
        return {normalize_env_key(key): value or "" for key, value in values.items()}


class EnvironmentProvider(FlatProvider):
    """Snapshot of environment variables taken on :meth:`load`.

    With a *prefix*, only variables starting with it (case-insensitive) are
    kept and the prefix is stripped.

    Example:
        >>> provider = EnvironmentProvider("APP_", environ={"APP_Mode__Level": "3", "HOME": "/root"})
        >>> provider.load()
        >>> list(provider.paths())
        ['Mode:Level']
    """

    def __init__(self, prefix: str | None = None, *, environ: Mapping[str, str] | None = None) -> None:
        super().__init__()
        self.prefix = prefix or ""
        self._environ = environ

    @property
    def kind(self) -> ProviderKind:
        return Named(type(self).__name__)

    def _read(self) -> Mapping[str, str]:
        environ = self._environ if self._environ is not None else os.environ
        folded_prefix = self.prefix.casefold()
        selected: dict[str, str] = {}
        for name, value in environ.items():
            if not name.casefold().startswith(folded_prefix):
                continue
            key = normalize_env_key(name[len(self.prefix) :])
            if key:
                selected[key] = value
        return selected


class CommandLineProvider(FlatProvider):
    """``SECTION:KEY=VALUE`` definitions given on the command line.

    Raises:
        ValueError: From :meth:`load` when a definition is malformed.

    Example:
        >>> provider = CommandLineProvider(("Logging:Level=Debug",))
        >>> provider.load()
        >>> provider.try_get("Logging:Level")
        'Debug'
    """

    def __init__(self, definitions: tuple[str, ...]) -> None:
        super().__init__()
        self.definitions = definitions

    @property
    def kind(self) -> ProviderKind:
        return Named(type(self).__name__)

    def _read(self) -> Mapping[str, str]:
        return parse_definitions(self.definitions)


_PROVIDERS_BY_FORMAT: dict[SourceFormat, type[FileProvider]] = {
    SourceFormat.TOML: TomlFileProvider,
    SourceFormat.JSON: JsonFileProvider,
    SourceFormat.DOTENV: DotenvFileProvider,
}


def detect_format(path: str | Path) -> SourceFormat:
    """Infer the source format from a file name.

    Raises:
        SourceFormatError: If the suffix is not recognised.

    Examples:
        >>> detect_format("appsettings.json")
        <SourceFormat.JSON: 'json'>
        >>> detect_format("config/app.TOML")
        <SourceFormat.TOML: 'toml'>
        >>> detect_format(".env.local")
        <SourceFormat.DOTENV: 'dotenv'>
    """
    candidate = Path(path)
    suffix = candidate.suffix.lower()
    if suffix == ".toml":
        return SourceFormat.TOML
    if suffix == ".json":
        return SourceFormat.JSON
    if suffix == ".env" or candidate.name.lower().startswith(".env"):
        return SourceFormat.DOTENV
    raise SourceFormatError(f"Unsupported configuration source: {path} (expected .toml, .json or .env)")


def provider_for_file(path: str | Path, *, optional: bool = False) -> FileProvider:
    """Return the file provider matching the file name of *path*.

    Example:
        >>> provider_for_file("appsettings.json", optional=True)
        JsonFileProvider('appsettings.json')
    """
    return _PROVIDERS_BY_FORMAT[detect_format(path)](path, optional=optional)


__all__ = [
    "CommandLineProvider",
    "DotenvFileProvider",
    "EnvironmentProvider",
    "FileProvider",
    "FlatProvider",
    "JsonFileProvider",
    "MemoryProvider",
    "TomlFileProvider",
    "detect_format",
    "provider_for_file",
]
