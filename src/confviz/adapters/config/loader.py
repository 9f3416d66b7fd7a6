"""Load confviz's own settings through lib_layered_config.

confviz keeps its preferences (symbol style, exclusion defaults, logging) in
the same layered scheme it helps to debug: bundled defaults, then app, host
and user files, then ``.env`` and ``CONFVIZ___*`` environment variables.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from confviz import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Protocol for the cached settings loader."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are empty, too long, or escape the config directory.

    Raises:
        ValueError: If the profile name is invalid.

    Examples:
        >>> validate_profile("staging-v2")

        >>> try:
        ...     validate_profile("../etc")
        ... except ValueError:
        ...     print("rejected")
        rejected
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the bundled ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One load per (profile, start_dir) for the lifetime of the CLI process.
@lru_cache(maxsize=4)
def _read_settings(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load confviz settings with the bundled defaults as the lowest layer.

    Precedence: defaults -> app -> host -> user -> dotenv -> env.

    Args:
        profile: Optional profile name; inserts ``profile/<name>/`` into every
            configuration path.
        start_dir: Directory that seeds ``.env`` discovery; defaults to the
            current working directory.

    Returns:
        Immutable configuration with provenance metadata.

    Raises:
        ValueError: If *profile* is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("confviz.style")
        'unicode'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_settings(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached settings so the next ``get_config()`` reads from disk again."""
    _read_settings.cache_clear()


# lru_cache's cache_clear is invisible to type checkers once cast to the Protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
