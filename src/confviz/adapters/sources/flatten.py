"""Flatten nested mappings into colon-delimited configuration paths."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from confviz.domain.model import KEY_DELIMITER, build_path

#: Hierarchy separator accepted in environment variables and dotenv keys.
ENV_DELIMITER = "__"


def stringify(value: Any) -> str:
    """Render a scalar the way it appears in a configuration report.

    Examples:
        >>> stringify(True), stringify(False)
        ('true', 'false')
        >>> stringify(None)
        ''
        >>> stringify(8080)
        '8080'
        >>> stringify(2.5)
        '2.5'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_mapping(data: Mapping[str, Any]) -> dict[str, str]:
    """Flatten *data* into ``{"Section:Key": "value"}`` pairs.

    Nested mappings become sections, list items become children keyed by
    their index, and empty containers keep their path with an empty value.

    Examples:
        >>> flatten_mapping({"Logging": {"LogLevel": {"Default": "Information"}}})
        {'Logging:LogLevel:Default': 'Information'}
        >>> flatten_mapping({"hosts": ["a", "b"], "empty": {}})
        {'hosts:0': 'a', 'hosts:1': 'b', 'empty': ''}
    """
    flat: dict[str, str] = {}
    for key, value in data.items():
        _flatten_value(flat, build_path(None, str(key)), value)
    return flat


def _flatten_value(flat: dict[str, str], path: str, value: Any) -> None:
    if isinstance(value, Mapping):
        if not value:
            flat[path] = ""
        for key, child in value.items():
            _flatten_value(flat, build_path(path, str(key)), child)
    elif isinstance(value, (list, tuple)):
        if not value:
            flat[path] = ""
        for index, child in enumerate(value):
            _flatten_value(flat, build_path(path, str(index)), child)
    else:
        flat[path] = stringify(value)


def normalize_env_key(key: str) -> str:
    """Translate ``__`` hierarchy separators into the key delimiter.

    Example:
        >>> normalize_env_key("Logging__LogLevel__Default")
        'Logging:LogLevel:Default'
    """
    return key.replace(ENV_DELIMITER, KEY_DELIMITER)


__all__ = [
    "ENV_DELIMITER",
    "flatten_mapping",
    "normalize_env_key",
    "stringify",
]
