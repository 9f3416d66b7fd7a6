"""Parse ``SECTION:KEY=VALUE`` command-line definitions."""

from __future__ import annotations

from dataclasses import dataclass

from confviz.domain.model import KEY_DELIMITER

from .flatten import normalize_env_key


@dataclass(frozen=True, slots=True)
class Definition:
    """A single parsed command-line definition."""

    path: str
    value: str


def parse_definition(raw: str) -> Definition:
    """Split a ``SECTION:KEY[:SUBKEY...]=VALUE`` string into a Definition.

    The first ``=`` separates the path from the value, so values may contain
    ``=``. ``__`` is accepted as a section separator, as in environment
    variables. Values are kept verbatim; configuration values are strings.

    Args:
        raw: Raw definition string (e.g., ``Logging:LogLevel:Default=Debug``).

    Returns:
        Parsed Definition with normalized path and raw value.

    Raises:
        ValueError: If the string lacks ``=`` or a path component is empty.

    Examples:
        >>> parse_definition("Logging:LogLevel:Default=Debug")
        Definition(path='Logging:LogLevel:Default', value='Debug')
        >>> parse_definition("ConnectionStrings__Main=Server=db;Port=5432").path
        'ConnectionStrings:Main'
        >>> parse_definition("Feature=").value
        ''
    """
    if "=" not in raw:
        raise ValueError(f"Invalid definition {raw!r}: must contain '='")

    path_part, value = raw.split("=", maxsplit=1)
    path = normalize_env_key(path_part.strip())

    if not path:
        raise ValueError(f"Invalid definition {raw!r}: key is empty")
    if not all(path.split(KEY_DELIMITER)):
        raise ValueError(f"Invalid definition {raw!r}: key path contains empty component")

    return Definition(path=path, value=value)


def parse_definitions(raw_definitions: tuple[str, ...]) -> dict[str, str]:
    """Parse every definition; later definitions of the same path win.

    Example:
        >>> parse_definitions(("A:B=1", "A:B=2", "C=3"))
        {'A:B': '2', 'C': '3'}
    """
    parsed: dict[str, str] = {}
    for raw in raw_definitions:
        definition = parse_definition(raw)
        parsed[definition.path] = definition.value
    return parsed


__all__ = [
    "Definition",
    "parse_definition",
    "parse_definitions",
]
