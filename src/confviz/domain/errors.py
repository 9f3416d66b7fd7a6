"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """A configuration source could not be turned into values.

    Base class for all source loading failures. Typically caught at CLI
    boundaries to provide user-friendly error messages.

    Example:
        >>> from confviz.domain.errors import ConfigurationError
        >>> err = ConfigurationError("Unsupported source: settings.ini")
        >>> str(err)
        'Unsupported source: settings.ini'
    """


class SourceNotFoundError(ConfigurationError):
    """A required configuration file does not exist.

    Example:
        >>> err = SourceNotFoundError("appsettings.json")
        >>> isinstance(err, ConfigurationError)
        True
    """


class SourceFormatError(ConfigurationError):
    """A configuration file exists but cannot be parsed or has no known format.

    Example:
        >>> err = SourceFormatError("appsettings.json: expected an object at top level")
        >>> str(err)
        'appsettings.json: expected an object at top level'
    """


__all__ = [
    "ConfigurationError",
    "SourceFormatError",
    "SourceNotFoundError",
]
