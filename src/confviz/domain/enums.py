"""Type-safe domain enums for report styles and source formats."""

from __future__ import annotations

from enum import Enum


class SymbolStyle(str, Enum):
    """Glyph preset used to draw a report.

    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        UNICODE: Emoji and arrow glyphs; needs a UTF-8 capable console.
        ASCII: Plain characters that render anywhere.

    Example:
        >>> SymbolStyle.UNICODE.value
        'unicode'
        >>> SymbolStyle.ASCII == "ascii"
        True
    """

    UNICODE = "unicode"
    ASCII = "ascii"


class SourceFormat(str, Enum):
    """File formats a configuration source can be read from.

    Attributes:
        TOML: TOML document, nested tables become sections.
        JSON: JSON document, nested objects become sections.
        DOTENV: ``KEY=VALUE`` lines, ``__`` separates sections.

    Example:
        >>> SourceFormat("json") is SourceFormat.JSON
        True
    """

    TOML = "toml"
    JSON = "json"
    DOTENV = "dotenv"


__all__ = [
    "SourceFormat",
    "SymbolStyle",
]
