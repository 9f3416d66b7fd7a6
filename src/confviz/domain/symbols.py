"""Glyph sets used when rendering a configuration report."""

from __future__ import annotations

from dataclasses import dataclass

from .enums import SymbolStyle


@dataclass(frozen=True, slots=True)
class VisualizationSymbols:
    """The five glyphs a report is drawn with.

    Any instance works with the renderer; :data:`UNICODE_SYMBOLS` and
    :data:`ASCII_SYMBOLS` are the shipped presets.

    Attributes:
        section: Marks a configuration section.
        provider: Marks a configuration source.
        active: Marks the value in effect.
        overridden: Marks a value superseded by a higher-precedence source.
        history_arrow: Introduces the value history block.

    Example:
        >>> custom = VisualizationSymbols(section="#", provider="@", active="!", overridden="~", history_arrow=">")
        >>> custom.section
        '#'
    """

    section: str
    provider: str
    active: str
    overridden: str
    history_arrow: str


#: Graphical glyphs; terminals without emoji support should use :data:`ASCII_SYMBOLS`.
UNICODE_SYMBOLS = VisualizationSymbols(
    section="\N{OPEN FILE FOLDER}",
    provider="\N{PAGE FACING UP}",
    active="\N{CHECK MARK}",
    overridden="\N{RIGHTWARDS ARROW WITH HOOK}",
    history_arrow="\N{DOWNWARDS ARROW WITH TIP RIGHTWARDS}",
)

#: Plain ASCII glyphs that render on any terminal.
ASCII_SYMBOLS = VisualizationSymbols(
    section="+",
    provider="*",
    active=">",
    overridden="-",
    history_arrow="\\",
)


def symbols_for(style: SymbolStyle) -> VisualizationSymbols:
    """Return the preset matching *style*.

    Example:
        >>> symbols_for(SymbolStyle.ASCII).section
        '+'
        >>> symbols_for(SymbolStyle.UNICODE) is UNICODE_SYMBOLS
        True
    """
    return UNICODE_SYMBOLS if style is SymbolStyle.UNICODE else ASCII_SYMBOLS


__all__ = [
    "ASCII_SYMBOLS",
    "UNICODE_SYMBOLS",
    "VisualizationSymbols",
    "symbols_for",
]
