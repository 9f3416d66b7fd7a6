"""Domain layer - pure report building with no I/O or framework dependencies.

Contains the configuration tree value objects, the provider history
collector, the tree renderer and the symbol presets.

Contents:
    * :mod:`.model` - Configuration nodes, provider kinds and protocols
    * :mod:`.history` - Provider history collection
    * :mod:`.report` - Tree rendering and report scaffolding
    * :mod:`.symbols` - Glyph sets (Unicode and ASCII presets)
    * :mod:`.behaviors` - ``visualize`` / ``visualize_simple`` entry functions
    * :mod:`.enums` - Domain enumerations (SymbolStyle, SourceFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_VENDOR_PREFIXES,
    generate_visualization,
    visualize,
    visualize_simple,
)
from .enums import SourceFormat, SymbolStyle
from .errors import ConfigurationError, SourceFormatError, SourceNotFoundError
from .history import collect_provider_information
from .model import (
    ConfigurationNode,
    ConfigurationProvider,
    ConfigurationRoot,
    ConfigurationSection,
    ConfigurationView,
    FileBacked,
    Named,
    ProviderKind,
)
from .symbols import ASCII_SYMBOLS, UNICODE_SYMBOLS, VisualizationSymbols, symbols_for

__all__ = [
    # Behaviors
    "DEFAULT_VENDOR_PREFIXES",
    "collect_provider_information",
    "generate_visualization",
    "visualize",
    "visualize_simple",
    # Model
    "ConfigurationNode",
    "ConfigurationProvider",
    "ConfigurationRoot",
    "ConfigurationSection",
    "ConfigurationView",
    "FileBacked",
    "Named",
    "ProviderKind",
    # Symbols
    "ASCII_SYMBOLS",
    "UNICODE_SYMBOLS",
    "VisualizationSymbols",
    "symbols_for",
    # Enums
    "SourceFormat",
    "SymbolStyle",
    # Errors
    "ConfigurationError",
    "SourceFormatError",
    "SourceNotFoundError",
]
