"""Visualize layered configuration as a tree with value provenance.

Public API:
    * :func:`visualize` / :func:`visualize_simple` - Unicode and ASCII reports.
    * :func:`generate_visualization` - Report with an explicit symbol set.
    * :class:`ConfigurationBuilder` - Assemble a root from mappings, files,
      the environment and ``SECTION:KEY=VALUE`` definitions.
    * :func:`enable_unicode_console` - Switch stdout/stderr to UTF-8 before
      printing a Unicode report.

Example:
    >>> root = (
    ...     ConfigurationBuilder()
    ...     .add_mapping({"Database": {"Host": "localhost"}}, name="defaults")
    ...     .add_command_line(("Database:Host=db.internal",))
    ...     .build()
    ... )
    >>> report = visualize_simple(root)
    >>> "+ Database" in report
    True
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports (configuration sources and console)
from .adapters.console import enable_unicode_console
from .adapters.sources import ConfigurationBuilder, MergedConfiguration

# Domain exports
from .domain.behaviors import (
    DEFAULT_VENDOR_PREFIXES,
    generate_visualization,
    visualize,
    visualize_simple,
)
from .domain.model import ConfigurationNode, ConfigurationSection, FileBacked, Named
from .domain.symbols import ASCII_SYMBOLS, UNICODE_SYMBOLS, VisualizationSymbols

__all__ = [
    "ASCII_SYMBOLS",
    "ConfigurationBuilder",
    "ConfigurationNode",
    "ConfigurationSection",
    "DEFAULT_VENDOR_PREFIXES",
    "FileBacked",
    "MergedConfiguration",
    "Named",
    "UNICODE_SYMBOLS",
    "VisualizationSymbols",
    "enable_unicode_console",
    "generate_visualization",
    "print_info",
    "visualize",
    "visualize_simple",
]
