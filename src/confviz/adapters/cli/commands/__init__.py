"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Visualize command from :mod:`.visualize_cmd`
    * Settings command from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .visualize_cmd import cli_visualize

__all__ = [
    "cli_config",
    "cli_info",
    "cli_visualize",
]
