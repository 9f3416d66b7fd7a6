"""Configuration adapter - confviz settings, the layered-config bridge, and report display.

Provides adapters around lib_layered_config for confviz's own settings.

Contents:
    * :mod:`.loader` - Settings loading with caching
    * :mod:`.settings` - Typed ``[confviz]`` section
    * :mod:`.layered` - lib_layered_config ``Config`` to configuration root bridge
    * :mod:`.display` - Report output through Rich
"""

from __future__ import annotations

from .display import display_report
from .layered import root_from_layered_config
from .loader import get_config, get_default_config_path
from .settings import VisualizerSettings, load_visualizer_settings

__all__ = [
    "VisualizerSettings",
    "display_report",
    "get_config",
    "get_default_config_path",
    "load_visualizer_settings",
    "root_from_layered_config",
]
