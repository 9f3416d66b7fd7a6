"""Logging adapter - lib_log_rich runtime setup.

Contents:
    * :func:`.setup.init_logging` - Idempotent runtime initialization
    * :func:`.setup.build_runtime_config` - ``[lib_log_rich]`` section to RuntimeConfig
"""

from __future__ import annotations

from .setup import LoggingConfigModel, build_runtime_config, init_logging

__all__ = ["LoggingConfigModel", "build_runtime_config", "init_logging"]
