"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.sources` - Configuration providers and the root builder
    * :mod:`.config` - confviz's own settings, layered-config bridge, report display
    * :mod:`.console` - UTF-8 console setup for Unicode reports
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory adapters for tests
    * :mod:`.cli` - Click CLI framework integration
"""

from __future__ import annotations

__all__: list[str] = []
