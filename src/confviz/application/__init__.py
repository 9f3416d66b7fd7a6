"""Application layer - port definitions.

Contains the port protocols that define the interfaces adapter
implementations must satisfy.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DescribeSettings,
    DisplayReport,
    EnableUnicodeConsole,
    GetConfig,
    InitLogging,
    LoadConfiguration,
)

__all__ = [
    "DescribeSettings",
    "DisplayReport",
    "EnableUnicodeConsole",
    "GetConfig",
    "InitLogging",
    "LoadConfiguration",
]
