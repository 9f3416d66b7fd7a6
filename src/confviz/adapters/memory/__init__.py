"""In-memory adapter implementations for testing.

Provides lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no terminal output, and a quiet logging runtime.

Contents:
    * :mod:`.config` - In-memory settings loader
    * :mod:`.logging` - In-memory logging adapter
    * :mod:`.sources` - In-memory configuration sources and ReportSpy
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import get_config_in_memory
from .logging import init_logging_in_memory
from .sources import InMemoryFileProvider, ReportSpy, SourceStub

# Static conformance assertions
if TYPE_CHECKING:
    from confviz.application.ports import (
        DisplayReport,
        EnableUnicodeConsole,
        GetConfig,
        InitLogging,
        LoadConfiguration,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_load_configuration: LoadConfiguration = SourceStub().load_configuration
    _assert_display_report: DisplayReport = ReportSpy().display_report
    _assert_enable_unicode_console: EnableUnicodeConsole = ReportSpy().enable_unicode_console

__all__ = [
    "InMemoryFileProvider",
    "ReportSpy",
    "SourceStub",
    "get_config_in_memory",
    "init_logging_in_memory",
]
