"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..adapters.config.display import display_report

# Configuration services
from ..adapters.config.layered import root_from_layered_config
from ..adapters.config.loader import get_config
from ..adapters.console import enable_unicode_console

# Logging services
from ..adapters.logging.setup import init_logging

# Source services
from ..adapters.sources.loader import load_configuration

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory.sources import ReportSpy, SourceStub
    from ..application.ports import (
        DescribeSettings,
        DisplayReport,
        EnableUnicodeConsole,
        GetConfig,
        InitLogging,
        LoadConfiguration,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_load_configuration: LoadConfiguration = load_configuration
    _assert_describe_settings: DescribeSettings = root_from_layered_config
    _assert_display_report: DisplayReport = display_report
    _assert_enable_unicode_console: EnableUnicodeConsole = enable_unicode_console


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    load_configuration: LoadConfiguration
    describe_settings: DescribeSettings
    display_report: DisplayReport
    enable_unicode_console: EnableUnicodeConsole


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        load_configuration=load_configuration,
        describe_settings=root_from_layered_config,
        display_report=display_report,
        enable_unicode_console=enable_unicode_console,
    )


def build_testing(*, spy: ReportSpy | None = None, sources: SourceStub | None = None) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional ReportSpy capturing displayed reports. When None, a
            fresh ReportSpy is created. Pass your own spy to assert on the
            rendered output in tests.
        sources: Optional SourceStub serving in-memory files. When None, an
            empty stub is used, so only definitions produce values.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        ReportSpy,
        SourceStub,
        get_config_in_memory,
        init_logging_in_memory,
    )

    report_spy = spy if spy is not None else ReportSpy()
    source_stub = sources if sources is not None else SourceStub()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=init_logging_in_memory,
        load_configuration=source_stub.load_configuration,
        describe_settings=root_from_layered_config,
        display_report=report_spy.display_report,
        enable_unicode_console=report_spy.enable_unicode_console,
    )


__all__ = [
    # Configuration
    "get_config",
    "root_from_layered_config",
    # Sources
    "load_configuration",
    # Output
    "display_report",
    "enable_unicode_console",
    # Logging
    "init_logging",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
