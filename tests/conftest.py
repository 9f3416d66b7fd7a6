"""Shared pytest fixtures for domain, adapter and CLI tests.

Centralizes test infrastructure following clean architecture principles:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config
from lib_layered_config.domain.config import SourceInfo

from confviz.adapters.sources import ConfigurationBuilder, MergedConfiguration

if TYPE_CHECKING:
    from confviz.adapters.memory.sources import ReportSpy, SourceStub
    from confviz.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _remove_ansi_codes(text: str) -> str:
    """Return *text* stripped of ANSI escape sequences."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a configuration snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use result.stdout for report output; log lines go to stderr.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for tests.

    Example:
        def test_info(cli_runner: CliRunner, production_factory: Callable[[], AppServices]) -> None:
            result = cli_runner.invoke(cli, ["info"], obj=production_factory)
            assert result.exit_code == 0
    """
    from confviz.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return _remove_ansi_codes(value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore after the test.

    Use this whenever a test reads or mutates the global
    ``lib_cli_exit_tools.config`` traceback flags.
    """
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config cache before each test.

    Note: Only clears before, not after, to avoid errors when the function
    has been monkeypatched during the test (losing cache_clear method).
    """
    from confviz.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts.

    The second argument (empty dict) represents no source provenance info.

    Example:
        def test_style(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"confviz": {"style": "ascii"}})
            assert config.get("confviz.style") == "ascii"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def source_info_factory() -> Callable[[str, str, str | None], SourceInfo]:
    """Create SourceInfo dicts for provenance-tracking tests.

    Example:
        def test_provenance(source_info_factory: Callable[..., SourceInfo]) -> None:
            info = source_info_factory("confviz.style", "user", "/home/user/.config/confviz/config.toml")
            assert info["layer"] == "user"
    """

    def _factory(key: str, layer: str, path: str | None = None) -> SourceInfo:
        return {"layer": layer, "path": path, "key": key}

    return _factory


@pytest.fixture
def layered_root() -> Callable[..., MergedConfiguration]:
    """Build a root from ``(name, mapping)`` pairs, lowest precedence first.

    Example:
        def test_override(layered_root: Callable[..., MergedConfiguration]) -> None:
            root = layered_root(("base.json", {"Mode": "a"}), ("local.json", {"Mode": "b"}))
            assert root.get("Mode") == "b"
    """

    def _build(*layers: tuple[str, Mapping[str, Any]]) -> MergedConfiguration:
        builder = ConfigurationBuilder()
        for name, data in layers:
            builder.add_mapping(data, name=name)
        return builder.build()

    return _build


@pytest.fixture
def development_override_root(layered_root: Callable[..., MergedConfiguration]) -> MergedConfiguration:
    """Two sources where the development file overrides the log level.

    ``appsettings.json`` sets ``Logging:LogLevel:Default = Information`` and
    ``appsettings.Development.json`` overrides it to ``Debug``.
    """
    return layered_root(
        ("appsettings.json", {"Logging": {"LogLevel": {"Default": "Information"}}, "App": {"Name": "shop"}}),
        ("appsettings.Development.json", {"Logging": {"LogLevel": {"Default": "Debug"}}}),
    )


@dataclass
class ReportCliContext:
    """Container for report CLI test setup.

    Attributes:
        factory: Callable that returns wired AppServices for CLI invocation.
        spy: ReportSpy holding every printed report.
        sources: SourceStub serving in-memory files and environment.
    """

    factory: Callable[[], Any]
    spy: ReportSpy
    sources: SourceStub


@pytest.fixture
def report_cli_context(
    clear_config_cache: None,
) -> Callable[..., ReportCliContext]:
    """Create a CLI test context with in-memory sources and a report spy.

    Logging is the real lib_log_rich runtime; settings come from *settings*
    (the ``[confviz]`` section) instead of disk.

    Example:
        def test_visualize(cli_runner: CliRunner, report_cli_context: Callable[..., ReportCliContext]) -> None:
            ctx = report_cli_context({"base.toml": {"App": {"Mode": "safe"}}})
            result = cli_runner.invoke(cli, ["visualize", "base.toml"], obj=ctx.factory)
            assert "Mode = safe" in ctx.spy.last
    """
    from confviz.adapters.memory import ReportSpy, SourceStub
    from confviz.composition import AppServices, build_production

    def _create(
        files: Mapping[str, Mapping[str, Any]] | None = None,
        *,
        environ: Mapping[str, str] | None = None,
        settings: Mapping[str, Any] | None = None,
    ) -> ReportCliContext:
        spy = ReportSpy()
        sources = SourceStub(files=dict(files or {}), environ=dict(environ or {}))
        config = Config({"confviz": dict(settings)} if settings else {}, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        services = AppServices(
            get_config=_fake_get_config,
            init_logging=prod.init_logging,
            load_configuration=sources.load_configuration,
            describe_settings=prod.describe_settings,
            display_report=spy.display_report,
            enable_unicode_console=spy.enable_unicode_console,
        )
        return ReportCliContext(factory=lambda: services, spy=spy, sources=sources)

    return _create
