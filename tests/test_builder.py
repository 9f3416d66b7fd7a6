"""Merging providers into a configuration root."""

from __future__ import annotations

from pathlib import Path

import pytest

from confviz.adapters.sources import ConfigurationBuilder, MemoryProvider, load_configuration, merge_providers
from confviz.domain.errors import SourceFormatError, SourceNotFoundError
from confviz.domain.model import FileBacked, Named

# ======================== merge ========================


@pytest.mark.os_agnostic
def test_higher_precedence_value_wins() -> None:
    root = ConfigurationBuilder().add_mapping({"Mode": "safe"}).add_mapping({"Mode": "fast"}).build()

    assert root.get("Mode") == "fast"


@pytest.mark.os_agnostic
def test_sections_merge_across_providers() -> None:
    root = ConfigurationBuilder().add_mapping({"App": {"A": "1"}}).add_mapping({"app": {"B": "2"}}).build()

    [app] = root.children
    assert app.key == "App"
    assert [(child.key, child.value) for child in app.children] == [("A", "1"), ("B", "2")]


@pytest.mark.os_agnostic
def test_merge_keeps_first_seen_order() -> None:
    low, high = MemoryProvider({"B": "1", "A": "2"}), MemoryProvider({"C": "3", "A": "4"})
    low.load()
    high.load()

    assert [node.key for node in merge_providers([low, high])] == ["B", "A", "C"]


@pytest.mark.os_agnostic
def test_section_keeps_value_and_children_from_different_providers() -> None:
    root = ConfigurationBuilder().add_mapping({"Feature": "on"}).add_mapping({"Feature": {"Level": "3"}}).build()

    [feature] = root.children
    assert feature.value == "on"
    assert [child.key for child in feature.children] == ["Level"]


@pytest.mark.os_agnostic
def test_root_exposes_providers_lowest_precedence_first() -> None:
    root = ConfigurationBuilder().add_mapping({}, name="defaults").add_command_line(("A=1",)).build()

    assert [provider.kind for provider in root.providers] == [Named("defaults"), Named("CommandLineProvider")]


@pytest.mark.os_agnostic
def test_builder_collects_providers_before_build() -> None:
    builder = ConfigurationBuilder().add_mapping({"A": "1"}).add_environment("NOPE_")

    assert len(builder.providers) == 2


# ======================== lookup ========================


@pytest.mark.os_agnostic
def test_get_is_case_insensitive_and_returns_none_when_missing() -> None:
    root = ConfigurationBuilder().add_mapping({"Database": {"Host": "db"}}).build()

    assert root.get("database:HOST") == "db"
    assert root.get("Database:Port") is None
    assert root.get("Other:Deep:Path") is None


@pytest.mark.os_agnostic
def test_get_section_returns_subtree_or_empty_view() -> None:
    root = ConfigurationBuilder().add_mapping({"Database": {"Host": "db"}}).build()

    assert [child.key for child in root.get_section("Database").children] == ["Host"]
    assert root.get_section("Missing").children == ()
    assert root.get_section("Database").path == "Database"


# ======================== loading from sources ========================


@pytest.mark.os_agnostic
def test_load_configuration_orders_files_env_and_definitions(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    base = tmp_path / "base.json"
    base.write_text('{"Mode": "file", "Port": "1"}', encoding="utf-8")
    monkeypatch.setenv("CONFVIZLOAD_Mode", "env")
    monkeypatch.setenv("CONFVIZLOAD_Port", "2")

    root = load_configuration(files=[str(base)], env_prefix="CONFVIZLOAD_", definitions=("Mode=cli",))

    assert root.get("Mode") == "cli"
    assert root.get("Port") == "2"
    assert [provider.kind for provider in root.providers] == [
        FileBacked(str(base)),
        Named("EnvironmentProvider"),
        Named("CommandLineProvider"),
    ]


@pytest.mark.os_agnostic
def test_load_configuration_appends_optional_files_after_required(tmp_path: Path) -> None:
    base = tmp_path / "base.toml"
    base.write_text('Mode = "base"\n', encoding="utf-8")
    local = tmp_path / "local.toml"

    root = load_configuration(files=[str(base)], optional_files=[str(local)])

    assert root.get("Mode") == "base"
    assert [provider.kind for provider in root.providers] == [FileBacked(str(base)), FileBacked(str(local))]


@pytest.mark.os_agnostic
def test_load_configuration_without_sources_is_empty() -> None:
    root = load_configuration()

    assert root.children == ()
    assert root.providers == ()


@pytest.mark.os_agnostic
def test_load_configuration_reports_missing_file(tmp_path: Path) -> None:
    with pytest.raises(SourceNotFoundError):
        load_configuration(files=[str(tmp_path / "absent.json")])


@pytest.mark.os_agnostic
def test_load_configuration_rejects_unknown_format() -> None:
    with pytest.raises(SourceFormatError):
        load_configuration(files=["settings.ini"])
