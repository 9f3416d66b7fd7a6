"""Configuration tree value objects, provider kinds and view protocols."""

from __future__ import annotations

import dataclasses

import pytest

from confviz.adapters.sources import ConfigurationBuilder
from confviz.domain.model import (
    ConfigurationNode,
    ConfigurationRoot,
    ConfigurationSection,
    ConfigurationView,
    FileBacked,
    Named,
    build_path,
    display_name,
)


@pytest.mark.os_agnostic
def test_node_without_children_and_with_value_is_a_leaf_with_value() -> None:
    node = ConfigurationNode("Port", "8080")

    assert node.is_leaf
    assert node.is_leaf_with_value


@pytest.mark.os_agnostic
def test_node_with_empty_value_is_not_a_leaf_with_value() -> None:
    assert not ConfigurationNode("Port", "").is_leaf_with_value
    assert not ConfigurationNode("Port").is_leaf_with_value


@pytest.mark.os_agnostic
def test_node_with_value_and_children_is_not_a_leaf_with_value() -> None:
    """A section carrying both a value and children never counts as a valued leaf."""
    node = ConfigurationNode("Feature", "on", (ConfigurationNode("Level", "3"),))

    assert not node.is_leaf
    assert not node.is_leaf_with_value


@pytest.mark.os_agnostic
def test_child_lookup_ignores_case() -> None:
    node = ConfigurationNode("Logging", None, (ConfigurationNode("LogLevel"),))

    assert node.child("loglevel") is node.children[0]
    assert node.child("Missing") is None


@pytest.mark.os_agnostic
def test_nodes_are_immutable() -> None:
    node = ConfigurationNode("Mode", "fast")

    with pytest.raises(dataclasses.FrozenInstanceError):
        node.value = "slow"  # type: ignore[misc]


@pytest.mark.os_agnostic
def test_display_name_distinguishes_file_backed_and_named_kinds() -> None:
    assert display_name(FileBacked("config/appsettings.json")) == "config/appsettings.json"
    assert display_name(Named("EnvironmentProvider")) == "EnvironmentProvider"
    assert display_name(None) is None


@pytest.mark.os_agnostic
def test_build_path_joins_with_colons() -> None:
    assert build_path(None, "A") == "A"
    assert build_path("", "A") == "A"
    assert build_path("A:B", "C") == "A:B:C"


@pytest.mark.os_agnostic
def test_section_is_a_view_but_not_a_root() -> None:
    section = ConfigurationSection("App")

    assert isinstance(section, ConfigurationView)
    assert not isinstance(section, ConfigurationRoot)


@pytest.mark.os_agnostic
def test_merged_configuration_is_a_root() -> None:
    root = ConfigurationBuilder().add_mapping({"A": "1"}).build()

    assert isinstance(root, ConfigurationRoot)
