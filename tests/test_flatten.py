"""Flattening nested documents into colon paths."""

from __future__ import annotations

import pytest

from confviz.adapters.sources.flatten import flatten_mapping, normalize_env_key, stringify


@pytest.mark.os_agnostic
def test_nested_mappings_become_colon_paths() -> None:
    data = {"Database": {"Primary": {"Host": "db", "Port": 5432}}}

    assert flatten_mapping(data) == {"Database:Primary:Host": "db", "Database:Primary:Port": "5432"}


@pytest.mark.os_agnostic
def test_lists_are_keyed_by_index() -> None:
    assert flatten_mapping({"Hosts": ["a", {"Name": "b"}]}) == {"Hosts:0": "a", "Hosts:1:Name": "b"}


@pytest.mark.os_agnostic
def test_empty_containers_keep_their_path() -> None:
    assert flatten_mapping({"Empty": {}, "None": []}) == {"Empty": "", "None": ""}


@pytest.mark.os_agnostic
def test_scalars_render_like_configuration_text() -> None:
    assert flatten_mapping({"On": True, "Off": False, "Ratio": 0.5, "Missing": None}) == {
        "On": "true",
        "Off": "false",
        "Ratio": "0.5",
        "Missing": "",
    }


@pytest.mark.os_agnostic
def test_order_follows_the_document() -> None:
    assert list(flatten_mapping({"B": "1", "A": {"Z": "2", "Y": "3"}})) == ["B", "A:Z", "A:Y"]


@pytest.mark.os_agnostic
def test_stringify_keeps_strings_verbatim() -> None:
    assert stringify("  spaced  ") == "  spaced  "


@pytest.mark.os_agnostic
def test_normalize_env_key_translates_double_underscores_only() -> None:
    assert normalize_env_key("App__Feature_Flag__On") == "App:Feature_Flag:On"
