"""Domain enums: values and string behaviour."""

from __future__ import annotations

import pytest

from confviz.domain.enums import SourceFormat, SymbolStyle


@pytest.mark.os_agnostic
def test_symbol_style_values() -> None:
    assert [style.value for style in SymbolStyle] == ["unicode", "ascii"]


@pytest.mark.os_agnostic
def test_symbol_style_compares_equal_to_its_string() -> None:
    assert SymbolStyle.ASCII == "ascii"
    assert SymbolStyle("unicode") is SymbolStyle.UNICODE


@pytest.mark.os_agnostic
def test_source_format_values() -> None:
    assert {fmt.value for fmt in SourceFormat} == {"toml", "json", "dotenv"}


@pytest.mark.os_agnostic
def test_unknown_symbol_style_is_rejected() -> None:
    with pytest.raises(ValueError):
        SymbolStyle("emoji")
