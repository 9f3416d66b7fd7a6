"""Typed view of the ``[confviz]`` settings section."""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict, Field, field_validator

from confviz.domain.enums import SymbolStyle


class VisualizerSettings(BaseModel):
    """Pydantic model for [confviz] config section validation.

    Used at the boundary to turn the raw settings mapping into typed fields.
    Unknown keys are rejected so typos in configuration files surface early.

    Example:
        >>> settings = VisualizerSettings.model_validate({"style": "ASCII", "exclude_prefixes": ["Secrets"]})
        >>> settings.style
        <SymbolStyle.ASCII: 'ascii'>
        >>> settings.custom_prefixes
        ('Secrets',)

        >>> VisualizerSettings().custom_prefixes is None
        True
    """

    style: SymbolStyle = SymbolStyle.UNICODE
    exclude_vendor_sections: bool = True
    exclude_prefixes: list[str] = Field(default_factory=list)
    env_prefix: str | None = None

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("style", mode="before")
    @classmethod
    def _lowercase_style(cls, value: object) -> object:
        return value.lower() if isinstance(value, str) else value

    @property
    def custom_prefixes(self) -> tuple[str, ...] | None:
        """Configured prefixes, or ``None`` to fall back to the vendor defaults."""
        return tuple(self.exclude_prefixes) if self.exclude_prefixes else None


def load_visualizer_settings(config: Config) -> VisualizerSettings:
    """Parse the ``[confviz]`` section of *config*.

    Raises:
        pydantic.ValidationError: If the section holds unknown keys or bad values.

    Example:
        >>> load_visualizer_settings(Config({"confviz": {"style": "ascii"}}, {})).style.value
        'ascii'
        >>> load_visualizer_settings(Config({}, {})).exclude_vendor_sections
        True
    """
    raw: object = config.get("confviz", default={})
    return VisualizerSettings.model_validate(dict(cast("Mapping[str, object]", raw)) if raw else {})


__all__ = [
    "VisualizerSettings",
    "load_visualizer_settings",
]
