"""Pure domain functions turning a configuration into a text report."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .history import ProviderNames, ValueHistory, collect_provider_information
from .model import ConfigurationRoot, ConfigurationView
from .report import build_report
from .symbols import ASCII_SYMBOLS, UNICODE_SYMBOLS, VisualizationSymbols

logger = logging.getLogger(__name__)

#: Framework sections that are usually noise; matched case-insensitively as path prefixes.
DEFAULT_VENDOR_PREFIXES: frozenset[str] = frozenset(
    {
        "Microsoft",
        "System",
        "Windows",
        "Logging",
        "AllowedHosts",
        "Authentication",
        "DataProtection",
        "Routes",
    }
)


def generate_visualization(
    configuration: ConfigurationView,
    exclude_vendor_sections: bool,
    symbols: VisualizationSymbols,
    exclude_prefixes: Iterable[str] | None = None,
) -> str:
    r"""Build the report for *configuration* with the given glyphs.

    Provider information is only available when *configuration* is a
    :class:`~confviz.domain.model.ConfigurationRoot`; any other view renders
    without provenance.

    Args:
        configuration: Root or section to visualize.
        exclude_vendor_sections: Whether sections matching a prefix are pruned.
        symbols: Glyph set to draw with.
        exclude_prefixes: Prefixes replacing :data:`DEFAULT_VENDOR_PREFIXES`; a single
            string counts as one prefix.

    Returns:
        The report text.

    Example:
        >>> from confviz.domain.model import ConfigurationNode, ConfigurationSection
        >>> section = ConfigurationSection("", (ConfigurationNode("Mode", "fast"),))
        >>> "+ Mode = fast\n" in generate_visualization(section, True, ASCII_SYMBOLS)
        True
    """
    prefixes = _casefolded_prefixes(exclude_prefixes) if exclude_prefixes is not None else DEFAULT_VENDOR_PREFIXES
    providers, history = _provider_information(configuration)
    logger.debug(
        "Generating configuration visualization",
        extra={"providers": len(providers), "paths": len(history), "exclude": exclude_vendor_sections},
    )
    return build_report(
        list(configuration.children),
        providers,
        history,
        symbols,
        vendor_prefixes=prefixes,
        exclude_vendor_sections=exclude_vendor_sections,
    )


def visualize(
    configuration: ConfigurationView,
    exclude_vendor_sections: bool = True,
    *,
    exclude_prefixes: Iterable[str] | None = None,
) -> str:
    """Return a Unicode report of *configuration*.

    The glyphs need a UTF-8 console; call
    :func:`confviz.adapters.console.enable_unicode_console` before printing,
    or use :func:`visualize_simple`.

    Args:
        configuration: Root or section to visualize.
        exclude_vendor_sections: Hide framework sections of little interest
            (:data:`DEFAULT_VENDOR_PREFIXES`), or show everything.
        exclude_prefixes: Hide sections whose path starts with any of these
            (case-insensitive) instead of the defaults. Supplying prefixes
            always enables exclusion.

    Example:
        >>> from confviz.domain.model import ConfigurationNode, ConfigurationSection
        >>> section = ConfigurationSection("", (ConfigurationNode("Logging", "on"), ConfigurationNode("Mode", "x")))
        >>> report = visualize(section)
        >>> "Logging" in report, "Mode" in report
        (False, True)
        >>> "Logging" in visualize(section, exclude_prefixes=["Mode"])
        True
    """
    return generate_visualization(
        configuration, _exclusion_enabled(exclude_vendor_sections, exclude_prefixes), UNICODE_SYMBOLS, exclude_prefixes
    )


def visualize_simple(
    configuration: ConfigurationView,
    exclude_vendor_sections: bool = True,
    *,
    exclude_prefixes: Iterable[str] | None = None,
) -> str:
    """Return an ASCII report of *configuration*; see :func:`visualize` for arguments.

    Example:
        >>> from confviz.domain.model import ConfigurationSection
        >>> visualize_simple(ConfigurationSection("")).splitlines()[0]
        'Configuration Structure:'
    """
    return generate_visualization(
        configuration, _exclusion_enabled(exclude_vendor_sections, exclude_prefixes), ASCII_SYMBOLS, exclude_prefixes
    )


def _exclusion_enabled(exclude_vendor_sections: bool, exclude_prefixes: Iterable[str] | None) -> bool:
    return True if exclude_prefixes is not None else exclude_vendor_sections


def _casefolded_prefixes(prefixes: Iterable[str]) -> frozenset[str]:
    if isinstance(prefixes, str):
        prefixes = (prefixes,)
    return frozenset(prefix.casefold() for prefix in prefixes)


def _provider_information(configuration: ConfigurationView) -> tuple[ProviderNames, ValueHistory]:
    if isinstance(configuration, ConfigurationRoot):
        return collect_provider_information(configuration)
    return {}, {}


__all__ = [
    "DEFAULT_VENDOR_PREFIXES",
    "generate_visualization",
    "visualize",
    "visualize_simple",
]
