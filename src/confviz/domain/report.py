"""Render a configuration tree with provider history into a text report.

The report has four parts, in this order: title, provider list, section
tree, legend. Everything here is pure string assembly over an immutable
snapshot; nothing is printed.

Contents:
    * :func:`build_report` - assemble the full report.
    * :func:`render_tree` - render the section tree only.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from .history import ProviderNames, ValueHistory
from .model import ConfigurationNode, build_path
from .symbols import VisualizationSymbols

TITLE = "Configuration Structure:"
PROVIDERS_HEADER = "Configuration Providers (in order of precedence):"
NO_PROVIDERS = "No provider information available"
LEGEND_HEADER = "Configuration Details:"
HISTORY_HEADER = "Value history (most recent first):"
INDENT_UNIT = "  "


def build_report(
    children: Sequence[ConfigurationNode],
    providers: ProviderNames,
    history: ValueHistory,
    symbols: VisualizationSymbols,
    *,
    vendor_prefixes: Collection[str],
    exclude_vendor_sections: bool,
) -> str:
    """Assemble title, provider list, section tree and legend.

    Args:
        children: Top-level sections of the configuration.
        providers: Provider key -> display name, highest precedence first.
        history: Path -> provider/value pairs, highest precedence first.
        symbols: Glyphs to draw with.
        vendor_prefixes: Path prefixes pruned when exclusion is enabled.
        exclude_vendor_sections: Whether to prune matching sections.

    Returns:
        The complete report.

    Example:
        >>> from confviz.domain.symbols import ASCII_SYMBOLS
        >>> report = build_report([], {}, {}, ASCII_SYMBOLS, vendor_prefixes=(), exclude_vendor_sections=True)
        >>> print(report)
        Configuration Structure:
        =======================
        <BLANKLINE>
        Configuration Providers (in order of precedence):
        ============================================
        No provider information available
        <BLANKLINE>
        <BLANKLINE>
        Configuration Details:
        ====================
        + = Section
        * = Configuration Source
        > = Active Value
        - = Overridden Value
        Indentation indicates nesting level
        <BLANKLINE>
    """
    head = "\n".join([TITLE, "=" * 23, *_provider_lines(providers, symbols)]) + "\n"
    body = render_tree(
        children,
        providers,
        history,
        symbols,
        vendor_prefixes=vendor_prefixes,
        exclude_vendor_sections=exclude_vendor_sections,
    )
    legend = "\n".join(_legend_lines(symbols)) + "\n"
    return head + body + legend


def render_tree(
    children: Sequence[ConfigurationNode],
    providers: ProviderNames,
    history: ValueHistory,
    symbols: VisualizationSymbols,
    *,
    vendor_prefixes: Collection[str],
    exclude_vendor_sections: bool,
) -> str:
    """Render every top-level section and its descendants, one line per section.

    Example:
        >>> from confviz.domain.symbols import ASCII_SYMBOLS
        >>> tree = [ConfigurationNode("App", None, (ConfigurationNode("Name", "demo"),))]
        >>> print(render_tree(tree, {}, {}, ASCII_SYMBOLS, vendor_prefixes=(), exclude_vendor_sections=False), end="")
        + App
          + Name = demo
    """
    folded_prefixes = tuple(prefix.casefold() for prefix in vendor_prefixes)
    out: list[str] = []
    for child in children:
        _traverse(child, 0, None, out, providers, history, folded_prefixes, exclude_vendor_sections, symbols)
    return "".join(out)


def _provider_lines(providers: ProviderNames, symbols: VisualizationSymbols) -> list[str]:
    lines = ["", PROVIDERS_HEADER, "=" * 44]
    if providers:
        lines.extend(f"{symbols.provider} {name}" for name in providers.values())
    else:
        lines.append(NO_PROVIDERS)
    lines.append("")
    return lines


def _legend_lines(symbols: VisualizationSymbols) -> list[str]:
    return [
        "",
        LEGEND_HEADER,
        "=" * 20,
        f"{symbols.section} = Section",
        f"{symbols.provider} = Configuration Source",
        f"{symbols.active} = Active Value",
        f"{symbols.overridden} = Overridden Value",
        "Indentation indicates nesting level",
    ]


def _should_skip(path: str, folded_prefixes: tuple[str, ...], exclude_vendor_sections: bool) -> bool:
    if not exclude_vendor_sections:
        return False
    folded = path.casefold()
    return any(folded.startswith(prefix) for prefix in folded_prefixes)


def _traverse(
    node: ConfigurationNode,
    depth: int,
    parent_path: str | None,
    out: list[str],
    providers: ProviderNames,
    history: ValueHistory,
    folded_prefixes: tuple[str, ...],
    exclude_vendor_sections: bool,
    symbols: VisualizationSymbols,
) -> None:
    current_path = build_path(parent_path, node.key)
    if _should_skip(current_path, folded_prefixes, exclude_vendor_sections):
        return

    indentation = INDENT_UNIT * depth
    out.append(f"{indentation}{symbols.section} {node.key}")
    if node.is_leaf_with_value:
        out.append(_value_text(indentation, node.value or "", history.get(current_path, []), providers, symbols))
    out.append("\n")

    for child in node.children:
        _traverse(
            child, depth + 1, current_path, out, providers, history, folded_prefixes, exclude_vendor_sections, symbols
        )


def _value_text(
    indentation: str,
    value: str,
    sources: list[tuple[str, str]],
    providers: ProviderNames,
    symbols: VisualizationSymbols,
) -> str:
    text = f" = {value}"
    if len(sources) == 1:
        provider_key, _ = sources[0]
        return f"{text} {symbols.provider} [{providers[provider_key]}]"
    if len(sources) > 1:
        return text + _history_text(indentation, sources, providers, value, symbols)
    return text


def _history_text(
    indentation: str,
    sources: list[tuple[str, str]],
    providers: ProviderNames,
    current_value: str,
    symbols: VisualizationSymbols,
) -> str:
    """Render the override chain; the first entry always shows the value in effect."""
    lines = [f"\n{indentation}{INDENT_UNIT}{symbols.history_arrow} {HISTORY_HEADER}"]
    for index, (provider_key, historical_value) in enumerate(sources):
        prefix = f"\n{indentation}{INDENT_UNIT * 2}{symbols.provider} "
        if index == 0:
            lines.append(f"{prefix}({symbols.active} active)  [{providers[provider_key]}] = {current_value}")
        else:
            lines.append(f"{prefix}({symbols.overridden} overridden)  [{providers[provider_key]}] = {historical_value}")
    return "".join(lines)


__all__ = [
    "HISTORY_HEADER",
    "NO_PROVIDERS",
    "build_report",
    "render_tree",
]
