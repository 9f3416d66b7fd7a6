"""Shared helpers for the report-printing commands.

Internal module (underscore prefix) holding the steps ``visualize`` and
``config`` have in common.

Contents:
    * :func:`resolve_style` - Combine ``--simple/--unicode`` with settings.
    * :func:`resolve_exclusion` - Combine ``--all``/``--exclude`` with settings.
    * :func:`render_report` - Pick ``visualize`` or ``visualize_simple``.
    * :func:`show_report` - Prepare the console and print.
    * :func:`exit_on_source_error` - Map source errors to exit codes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING

import rich_click as click

from confviz.adapters.config.settings import VisualizerSettings
from confviz.domain.behaviors import visualize, visualize_simple
from confviz.domain.enums import SymbolStyle
from confviz.domain.errors import ConfigurationError, SourceNotFoundError
from confviz.domain.model import ConfigurationView

from ..exit_codes import ExitCode

if TYPE_CHECKING:
    from confviz.composition import AppServices

logger = logging.getLogger(__name__)


def resolve_style(settings: VisualizerSettings, simple: bool | None) -> SymbolStyle:
    """Return the glyph style; an explicit flag wins over settings.

    Examples:
        >>> resolve_style(VisualizerSettings(), None).value
        'unicode'
        >>> resolve_style(VisualizerSettings(), True).value
        'ascii'
    """
    if simple is None:
        return settings.style
    return SymbolStyle.ASCII if simple else SymbolStyle.UNICODE


def resolve_exclusion(
    settings: VisualizerSettings,
    *,
    show_all: bool,
    excludes: Sequence[str] = (),
) -> tuple[bool, tuple[str, ...] | None]:
    """Return ``(exclude_vendor_sections, exclude_prefixes)`` for the renderer.

    ``--all`` disables exclusion entirely. ``--exclude`` prefixes replace the
    configured ones, which in turn replace the vendor defaults.

    Examples:
        >>> resolve_exclusion(VisualizerSettings(), show_all=False)
        (True, None)
        >>> resolve_exclusion(VisualizerSettings(), show_all=False, excludes=["Secrets"])
        (True, ('Secrets',))
        >>> resolve_exclusion(VisualizerSettings(exclude_prefixes=["X"]), show_all=True)
        (False, None)
    """
    if show_all:
        return False, None
    if excludes:
        return True, tuple(excludes)
    if not settings.exclude_vendor_sections:
        return False, None
    return True, settings.custom_prefixes


def render_report(
    configuration: ConfigurationView,
    *,
    style: SymbolStyle,
    exclude_vendor_sections: bool,
    exclude_prefixes: tuple[str, ...] | None,
) -> str:
    render = visualize_simple if style is SymbolStyle.ASCII else visualize
    return render(configuration, exclude_vendor_sections, exclude_prefixes=exclude_prefixes)


def show_report(services: AppServices, report: str, style: SymbolStyle) -> None:
    """Print *report*, switching the console to UTF-8 first for Unicode glyphs."""
    if style is SymbolStyle.UNICODE:
        services.enable_unicode_console()
    services.display_report(report)


def _fail(exc: Exception, exit_code: ExitCode) -> None:
    logger.error("Failed to load configuration", extra={"error": str(exc), "error_type": type(exc).__name__})
    click.echo(f"\nError: {exc}", err=True)
    raise SystemExit(exit_code) from exc


@contextmanager
def exit_on_source_error() -> Iterator[None]:
    """Translate source loading errors into ``SystemExit`` with a matching code.

    Raises:
        SystemExit: FILE_NOT_FOUND for a missing source, CONFIG_ERROR for an
            unreadable one, INVALID_ARGUMENT for a malformed definition.
    """
    try:
        yield
    except SourceNotFoundError as exc:
        _fail(exc, ExitCode.FILE_NOT_FOUND)
    except ConfigurationError as exc:
        _fail(exc, ExitCode.CONFIG_ERROR)
    except ValueError as exc:
        _fail(exc, ExitCode.INVALID_ARGUMENT)


__all__ = [
    "exit_on_source_error",
    "render_report",
    "resolve_exclusion",
    "resolve_style",
    "show_report",
]
