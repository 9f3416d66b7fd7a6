"""Visualize configuration assembled from files, environment and definitions.

Contents:
    * :func:`cli_visualize` - Build a configuration root and print its report.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import exit_on_source_error, render_report, resolve_exclusion, resolve_style, show_report

logger = logging.getLogger(__name__)


@click.command("visualize", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("sources", nargs=-1, metavar="[SOURCES]...")
@click.option(
    "--optional",
    "optional_files",
    multiple=True,
    metavar="FILE",
    help="Source file that is skipped when missing (repeatable, after SOURCES)",
)
@click.option(
    "--env-prefix",
    default=None,
    help="Include environment variables starting with this prefix (stripped)",
)
@click.option(
    "--env",
    "include_environment",
    is_flag=True,
    default=False,
    help="Include all environment variables",
)
@click.option(
    "--define",
    "-D",
    "definitions",
    multiple=True,
    metavar="SECTION:KEY=VALUE",
    help="Command-line value with the highest precedence (repeatable)",
)
@click.option(
    "--simple/--unicode",
    default=None,
    help="Draw with ASCII or Unicode symbols (default from settings)",
)
@click.option(
    "--exclude",
    "excludes",
    multiple=True,
    metavar="PREFIX",
    help="Hide sections starting with PREFIX instead of the vendor defaults (repeatable)",
)
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    default=False,
    help="Show every section, including vendor sections",
)
@click.option(
    "--section",
    default=None,
    metavar="PATH",
    help="Render only the subtree at PATH (e.g., 'Database:Primary')",
)
@click.pass_context
def cli_visualize(
    ctx: click.Context,
    sources: tuple[str, ...],
    optional_files: tuple[str, ...],
    env_prefix: str | None,
    include_environment: bool,
    definitions: tuple[str, ...],
    simple: bool | None,
    excludes: tuple[str, ...],
    show_all: bool,
    section: str | None,
) -> None:
    r"""Print the configuration tree with the source of every value.

    SOURCES are TOML, JSON or .env files, lowest precedence first. Environment
    variables come next and ``--define`` values last.

    \b
    Example:
        confviz visualize appsettings.json appsettings.Production.json -D Logging:Level=Debug
    """
    cli_ctx = get_cli_context(ctx)
    settings = cli_ctx.settings
    style = resolve_style(settings, simple)
    exclude_vendor_sections, exclude_prefixes = resolve_exclusion(settings, show_all=show_all, excludes=excludes)
    effective_prefix = env_prefix if env_prefix is not None else settings.env_prefix

    extra = {"command": "visualize", "sources": list(sources), "style": style.value}
    with lib_log_rich.runtime.bind(job_id="cli-visualize", extra=extra):
        logger.info(
            "Visualizing configuration",
            extra={
                "sources": list(sources),
                "optional": list(optional_files),
                "env_prefix": effective_prefix,
                "definitions": len(definitions),
                "section": section,
            },
        )
        with exit_on_source_error():
            root = cli_ctx.services.load_configuration(
                files=list(sources),
                optional_files=list(optional_files),
                environment=include_environment,
                env_prefix=effective_prefix,
                definitions=definitions,
            )
        view = root.get_section(section) if section else root
        report = render_report(
            view,
            style=style,
            exclude_vendor_sections=exclude_vendor_sections,
            exclude_prefixes=exclude_prefixes,
        )
        show_report(cli_ctx.services, report, style)


__all__ = ["cli_visualize"]
