"""Visualize confviz's own layered settings.

Contents:
    * :func:`cli_config` - Print the settings tree with the layer of every value.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ._shared import render_report, resolve_exclusion, resolve_style, show_report

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--simple/--unicode",
    default=None,
    help="Draw with ASCII or Unicode symbols (default from settings)",
)
@click.option(
    "--all",
    "show_all",
    is_flag=True,
    default=False,
    help="Show every section, including vendor sections",
)
@click.pass_context
def cli_config(ctx: click.Context, simple: bool | None, show_all: bool) -> None:
    """Display confviz's merged settings and the layer each value came from.

    Layers, lowest precedence first: defaults -> app -> host -> user -> dotenv -> env.
    Only the winning layer of each value is known, so no history is shown.
    """
    cli_ctx = get_cli_context(ctx)
    style = resolve_style(cli_ctx.settings, simple)
    exclude_vendor_sections, exclude_prefixes = resolve_exclusion(cli_ctx.settings, show_all=show_all)

    extra = {"command": "config", "style": style.value, "profile": cli_ctx.profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying confviz settings", extra={"profile": cli_ctx.profile})
        root = cli_ctx.services.describe_settings(cli_ctx.config)
        report = render_report(
            root,
            style=style,
            exclude_vendor_sections=exclude_vendor_sections,
            exclude_prefixes=exclude_prefixes,
        )
        show_report(cli_ctx.services, report, style)


__all__ = ["cli_config"]
