"""Root CLI command group and global option handling.

Defines the top-level Click command group. Loads confviz's own settings
once, starts logging and hands both to every subcommand.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config
from pydantic import ValidationError

from confviz import __init__conf__
from confviz.adapters.config.loader import validate_profile
from confviz.adapters.config.settings import VisualizerSettings, load_visualizer_settings

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from confviz.composition import AppServices

logger = logging.getLogger(__name__)


def _check_profile(profile: str | None) -> None:
    """Exit with INVALID_ARGUMENT when *profile* is not a usable profile name."""
    if profile is None:
        return
    try:
        validate_profile(profile)
    except ValueError as exc:
        logger.error("Invalid profile", extra={"profile": profile, "error": str(exc)})
        click.echo(f"\nError: Invalid profile - {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _load_settings(config: Config) -> VisualizerSettings:
    """Parse the ``[confviz]`` section, exiting with CONFIG_ERROR when invalid."""
    try:
        return load_visualizer_settings(config)
    except ValidationError as exc:
        logger.error("Invalid confviz settings", extra={"errors": exc.error_count()})
        click.echo(f"\nError: Invalid [confviz] settings - {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load confviz settings from a named profile (e.g., 'ci')",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None) -> None:
    """Root command storing global flags and syncing shared traceback state.

    Example:
        >>> from click.testing import CliRunner
        >>> from confviz.composition import build_testing
        >>> result = CliRunner().invoke(cli, ["--help"], obj=build_testing)
        >>> result.exit_code
        0
    """
    # ctx.obj is always the services factory (production or test)
    if not callable(ctx.obj):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = ctx.obj()  # type: ignore[assignment]  # Click's obj is typed as Any
    _check_profile(profile)
    config = services.get_config(profile=profile)
    services.init_logging(config)
    settings = _load_settings(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        settings=settings,
        services=services,
        profile=profile,
    )
    apply_traceback_preferences(traceback)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Deferred import: command modules import from package ancestors that
# import this module.
def _register_commands() -> None:
    from .commands import cli_config, cli_info, cli_visualize

    for cmd in (cli_visualize, cli_config, cli_info):
        cli.add_command(cmd)


_register_commands()


__all__ = ["cli"]
