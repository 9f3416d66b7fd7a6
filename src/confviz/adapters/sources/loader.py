"""Assemble a configuration root from the sources named on the command line."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .builder import ConfigurationBuilder, MergedConfiguration

logger = logging.getLogger(__name__)


def load_configuration(
    *,
    files: Sequence[str] = (),
    optional_files: Sequence[str] = (),
    environment: bool = False,
    env_prefix: str | None = None,
    definitions: tuple[str, ...] = (),
) -> MergedConfiguration:
    """Build a configuration root in the usual precedence order.

    Order, lowest precedence first: *files* as given, *optional_files*,
    environment variables (when *environment* is set or *env_prefix* is
    given), then command-line *definitions*.

    Args:
        files: Required TOML, JSON or dotenv files.
        optional_files: Files that are skipped when missing.
        environment: Include environment variables.
        env_prefix: Only include variables with this prefix (implies *environment*).
        definitions: ``SECTION:KEY=VALUE`` strings.

    Returns:
        Root holding the merged tree and its providers.

    Raises:
        SourceNotFoundError: If a required file is missing.
        SourceFormatError: If a file cannot be parsed or has an unknown format.
        ValueError: If a definition is malformed.

    Example:
        >>> root = load_configuration(definitions=("App:Mode=fast",))
        >>> root.get("App:Mode")
        'fast'
    """
    builder = ConfigurationBuilder()
    for path in files:
        builder.add_file(path)
    for path in optional_files:
        builder.add_file(path, optional=True)
    if environment or env_prefix:
        builder.add_environment(env_prefix)
    if definitions:
        builder.add_command_line(definitions)

    logger.debug(
        "Loading configuration sources",
        extra={"files": list(files), "optional_files": list(optional_files), "env_prefix": env_prefix},
    )
    return builder.build()


__all__ = ["load_configuration"]
