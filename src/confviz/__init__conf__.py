"""Static package metadata surfaced to CLI commands and documentation.

Keep the values in sync with ``pyproject.toml``; the ``info`` command and the
layered configuration loader read them at runtime.

Contents:
    * Metadata constants (name, title, version, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - print the metadata block.
"""

from __future__ import annotations

#: Distribution name as published.
name = "confviz"
#: Human readable summary used as CLI help text.
title = "Visualize layered application configuration with value provenance"
#: Package version; matches ``[project].version`` in ``pyproject.toml``.
version = "1.0.0"
#: Project homepage.
homepage = "https://github.com/confviz/confviz"
#: Author name.
author = "confviz contributors"
#: Author contact.
author_email = "confviz@users.noreply.github.com"
#: Console script name.
shell_command = "confviz"

#: Vendor directory used on macOS/Windows for layered configuration.
LAYEREDCONF_VENDOR: str = "confviz"
#: Application directory used on macOS/Windows for layered configuration.
LAYEREDCONF_APP: str = "Configuration Visualizer"
#: Slug used on Linux (XDG) and for environment variable prefixes.
LAYEREDCONF_SLUG: str = "confviz"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for confviz:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
