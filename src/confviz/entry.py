"""Console script entry point (``confviz``) with production wiring.

Lives outside the adapters package so the CLI never imports the
composition root itself.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the CLI with production services and return the exit code."""
    return cli_main(services_factory=build_production)


__all__ = ["main"]
