"""Print a rendered configuration report.

Flushes pending log output first so log lines never interleave with the
report, then writes the report verbatim through a Rich console.
"""

from __future__ import annotations

import lib_log_rich.runtime
from rich.console import Console


def display_report(report: str, *, console: Console | None = None) -> None:
    """Write *report* to the terminal without Rich markup or highlighting.

    Args:
        report: Text produced by ``visualize`` or ``visualize_simple``.
        console: Optional Rich Console for output. When None, a console on
            stdout is created. Primarily useful for testing.

    Side Effects:
        Flushes pending log messages before display.
        Writes the report to stdout.
    """
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.flush()

    target = console if console is not None else Console(soft_wrap=True)
    target.print(report, end="", markup=False, highlight=False, emoji=False)


__all__ = ["display_report"]
