"""In-memory logging adapter for testing."""

from __future__ import annotations

import lib_log_rich.runtime
from lib_layered_config import Config

from confviz import __init__conf__


def init_logging_in_memory(config: Config) -> None:
    """Start a console-only lib_log_rich runtime that emits only CRITICAL records.

    Commands wrap their work in ``lib_log_rich.runtime.bind``, which needs an
    initialized runtime. The ``[lib_log_rich]`` section of *config* is ignored.
    Later calls return immediately.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.runtime.init(
        lib_log_rich.runtime.RuntimeConfig(
            service=__init__conf__.name,
            environment="test",
            console_level="CRITICAL",
        )
    )


__all__ = ["init_logging_in_memory"]
