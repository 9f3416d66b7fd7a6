"""lib_log_rich runtime setup shared by every confviz entry point.

The console script, ``python -m confviz`` and tests all call
:func:`init_logging`; only the first call initializes the runtime.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from confviz import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` settings section.

    Only ``service`` and ``environment`` are typed here; every other key is
    passed through to ``lib_log_rich.runtime.RuntimeConfig`` unchanged.

    Example:
        >>> LoggingConfigModel(service="confviz", console_level="DEBUG").model_dump(exclude_none=True)
        {'service': 'confviz', 'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a RuntimeConfig.

    The service name falls back to the package name when not configured.
    """
    raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(dict(cast("Mapping[str, object]", raw)) if raw else {})
    passthrough = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **passthrough,
    )


def init_logging(config: Config) -> None:
    """Initialize lib_log_rich once and bridge the standard ``logging`` module to it.

    Loads ``.env`` files first so ``LOG_*`` variables take part in the
    runtime settings. Later calls return immediately.

    Args:
        config: Loaded settings holding the ``[lib_log_rich]`` section.

    Side Effects:
        Loads ``.env`` files into the process environment on first invocation.
        Initializes the global lib_log_rich runtime on first invocation.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "build_runtime_config",
    "init_logging",
]
