"""Tests for the logging configuration model.

LoggingConfigModel validation and the RuntimeConfig mapping are tested
here. The init_logging function is exercised via CLI integration tests.
"""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from confviz import __init__conf__
from confviz.adapters.logging.setup import LoggingConfigModel, build_runtime_config


@pytest.mark.os_agnostic
def test_logging_config_model_allows_extra_fields() -> None:
    """Extra fields pass through for lib_log_rich RuntimeConfig."""
    parsed = LoggingConfigModel.model_validate({"service": "test", "environment": "dev", "custom_field": "value"})

    assert parsed.service == "test"
    assert parsed.environment == "dev"
    extra = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)
    assert extra == {"custom_field": "value"}


@pytest.mark.os_agnostic
def test_logging_config_model_defaults() -> None:
    parsed = LoggingConfigModel.model_validate({})

    assert parsed.service is None
    assert parsed.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_falls_back_to_package_name() -> None:
    runtime = build_runtime_config(Config({}, {}))

    assert runtime.service == __init__conf__.name
    assert runtime.environment == "prod"


@pytest.mark.os_agnostic
def test_runtime_config_uses_configured_service() -> None:
    runtime = build_runtime_config(Config({"lib_log_rich": {"service": "ci-viz", "environment": "test"}}, {}))

    assert runtime.service == "ci-viz"
    assert runtime.environment == "test"
