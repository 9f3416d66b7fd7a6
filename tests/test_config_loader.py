"""Loading confviz's own settings through lib_layered_config.

Covers the bundled defaults and the settings cache, including concurrent
access. Profile validation lives in test_cli_validation.py.
"""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor

import pytest

from confviz.adapters.config.loader import get_config, get_default_config_path


@pytest.mark.os_agnostic
class TestGetDefaultConfigPath:
    """Verify get_default_config_path() behavior."""

    def test_points_to_bundled_defaults(self) -> None:
        result = get_default_config_path()

        assert result.name == "defaultconfig.toml"
        assert result.is_file()

    def test_repeated_calls_return_equal_paths(self) -> None:
        assert get_default_config_path() == get_default_config_path()


@pytest.mark.os_agnostic
class TestGetConfig:
    """Verify get_config() behavior."""

    def test_bundled_defaults_provide_confviz_section(self, clear_config_cache: None) -> None:
        config = get_config()

        assert config.get("confviz.style") in {"unicode", "ascii"}

    def test_repeated_calls_return_cached_config(self, clear_config_cache: None) -> None:
        assert get_config() is get_config()

    def test_cache_clear_forces_a_fresh_read(self, clear_config_cache: None) -> None:
        first = get_config()
        get_config.cache_clear()
        second = get_config()

        assert first.as_dict() == second.as_dict()


@pytest.mark.os_agnostic
class TestConcurrentAccess:
    """Verify consistent results under concurrent access."""

    def test_concurrent_get_config_returns_equivalent_results(self, clear_config_cache: None) -> None:
        with ThreadPoolExecutor(max_workers=4) as pool:
            futures = [pool.submit(get_config) for _ in range(10)]
            results = [future.result() for future in futures]

        first = results[0].as_dict()
        assert all(result.as_dict() == first for result in results)

    def test_concurrent_access_with_cache_clear(self, clear_config_cache: None) -> None:
        errors: list[Exception] = []

        def fetch_config() -> None:
            try:
                assert isinstance(get_config().as_dict(), dict)
            except Exception as exc:
                errors.append(exc)

        def clear_cache() -> None:
            try:
                get_config.cache_clear()
            except Exception as exc:
                errors.append(exc)

        with ThreadPoolExecutor(max_workers=8) as pool:
            futures: list[Future[None]] = []
            for i in range(20):
                futures.append(pool.submit(clear_cache if i % 5 == 0 else fetch_config))
            for future in futures:
                future.result()

        assert errors == [], f"Concurrent access errors: {errors}"
