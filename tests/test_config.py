"""Tests for ContextVar-based scan configuration.

Validates defaults, immutability, thread isolation, and context manager
behavior.
"""

from threading import Thread

import pytest

from cursorscan import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)


class TestScanConfigDataclass:
    """Test ScanConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = ScanConfig()
        assert config.step_limit is None
        assert config.trace is False

    def test_immutability(self) -> None:
        config = ScanConfig()
        with pytest.raises(AttributeError):
            config.trace = True  # type: ignore[misc]

    def test_negative_step_limit_rejected(self) -> None:
        with pytest.raises(ValueError, match="step_limit"):
            ScanConfig(step_limit=-1)

    def test_zero_step_limit_allowed(self) -> None:
        assert ScanConfig(step_limit=0).step_limit == 0


class TestFromDict:
    def test_known_keys(self) -> None:
        config = ScanConfig.from_dict({"step_limit": 100, "trace": True})
        assert config.step_limit == 100
        assert config.trace is True

    def test_unknown_keys_ignored(self) -> None:
        config = ScanConfig.from_dict({"step_limit": 5, "colour": "red"})
        assert config == ScanConfig(step_limit=5)

    def test_empty_dict_gives_defaults(self) -> None:
        assert ScanConfig.from_dict({}) == ScanConfig()


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def teardown_method(self) -> None:
        reset_scan_config()

    def test_default_config(self) -> None:
        assert get_scan_config() == ScanConfig()

    def test_set_and_get(self) -> None:
        set_scan_config(ScanConfig(trace=True))
        assert get_scan_config().trace is True

    def test_reset(self) -> None:
        set_scan_config(ScanConfig(step_limit=3))
        reset_scan_config()
        assert get_scan_config().step_limit is None


class TestScanConfigContext:
    def test_applies_inside_and_restores_after(self) -> None:
        with scan_config_context(ScanConfig(step_limit=7)):
            assert get_scan_config().step_limit == 7
        assert get_scan_config().step_limit is None

    def test_nested_contexts_restore_previous(self) -> None:
        with scan_config_context(ScanConfig(step_limit=1)):
            with scan_config_context(ScanConfig(step_limit=2)):
                assert get_scan_config().step_limit == 2
            assert get_scan_config().step_limit == 1

    def test_restores_after_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with scan_config_context(ScanConfig(trace=True)):
                raise RuntimeError("boom")
        assert get_scan_config().trace is False


class TestThreadIsolation:
    def test_config_does_not_leak_between_threads(self) -> None:
        seen: dict[str, ScanConfig] = {}

        def worker() -> None:
            seen["worker"] = get_scan_config()

        with scan_config_context(ScanConfig(step_limit=42)):
            thread = Thread(target=worker)
            thread.start()
            thread.join()
            assert get_scan_config().step_limit == 42

        assert seen["worker"].step_limit is None
