"""Tests for harness configuration."""

import pytest

from matcheck.config import (
    DEFAULT_CANDIDATE,
    SUITE_NAMES,
    ConfigError,
    clear_config,
    configure_harness,
    get_config,
)


def test_defaults_match_documented_run():
    cfg = configure_harness()
    assert cfg.candidate == DEFAULT_CANDIDATE
    assert cfg.fuzz_trials == 100
    assert (cfg.fuzz_low, cfg.fuzz_high) == (1, 10)
    assert (cfg.scalar_low, cfg.scalar_high) == (-100, 100)
    assert (cfg.sweep_steps, cfg.sweep_stride) == (50, 50)
    assert cfg.suites == list(SUITE_NAMES)
    assert get_config() is cfg


def test_clear_config():
    configure_harness(seed=5)
    clear_config()
    assert get_config() is None


@pytest.mark.parametrize(
    "kwargs",
    [
        {"candidate": "no_colon"},
        {"seed": -1},
        {"seed": 2**32},
        {"fuzz_trials": -1},
        {"fuzz_low": 0},
        {"fuzz_low": 5, "fuzz_high": 4},
        {"scalar_low": 1, "scalar_high": -1},
        {"sweep_steps": -3},
        {"sweep_stride": -50},
        {"suites": ["algebraic", "bogus"]},
        {"suites": []},
        {"max_reported_failures": -1},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ConfigError):
        configure_harness(**kwargs)
    assert get_config() is None
