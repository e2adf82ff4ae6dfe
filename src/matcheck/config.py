"""Harness configuration and validation for matcheck runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional


SUITE_NAMES = ("algebraic", "combinatorial", "structural", "fuzz")
DEFAULT_CANDIDATE = "matcheck.candidate:multiply_matrices"


@dataclass
class HarnessConfig:
    candidate: str = DEFAULT_CANDIDATE
    seed: Optional[int] = None

    fuzz_trials: int = 100
    fuzz_low: int = 1
    fuzz_high: int = 10

    scalar_low: int = -100
    scalar_high: int = 100

    sweep_steps: int = 50
    sweep_stride: int = 50

    suites: List[str] = field(default_factory=lambda: list(SUITE_NAMES))
    progress_to_terminal: bool = True
    max_reported_failures: int = 0


_CONFIG: Optional[HarnessConfig] = None


class ConfigError(ValueError):
    pass


def _check_range(low: int, high: int, what: str) -> None:
    if low > high:
        raise ConfigError(f"{what} range is empty: [{low}, {high}]")


def configure_harness(
    *,
    candidate: str = DEFAULT_CANDIDATE,
    seed: Optional[int] = None,
    fuzz_trials: int = 100,
    fuzz_low: int = 1,
    fuzz_high: int = 10,
    scalar_low: int = -100,
    scalar_high: int = 100,
    sweep_steps: int = 50,
    sweep_stride: int = 50,
    suites: Optional[Iterable[str]] = None,
    progress_to_terminal: bool = True,
    max_reported_failures: int = 0,
) -> HarnessConfig:
    """Configure a harness run.

    The seed is only consumed by the fuzz suite; leave it unset to draw one
    from the system entropy source, or pass a logged seed to replay a run.
    """
    if not candidate or ":" not in candidate:
        raise ConfigError("candidate must look like 'package.module:function'")
    if seed is not None and not 0 <= seed < 2**32:
        raise ConfigError("seed must be an unsigned 32-bit integer")
    if fuzz_trials < 0:
        raise ConfigError("fuzz_trials must be non-negative")
    if fuzz_low < 1:
        raise ConfigError("fuzz_low must be at least 1")
    _check_range(fuzz_low, fuzz_high, "fuzz")
    _check_range(scalar_low, scalar_high, "scalar")
    if sweep_steps < 0:
        raise ConfigError("sweep_steps must be non-negative")
    if sweep_stride < 0:
        raise ConfigError("sweep_stride must be non-negative")
    if max_reported_failures < 0:
        raise ConfigError("max_reported_failures must be non-negative")

    suite_list: List[str] = list(suites) if suites is not None else list(SUITE_NAMES)
    unknown = [name for name in suite_list if name not in SUITE_NAMES]
    if unknown:
        raise ConfigError(f"unknown suite(s): {', '.join(unknown)}")
    if not suite_list:
        raise ConfigError("at least one suite must be selected")

    cfg = HarnessConfig(
        candidate=candidate,
        seed=seed,
        fuzz_trials=fuzz_trials,
        fuzz_low=fuzz_low,
        fuzz_high=fuzz_high,
        scalar_low=scalar_low,
        scalar_high=scalar_high,
        sweep_steps=sweep_steps,
        sweep_stride=sweep_stride,
        suites=suite_list,
        progress_to_terminal=progress_to_terminal,
        max_reported_failures=max_reported_failures,
    )

    global _CONFIG
    _CONFIG = cfg
    return cfg


def get_config() -> Optional[HarnessConfig]:
    return _CONFIG


def clear_config() -> None:
    global _CONFIG
    _CONFIG = None
