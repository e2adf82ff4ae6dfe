"""Case registration, assertion context and per-case execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .config import SUITE_NAMES, HarnessConfig
from .faults import describe_faults, triggered_faults
from .matrix import Matrix, as_matrix, dims_of, format_matrix, zeros


class CaseAborted(AssertionError):
    pass


@dataclass
class CaseResult:
    suite: str
    name: str
    failures: List[str] = field(default_factory=list)
    observations: List[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def case_id(self) -> str:
        return f"{self.suite}/{self.name}"

    @property
    def passed(self) -> bool:
        return not self.failures and self.error is None


@dataclass(frozen=True)
class Case:
    suite: str
    name: str
    fn: Callable[["CaseContext"], None]


_REGISTRY: List[Case] = []


def register(suite: str, name: str):
    if suite not in SUITE_NAMES:
        raise ValueError(f"unknown suite {suite!r}")

    def decorator(fn):
        if any(c.suite == suite and c.name == name for c in _REGISTRY):
            raise ValueError(f"case {suite}/{name} registered twice")
        _REGISTRY.append(Case(suite=suite, name=name, fn=fn))
        return fn

    return decorator


def registered_cases(suites: Optional[Iterable[str]] = None) -> List[Case]:
    """Registered cases in suite order, then registration order."""
    wanted = list(suites) if suites is not None else list(SUITE_NAMES)
    return [case for suite in SUITE_NAMES if suite in wanted for case in _REGISTRY if case.suite == suite]


def _equal(actual, expected) -> bool:
    return bool(np.array_equal(np.asarray(actual), np.asarray(expected)))


class CaseContext:
    """What a case sees: the subject, the oracle, the config and its result.

    ``expect_*`` methods record a failure and let the case continue;
    ``assert_*`` methods record it and abort the case.
    """

    def __init__(self, result: CaseResult, candidate, reference, config: HarnessConfig):
        self.result = result
        self.candidate = candidate
        self.reference = reference
        self.config = config

    def observe(self, note: str) -> None:
        self.result.observations.append(note)

    def fail(self, message: str) -> None:
        self.result.failures.append(message)

    def multiply(self, a, b, dims: Optional[Sequence[int]] = None, out: Optional[Matrix] = None) -> Matrix:
        a = as_matrix(a, "a")
        b = as_matrix(b, "b")
        rows_a, cols_a, cols_b = dims if dims is not None else dims_of(a, b)
        if out is None:
            out = zeros(max(rows_a, 0), max(cols_b, 0))
        self.candidate(a, b, out, rows_a, cols_a, cols_b)
        return out

    def expected(self, a, b) -> Matrix:
        a = as_matrix(a, "a")
        b = as_matrix(b, "b")
        rows_a, cols_a, cols_b = dims_of(a, b)
        out = zeros(rows_a, cols_b)
        self.reference(a, b, out, rows_a, cols_a, cols_b)
        return out

    def _mismatch(self, actual, expected, message: str, inputs: Optional[Tuple]) -> str:
        lines = [message]
        if inputs is not None:
            a, b = inputs
            lines.append(f"  A: {format_matrix(a)}")
            lines.append(f"  B: {format_matrix(b)}")
        lines.append(f"  expected: {format_matrix(expected)}")
        lines.append(f"  actual:   {format_matrix(actual)}")
        if inputs is not None and np.ndim(actual) == 2:
            lines.append(f"  triggers: {describe_faults(triggered_faults(a, b, actual))}")
        return "\n".join(lines)

    def expect_equal(self, actual, expected, message: str, *, inputs: Optional[Tuple] = None) -> bool:
        if _equal(actual, expected):
            return True
        self.fail(self._mismatch(actual, expected, message, inputs))
        return False

    def assert_equal(self, actual, expected, message: str, *, inputs: Optional[Tuple] = None) -> None:
        if not self.expect_equal(actual, expected, message, inputs=inputs):
            raise CaseAborted(message)

    def assert_true(self, condition: bool, message: str) -> None:
        if not condition:
            self.fail(message)
            raise CaseAborted(message)

    def expect_raises(self, fn: Callable[[], object], message: str) -> bool:
        try:
            fn()
        except Exception:
            return True
        self.fail(f"{message}: no failure signal was raised")
        return False

    def assert_raises(self, fn: Callable[[], object], message: str) -> None:
        if not self.expect_raises(fn, message):
            raise CaseAborted(message)

    def invoke(self, fn: Callable[[], object], context: str) -> bool:
        """Call ``fn``; a raised exception becomes a recorded failure."""
        try:
            fn()
        except Exception as exc:
            self.fail(f"{context}: candidate raised {type(exc).__name__}: {exc}")
            return False
        return True

    def probe(self, fn: Callable[[], object], label: str) -> Optional[Exception]:
        """Exploratory call: note what happened, never fail the case."""
        try:
            fn()
        except Exception as exc:
            self.observe(f"{label}: failure signal {type(exc).__name__}: {exc}")
            return exc
        self.observe(f"{label}: no failure signal, call was accepted (non-conformance)")
        return None


def run_case(case: Case, candidate, reference, config: HarnessConfig) -> CaseResult:
    result = CaseResult(suite=case.suite, name=case.name)
    ctx = CaseContext(result, candidate, reference, config)
    try:
        case.fn(ctx)
    except CaseAborted:
        pass
    except Exception as exc:
        result.error = f"{type(exc).__name__}: {exc}"
    return result
