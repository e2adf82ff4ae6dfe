"""Candidate multiplier loading and the built-in fault-injecting subject."""

from __future__ import annotations

import importlib
import sys
from typing import Callable, Iterable, Optional

from .faults import FaultCode, message, triggered_faults


Multiplier = Callable[..., None]


class CandidateLoadError(RuntimeError):
    pass


def load_candidate(path: str) -> Multiplier:
    """Resolve ``"package.module:function"`` to a callable multiplier."""
    module, sep, function = path.partition(":")
    if not sep or not module or not function:
        raise CandidateLoadError(f"candidate path must look like 'module:function', got {path!r}")
    try:
        mod = importlib.import_module(module)
    except ImportError as exc:
        raise CandidateLoadError(f"cannot import candidate module {module!r}: {exc}") from exc
    fn = getattr(mod, function, None)
    if fn is None:
        raise CandidateLoadError(f"module {module!r} has no attribute {function!r}")
    if not callable(fn):
        raise CandidateLoadError(f"{path!r} is not callable")
    return fn


class FaultyMultiplier:
    """Multiplier that trusts the declared sizes and misbehaves on chosen values.

    Sizes are never validated: a declared size larger than the container
    raises ``IndexError``, anything else is silently accepted. After the
    product is formed, every enabled fault whose trigger holds is reported on
    stderr as ``Error N: message!`` and perturbs the output.
    """

    def __init__(self, faults: Optional[Iterable[int]] = None, report: bool = True):
        if faults is None:
            self.faults = frozenset(FaultCode)
        else:
            self.faults = frozenset(FaultCode(f) for f in faults)
        self.report = report

    def __call__(self, a, b, c, rows_a: int, cols_a: int, cols_b: int) -> None:
        for i in range(rows_a):
            for j in range(cols_b):
                c[i][j] = 0
                for k in range(cols_a):
                    c[i][j] += a[i][k] * b[k][j]

        triggered = [code for code in triggered_faults(a, b, c) if code in self.faults]
        if not triggered:
            return
        out_rows = min(rows_a, len(c))
        out_cols = min(cols_b, len(c[0])) if len(c) else 0
        for code in triggered:
            if self.report:
                print(f"Error {int(code)}: {message(code)}!", file=sys.stderr)
            if out_rows > 0 and out_cols > 0:
                c[int(code) % out_rows][int(code) % out_cols] += int(code)


multiply_matrices = FaultyMultiplier()
