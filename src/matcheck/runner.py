"""Entry point that runs every registered suite and reports per case.

Usage:
    matcheck [--candidate MODULE:FUNCTION] [--seed SEED] [--suite NAME ...]
             [--trials N] [--max-failures N] [--quiet]
    python -m matcheck.runner ...

Exit status is 1 when any case failed, 2 on a usage or configuration error.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import suites  # noqa: F401  (registers the cases)
from .candidate import CandidateLoadError, load_candidate
from .config import DEFAULT_CANDIDATE, SUITE_NAMES, ConfigError, HarnessConfig, configure_harness, get_config
from .harness import CaseResult, registered_cases, run_case
from .reference import multiply_matrices_without_errors


def _log(cfg: HarnessConfig, msg: str) -> None:
    if cfg.progress_to_terminal:
        print(f"[matcheck] {msg}")


def _report(cfg: HarnessConfig, result: CaseResult) -> None:
    status = "PASS" if result.passed else "FAIL"
    print(f"[matcheck] {status} {result.case_id}")
    for note in result.observations:
        _log(cfg, f"  {result.case_id}: {note}")

    limit = cfg.max_reported_failures
    shown = result.failures[:limit] if limit else result.failures
    for failure in shown:
        print(f"[matcheck] {result.case_id}: {failure}", file=sys.stderr)
    hidden = len(result.failures) - len(shown)
    if hidden:
        print(f"[matcheck] {result.case_id}: ... {hidden} more failure(s) not shown", file=sys.stderr)
    if result.error is not None:
        print(f"[matcheck] {result.case_id}: aborted by {result.error}", file=sys.stderr)


def run_all(config: Optional[HarnessConfig] = None, candidate=None, reference=None) -> List[CaseResult]:
    cfg = config or get_config() or HarnessConfig()
    if candidate is None:
        candidate = load_candidate(cfg.candidate)
    if reference is None:
        reference = multiply_matrices_without_errors

    results: List[CaseResult] = []
    current_suite = None
    for case in registered_cases(cfg.suites):
        if case.suite != current_suite:
            current_suite = case.suite
            _log(cfg, f"running {current_suite} suite")
        result = run_case(case, candidate, reference, cfg)
        _report(cfg, result)
        results.append(result)

    failed = sum(1 for r in results if not r.passed)
    print(f"[matcheck] {len(results) - failed} passed, {failed} failed, {len(results)} total")
    return results


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Search a black-box matrix multiplication routine for value-dependent faults",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--candidate",
        default=DEFAULT_CANDIDATE,
        help="Multiplier under test as module:function (default: built-in faulty candidate)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Replay the fuzz suite from a logged seed")
    parser.add_argument(
        "--suite",
        action="append",
        choices=SUITE_NAMES,
        help="Run only this suite (repeatable)",
    )
    parser.add_argument("--trials", type=int, default=100, help="Number of fuzz trials")
    parser.add_argument(
        "--max-failures",
        type=int,
        default=0,
        help="Print at most N failure details per case (0 prints all)",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print pass/fail lines and failures")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        cfg = configure_harness(
            candidate=args.candidate,
            seed=args.seed,
            fuzz_trials=args.trials,
            suites=args.suite,
            progress_to_terminal=not args.quiet,
            max_reported_failures=args.max_failures,
        )
        candidate = load_candidate(cfg.candidate)
    except (ConfigError, CandidateLoadError) as exc:
        print(f"[matcheck] {exc}", file=sys.stderr)
        return 2

    _log(cfg, f"candidate: {cfg.candidate}")
    results = run_all(cfg, candidate=candidate)
    return 0 if all(r.passed for r in results) else 1


if __name__ == "__main__":
    sys.exit(main())
