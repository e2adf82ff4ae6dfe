"""End-to-end tests for the aggregator entry point."""

from matcheck.config import HarnessConfig
from matcheck.reference import multiply_matrices_without_errors
from matcheck.runner import main, run_all


REFERENCE = "matcheck.reference:multiply_matrices_without_errors"


def test_reference_candidate_exits_cleanly(capsys):
    status = main(["--candidate", REFERENCE, "--suite", "algebraic", "--quiet"])
    out = capsys.readouterr().out
    assert status == 0
    assert "[matcheck] PASS algebraic/product_even_even" in out
    assert "10 passed, 0 failed, 10 total" in out


def test_faulty_default_candidate_fails(capsys):
    status = main(["--suite", "algebraic", "--quiet"])
    captured = capsys.readouterr()
    assert status == 1
    assert "[matcheck] FAIL algebraic/zero_matrices" in captured.out
    assert "expected:" in captured.err


def test_fuzz_seed_is_replayable_from_cli(capsys):
    main(["--suite", "fuzz", "--seed", "42", "--trials", "5", "--max-failures", "1"])
    first = capsys.readouterr()
    main(["--suite", "fuzz", "--seed", "42", "--trials", "5", "--max-failures", "1"])
    second = capsys.readouterr()
    assert "seed: 42" in first.out
    assert first.err == second.err


def test_usage_errors_exit_with_two(capsys):
    assert main(["--candidate", "not-a-path"]) == 2
    assert main(["--candidate", "matcheck.nothing_here:multiply"]) == 2
    assert main(["--seed", "-4"]) == 2


def test_run_all_structural_and_fuzz(capsys):
    cfg = HarnessConfig(suites=["structural", "fuzz"], seed=7, fuzz_trials=10, progress_to_terminal=False)
    results = run_all(cfg, candidate=multiply_matrices_without_errors)
    assert [r.case_id for r in results] == [
        "structural/non_coherent_sizes",
        "structural/negative_sizes",
        "structural/numerical_range",
        "fuzz/random_matrices",
    ]
    assert all(r.passed for r in results)
    assert "seed: 7" not in capsys.readouterr().out
