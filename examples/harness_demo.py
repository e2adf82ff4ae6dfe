"""Example of configuring the harness and replaying a fuzz seed."""

from matcheck import configure_harness
from matcheck.runner import run_all
from matcheck.suites.fuzz import replay_trial


def main():
    configure_harness(
        candidate="matcheck.candidate:multiply_matrices",
        seed=3922693891,
        fuzz_trials=20,
        scalar_low=-10,
        scalar_high=10,
        sweep_steps=5,
        progress_to_terminal=True,
        max_reported_failures=3,
    )

    results = run_all()
    failed = [r.case_id for r in results if not r.passed]
    print(f"failed cases: {failed}")

    a, b = replay_trial(3922693891, 0)
    print(f"trial 0 of seed 3922693891 multiplies a {a.shape} matrix by a {b.shape} matrix")


if __name__ == "__main__":
    main()
