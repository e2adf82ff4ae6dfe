import pytest

from matcheck.config import HarnessConfig, clear_config


@pytest.fixture(autouse=True)
def _reset_config():
    clear_config()
    yield
    clear_config()


@pytest.fixture
def quiet_config():
    return HarnessConfig(
        seed=1234,
        fuzz_trials=25,
        scalar_low=-5,
        scalar_high=5,
        sweep_steps=10,
        progress_to_terminal=False,
    )
