"""Public package API for the matcheck harness."""

from .candidate import FaultyMultiplier, load_candidate, multiply_matrices
from .config import configure_harness, get_config
from .faults import FaultCode, triggered_faults
from .reference import mat_mul, multiply_matrices_without_errors
from .rng import SeededStream

__all__ = [
    "configure_harness",
    "get_config",
    "load_candidate",
    "multiply_matrices",
    "FaultyMultiplier",
    "multiply_matrices_without_errors",
    "mat_mul",
    "FaultCode",
    "triggered_faults",
    "SeededStream",
]
