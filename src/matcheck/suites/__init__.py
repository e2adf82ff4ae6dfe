"""Importing this package registers every case with the harness."""

from . import algebraic, combinatorial, fuzz, structural

__all__ = ["algebraic", "combinatorial", "structural", "fuzz"]
