"""Integer matrix generators for tests and benchmarks.

Randomness lives here only; the multiplication engine never draws random
numbers. Every generator takes an explicit seed for reproducibility.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from numpy.typing import DTypeLike, NDArray

IntArray = NDArray[np.integer]


@dataclass
class IntegerMatrixSpec:
    """Specification of a random square integer matrix.

    Values are drawn uniformly from ``[low, high)``.
    """

    n: int
    low: int = 0
    high: int = 100
    seed: Optional[int] = None
    dtype: str = "int32"


def random_integer_matrix(spec: IntegerMatrixSpec) -> IntArray:
    """Draw an ``n x n`` matrix with uniform integer entries."""

    if spec.n <= 0:
        raise ValueError("n must be positive")
    if spec.high <= spec.low:
        raise ValueError("high must be greater than low")

    rng = np.random.default_rng(spec.seed)
    return rng.integers(spec.low, spec.high, size=(spec.n, spec.n), dtype=spec.dtype)


def random_pair(n: int, seed: int, low: int = 0, high: int = 100, dtype: str = "int32") -> Tuple[IntArray, IntArray]:
    """Generate two independent random matrices of side ``n``."""

    a = random_integer_matrix(IntegerMatrixSpec(n=n, low=low, high=high, seed=seed, dtype=dtype))
    b = random_integer_matrix(IntegerMatrixSpec(n=n, low=low, high=high, seed=seed + 1000, dtype=dtype))
    return a, b


def identity_matrix(n: int, dtype: DTypeLike = np.int32) -> IntArray:
    return np.eye(n, dtype=dtype)


def zero_matrix(n: int, dtype: DTypeLike = np.int32) -> IntArray:
    return np.zeros((n, n), dtype=dtype)
