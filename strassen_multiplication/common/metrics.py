"""Metric utilities for comparing exact integer products.

All functions here work purely on NumPy arrays and are side-effect free.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

IntArray = NDArray[np.integer]


def _check_shapes(expected: IntArray, actual: IntArray) -> None:
    if expected.shape != actual.shape:
        raise ValueError(
            f"shapes of expected and actual must match: {expected.shape} != {actual.shape}"
        )


def count_mismatches(expected: IntArray, actual: IntArray) -> int:
    """Number of cells where ``actual`` differs from ``expected``.

    Parameters
    ----------
    expected:
        Reference product.
    actual:
        Product under test, same shape as ``expected``.

    Returns
    -------
    int
        Count of differing cells; zero means an exact match.
    """

    _check_shapes(expected, actual)
    return int(np.count_nonzero(np.asarray(expected) != np.asarray(actual)))


def max_abs_difference(expected: IntArray, actual: IntArray) -> int:
    """Largest absolute cell difference, computed in 64-bit to avoid wrapping."""

    _check_shapes(expected, actual)
    if expected.size == 0:
        return 0
    diff = np.asarray(expected, dtype=np.int64) - np.asarray(actual, dtype=np.int64)
    return int(np.max(np.abs(diff)))


def naive_multiplication_count(n: int) -> int:
    """Scalar multiplications performed by the cubic algorithm on ``n x n``."""

    return n ** 3


def strassen_multiplication_count(n: int, threshold: int) -> int:
    """Scalar multiplications performed by Strassen with a cubic base case.

    Follows the recurrence ``M(n) = 7 M(n/2)`` for ``n > threshold`` and
    ``M(n) = n^3`` otherwise.
    """

    if n <= 0:
        raise ValueError("n must be positive")
    if threshold < 1:
        raise ValueError("threshold must be at least 1")

    splits = 0
    while n > threshold:
        n //= 2
        splits += 1
    return (7 ** splits) * n ** 3
