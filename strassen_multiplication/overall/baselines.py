"""Baseline integer matrix multiplication algorithms.

Provides the cubic reference product that Strassen results are checked
against, and a wrapper around NumPy's matmul for speed comparisons.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from strassen_multiplication.strassen.core import naive_multiply_views
from strassen_multiplication.strassen.view import MatrixView

IntArray = NDArray[np.integer]


def _validate_square_pair(a: IntArray, b: IntArray) -> None:
    if a.ndim != 2 or b.ndim != 2:
        raise ValueError("a and b must be 2D arrays")
    if a.shape[0] != a.shape[1] or a.shape != b.shape:
        raise ValueError(f"a and b must be square and equally sized: a{a.shape}, b{b.shape}")


def naive_multiply(a: IntArray, b: IntArray) -> IntArray:
    """Compute the exact product ``C = A @ B`` with the cubic algorithm.

    This is the same base case the Strassen recursion bottoms out in,
    applied to the whole matrix, so it is the fair from-scratch baseline.

    Parameters
    ----------
    a, b:
        Square arrays of identical shape ``(n, n)`` and integer dtype.

    Returns
    -------
    ndarray
        Product with shape ``(n, n)`` in the operands' dtype.

    Complexity
    ----------
    O(n^3) scalar multiplications.
    """

    _validate_square_pair(a, b)
    return naive_multiply_views(MatrixView.full(a), MatrixView.full(b)).data


def numpy_multiply(a: IntArray, b: IntArray) -> IntArray:
    """Compute ``C = A @ B`` with NumPy's matmul, keeping the operands' dtype.

    NumPy does not use BLAS for integer types, but its compiled loop is
    still the fastest exact reference available.
    """

    _validate_square_pair(a, b)
    return np.matmul(a, b).astype(np.result_type(a.dtype, b.dtype), copy=False)


def _self_test() -> None:
    """Run a small internal self-test for the baselines."""

    rng = np.random.default_rng(0)
    a = rng.integers(-50, 50, size=(8, 8), dtype=np.int64)
    b = rng.integers(-50, 50, size=(8, 8), dtype=np.int64)
    assert np.array_equal(naive_multiply(a, b), numpy_multiply(a, b))


if __name__ == "__main__":  # pragma: no cover - manual quick check
    _self_test()
