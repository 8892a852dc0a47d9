r"""Strassen multiplication of square integer matrices.

Implements the seven-product recursion

.. math::

    P_1 = a(f - h),\; P_2 = (a + b)h,\; P_3 = (c + d)e,\; P_4 = d(g - e),

    P_5 = (a + d)(e + h),\; P_6 = (b - d)(g + h),\; P_7 = (a - c)(e + f)

for operands partitioned as ``A = [[a, b], [c, d]]`` and
``B = [[e, f], [g, h]]``, recombined into

.. math::

    AB = \begin{bmatrix} P_5 + P_4 - P_2 + P_6 & P_1 + P_2 \\
                         P_3 + P_4 & P_5 + P_1 - P_3 - P_7 \end{bmatrix}.

Sub-matrices are :class:`MatrixView` windows over the caller's grids, so
partitioning never copies. Every sum, difference and product is written
into a freshly allocated grid. Once the block dimension falls to the
configured threshold the recursion hands over to the cubic base case.

All grids share one fixed-width signed integer dtype (``int32`` by
default). Overflow is not detected: values wrap around silently, exactly
as NumPy integer array arithmetic does.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from strassen_multiplication.common.config import StrassenConfig
from strassen_multiplication.common.logging_utils import get_logger
from strassen_multiplication.strassen.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidEntryError,
)
from strassen_multiplication.strassen.view import MatrixView

IntArray = NDArray[np.integer]
GridLike = Union[IntArray, Sequence[Sequence[int]]]

logger = get_logger(__name__)


# ============================================================================
# Element-wise combination
# ============================================================================

def _check_same_dimension(u: MatrixView, v: MatrixView, operation: str) -> int:
    if u.dimension() != v.dimension():
        raise DimensionMismatchError(
            f"cannot {operation} views of dimension {u.dimension()} and {v.dimension()}"
        )
    return u.dimension()


def add(u: MatrixView, v: MatrixView) -> MatrixView:
    """Cell-wise ``u + v`` into a new grid, returned as a zero-offset view."""

    _check_same_dimension(u, v, "add")
    return MatrixView.full(np.add(u.block(), v.block()))


def subtract(u: MatrixView, v: MatrixView) -> MatrixView:
    """Cell-wise ``u - v`` into a new grid, returned as a zero-offset view."""

    _check_same_dimension(u, v, "subtract")
    return MatrixView.full(np.subtract(u.block(), v.block()))


# ============================================================================
# Cubic base case
# ============================================================================

def naive_multiply_views(u: MatrixView, v: MatrixView) -> MatrixView:
    """Cubic product of two equally sized views.

    Each output cell accumulates ``sum_k u[i, k] * v[k, j]``. The sum is
    built one ``k`` term at a time as the outer product of column ``k`` of
    ``u`` with row ``k`` of ``v``, which performs the same ``d^3`` scalar
    multiplications as the triple loop.

    Parameters
    ----------
    u, v:
        Views of equal dimension ``d``.

    Returns
    -------
    MatrixView
        Zero-offset view over a new ``d x d`` grid.
    """

    dim = _check_same_dimension(u, v, "multiply")
    left = u.block()
    right = v.block()

    product = np.zeros((dim, dim), dtype=np.result_type(left.dtype, right.dtype))
    for k in range(dim):
        product += np.outer(left[:, k], right[k, :])
    return MatrixView.full(product)


# ============================================================================
# Recursive engine
# ============================================================================

@dataclass
class EngineStats:
    """Counters collected over one top-level multiplication."""

    splits: int = 0
    base_case_calls: int = 0
    max_depth: int = 0

    def reset(self) -> None:
        self.splits = 0
        self.base_case_calls = 0
        self.max_depth = 0


class StrassenEngine:
    """Recursive Strassen multiplier with a cubic base case.

    The engine holds no state that influences results; ``stats`` only
    counts work for reporting.
    """

    def __init__(self, config: Optional[StrassenConfig] = None) -> None:
        self.config = config if config is not None else StrassenConfig()
        self.stats = EngineStats()

    @property
    def threshold(self) -> int:
        return self.config.threshold

    def multiply_recursive(self, a: MatrixView, b: MatrixView, depth: int = 0) -> MatrixView:
        """Multiply two views of equal power-of-two dimension.

        Parameters
        ----------
        a, b:
            Operand views. Their dimension must be a power of two whenever
            it exceeds the threshold.
        depth:
            Recursion depth, used for statistics only.

        Returns
        -------
        MatrixView
            Zero-offset view over a newly allocated product grid.
        """

        dim = _check_same_dimension(a, b, "multiply")
        self.stats.max_depth = max(self.stats.max_depth, depth)

        if dim <= self.threshold:
            self.stats.base_case_calls += 1
            return naive_multiply_views(a, b)

        if dim % 2 != 0:
            raise InvalidDimensionError(
                f"dimension {dim} cannot be halved down to threshold {self.threshold}"
            )

        self.stats.splits += 1
        logger.debug("Splitting %dx%d operands at depth %d", dim, dim, depth)

        # A = | a  b |    B = | e  f |
        #     | c  d |        | g  h |
        qa, qb, qc, qd = a.quadrants()
        qe, qf, qg, qh = b.quadrants()

        f_minus_h = subtract(qf, qh)
        a_plus_b = add(qa, qb)
        c_plus_d = add(qc, qd)
        g_minus_e = subtract(qg, qe)
        a_plus_d = add(qa, qd)
        e_plus_h = add(qe, qh)
        b_minus_d = subtract(qb, qd)
        g_plus_h = add(qg, qh)
        a_minus_c = subtract(qa, qc)
        e_plus_f = add(qe, qf)

        child = depth + 1
        p1 = self.multiply_recursive(qa, f_minus_h, child)
        p2 = self.multiply_recursive(a_plus_b, qh, child)
        p3 = self.multiply_recursive(c_plus_d, qe, child)
        p4 = self.multiply_recursive(qd, g_minus_e, child)
        p5 = self.multiply_recursive(a_plus_d, e_plus_h, child)
        p6 = self.multiply_recursive(b_minus_d, g_plus_h, child)
        p7 = self.multiply_recursive(a_minus_c, e_plus_f, child)

        top_left = add(subtract(add(p5, p4), p2), p6)
        top_right = add(p1, p2)
        bottom_left = add(p3, p4)
        bottom_right = subtract(subtract(add(p5, p1), p3), p7)

        return assemble_quadrants(top_left, top_right, bottom_left, bottom_right)


def assemble_quadrants(
    top_left: MatrixView,
    top_right: MatrixView,
    bottom_left: MatrixView,
    bottom_right: MatrixView,
) -> MatrixView:
    """Copy four equal zero-offset quadrants into a new grid of twice their size."""

    half = top_left.dimension()
    for part in (top_right, bottom_left, bottom_right):
        _check_same_dimension(top_left, part, "assemble")

    dim = 2 * half
    result = np.empty((dim, dim), dtype=top_left.dtype)
    result[:half, :half] = top_left.block()
    result[:half, half:] = top_right.block()
    result[half:, :half] = bottom_left.block()
    result[half:, half:] = bottom_right.block()
    return MatrixView.full(result)


# ============================================================================
# Entry point
# ============================================================================

def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def _as_grid(matrix: GridLike, dtype: np.dtype, name: str) -> IntArray:
    """Convert ``matrix`` to a square power-of-two grid of ``dtype``.

    Shape and entries are checked before the cast, so no value is ever
    truncated or wrapped on the way in.

    Raises
    ------
    InvalidDimensionError
        If the input is ragged, not 2-D, not square, or its side is not a
        positive power of two.
    InvalidEntryError
        If the entries are not integers or fall outside the range of
        ``dtype``.
    """

    try:
        grid = np.asarray(matrix)
    except ValueError as exc:
        raise InvalidDimensionError(f"{name} is not a rectangular integer grid: {exc}") from exc

    if grid.ndim != 2:
        raise InvalidDimensionError(f"{name} must be 2D, got {grid.ndim} dimension(s)")
    rows, cols = grid.shape
    if rows != cols:
        raise InvalidDimensionError(f"{name} must be square, got shape {grid.shape}")
    if not is_power_of_two(rows):
        raise InvalidDimensionError(f"{name} side length must be a positive power of two, got {rows}")

    if grid.dtype.kind not in ("i", "u"):
        raise InvalidEntryError(
            f"{name} must hold integers representable as {dtype}, got dtype {grid.dtype}"
        )
    bounds = np.iinfo(dtype)
    low, high = int(grid.min()), int(grid.max())
    if low < bounds.min or high > bounds.max:
        raise InvalidEntryError(
            f"{name} has entries in [{low}, {high}], outside the {dtype} range [{bounds.min}, {bounds.max}]"
        )
    return grid.astype(dtype, copy=False)


def strassen_multiply(
    a: GridLike,
    b: GridLike,
    config: Optional[StrassenConfig] = None,
    engine: Optional[StrassenEngine] = None,
) -> IntArray:
    """Compute ``C = A @ B`` with Strassen's algorithm.

    Parameters
    ----------
    a, b:
        Square matrices of equal side ``n``, a power of two. Arrays or
        nested sequences of ints; every entry must fit the configured dtype.
    config:
        Engine configuration; defaults to threshold 64 and ``int32``.
        Ignored when ``engine`` is given.
    engine:
        Optional engine to run on, e.g. to inspect ``engine.stats``
        afterwards. Its statistics are reset before the call.

    Returns
    -------
    ndarray
        New ``n x n`` product grid.

    Raises
    ------
    InvalidDimensionError
        If either input is not square or its side is not a positive power
        of two.
    DimensionMismatchError
        If ``a`` and ``b`` have different sizes.
    InvalidEntryError
        If an entry is not an integer or does not fit the configured dtype.
    """

    if engine is None:
        engine = StrassenEngine(config)
    dtype = engine.config.numpy_dtype

    grid_a = _as_grid(a, dtype, "a")
    grid_b = _as_grid(b, dtype, "b")
    if grid_a.shape != grid_b.shape:
        raise DimensionMismatchError(
            f"operands must have the same size: a{grid_a.shape}, b{grid_b.shape}"
        )

    engine.stats.reset()
    n = grid_a.shape[0]
    logger.debug("Multiplying %dx%d matrices (threshold=%d, dtype=%s)", n, n, engine.threshold, dtype)

    product = engine.multiply_recursive(MatrixView.full(grid_a), MatrixView.full(grid_b))
    logger.debug(
        "Finished %dx%d product: %d splits, %d base-case blocks",
        n,
        n,
        engine.stats.splits,
        engine.stats.base_case_calls,
    )
    return product.data


def _self_test() -> None:
    """Small internal self-test against NumPy's matmul."""

    a = [[1, 4], [3, 2]]
    b = [[7, 5], [9, 8]]
    expected = np.array([[43, 37], [39, 31]])
    assert np.array_equal(strassen_multiply(a, b, StrassenConfig(threshold=1)), expected)

    rng = np.random.default_rng(0)
    x = rng.integers(0, 100, size=(32, 32), dtype=np.int32)
    y = rng.integers(0, 100, size=(32, 32), dtype=np.int32)
    got = strassen_multiply(x, y, StrassenConfig(threshold=4))
    assert np.array_equal(got, x @ y), "Strassen mismatch against NumPy matmul"


if __name__ == "__main__":  # pragma: no cover - manual quick check
    _self_test()
