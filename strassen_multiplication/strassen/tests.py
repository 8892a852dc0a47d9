"""Tests for the Strassen engine, its views and its element-wise helpers.

Plain ``test_*`` functions, runnable with pytest or directly as a module.
"""

from __future__ import annotations

import numpy as np
import pytest

from strassen_multiplication.common.config import StrassenConfig
from strassen_multiplication.common.datasets import identity_matrix, random_pair, zero_matrix
from strassen_multiplication.overall.baselines import naive_multiply
from strassen_multiplication.strassen.core import (
    StrassenEngine,
    add,
    assemble_quadrants,
    is_power_of_two,
    naive_multiply_views,
    strassen_multiply,
    subtract,
)
from strassen_multiplication.strassen.errors import (
    DimensionMismatchError,
    InvalidDimensionError,
    InvalidEntryError,
)
from strassen_multiplication.strassen.view import MatrixView, Quadrant


# ============================================================================
# MatrixView
# ============================================================================

def test_view_reads_through_offsets() -> None:
    grid = np.arange(16, dtype=np.int32).reshape(4, 4)
    view = MatrixView(grid, 2, 1, 2)

    assert view.dimension() == 2
    assert view.get(0, 0) == grid[2, 1]
    assert view.get(1, 1) == grid[3, 2]


def test_quadrants_share_backing_grid() -> None:
    grid = np.arange(16, dtype=np.int32).reshape(4, 4)
    full = MatrixView.full(grid)

    expected = {
        Quadrant.TOP_LEFT: grid[:2, :2],
        Quadrant.TOP_RIGHT: grid[:2, 2:],
        Quadrant.BOTTOM_LEFT: grid[2:, :2],
        Quadrant.BOTTOM_RIGHT: grid[2:, 2:],
    }
    for which, block in expected.items():
        q = full.quadrant(which)
        assert q.dimension() == 2
        assert q.data is grid
        assert np.array_equal(q.block(), block)
        assert np.shares_memory(q.block(), grid)

    # Nested quadrant: bottom-right of top-right is the single cell (1, 3).
    cell = full.quadrant(Quadrant.TOP_RIGHT).quadrant(Quadrant.BOTTOM_RIGHT)
    assert (cell.row, cell.col, cell.dim) == (1, 3, 1)
    assert cell.get(0, 0) == grid[1, 3]


def test_quadrant_of_odd_view_rejected() -> None:
    grid = np.zeros((3, 3), dtype=np.int32)
    with pytest.raises(InvalidDimensionError):
        MatrixView.full(grid).quadrant(Quadrant.TOP_LEFT)


def test_to_array_is_a_copy() -> None:
    grid = np.ones((2, 2), dtype=np.int32)
    copy = MatrixView.full(grid).to_array()
    copy[0, 0] = 7
    assert grid[0, 0] == 1


# ============================================================================
# Element-wise combination and base case
# ============================================================================

def test_add_and_subtract_allocate_new_grids() -> None:
    grid = np.arange(16, dtype=np.int32).reshape(4, 4)
    full = MatrixView.full(grid)
    left = full.quadrant(Quadrant.TOP_LEFT)
    right = full.quadrant(Quadrant.BOTTOM_RIGHT)

    total = add(left, right)
    diff = subtract(left, right)

    assert (total.row, total.col, total.dim) == (0, 0, 2)
    assert np.array_equal(total.data, grid[:2, :2] + grid[2:, 2:])
    assert np.array_equal(diff.data, grid[:2, :2] - grid[2:, 2:])
    assert not np.shares_memory(total.data, grid)
    assert np.array_equal(grid, np.arange(16, dtype=np.int32).reshape(4, 4))


def test_elementwise_dimension_mismatch() -> None:
    small = MatrixView.full(np.zeros((2, 2), dtype=np.int32))
    large = MatrixView.full(np.zeros((4, 4), dtype=np.int32))
    with pytest.raises(DimensionMismatchError):
        add(small, large)
    with pytest.raises(DimensionMismatchError):
        subtract(small, large)
    with pytest.raises(DimensionMismatchError):
        naive_multiply_views(small, large)


def test_base_case_on_offset_views() -> None:
    a, b = random_pair(8, seed=3)
    va = MatrixView.full(a).quadrant(Quadrant.BOTTOM_LEFT)
    vb = MatrixView.full(b).quadrant(Quadrant.TOP_RIGHT)

    product = naive_multiply_views(va, vb)
    assert np.array_equal(product.data, a[4:, :4] @ b[:4, 4:])


def test_assemble_quadrants_places_blocks() -> None:
    parts = [MatrixView.full(np.full((2, 2), v, dtype=np.int32)) for v in (1, 2, 3, 4)]
    result = assemble_quadrants(*parts).data

    assert result.shape == (4, 4)
    assert np.all(result[:2, :2] == 1)
    assert np.all(result[:2, 2:] == 2)
    assert np.all(result[2:, :2] == 3)
    assert np.all(result[2:, 2:] == 4)


# ============================================================================
# Top-level multiplication
# ============================================================================

def test_two_by_two_example() -> None:
    a = [[1, 4], [3, 2]]
    b = [[7, 5], [9, 8]]
    expected = np.array([[43, 37], [39, 31]])

    # threshold=1 forces one Strassen split; the default goes straight to the base case.
    assert np.array_equal(strassen_multiply(a, b, StrassenConfig(threshold=1)), expected)
    assert np.array_equal(strassen_multiply(a, b), expected)


def test_single_cell() -> None:
    result = strassen_multiply([[5]], [[6]])
    assert result.shape == (1, 1)
    assert result[0, 0] == 30


@pytest.mark.parametrize(
    "n, threshold",
    [(1, 64), (2, 1), (4, 1), (8, 2), (16, 1), (32, 4), (64, 64), (128, 16), (128, 64), (256, 64)],
)
def test_matches_cubic_reference(n: int, threshold: int) -> None:
    a, b = random_pair(n, seed=n + threshold)
    expected = naive_multiply(a, b)

    result = strassen_multiply(a, b, StrassenConfig(threshold=threshold))
    assert result.dtype == np.int32
    assert np.array_equal(result, expected)
    assert np.array_equal(result, a.astype(np.int64) @ b.astype(np.int64))


@pytest.mark.parametrize("n", [512, 1024])
def test_matches_numpy_at_large_sizes(n: int) -> None:
    a, b = random_pair(n, seed=n)
    result = strassen_multiply(a, b)

    assert np.array_equal(result, a.astype(np.int64) @ b.astype(np.int64))


def test_threshold_handoff_counts() -> None:
    engine = StrassenEngine(StrassenConfig(threshold=64))

    a, b = random_pair(64, seed=11)
    assert np.array_equal(strassen_multiply(a, b, engine=engine), naive_multiply(a, b))
    assert (engine.stats.splits, engine.stats.base_case_calls) == (0, 1)

    a, b = random_pair(128, seed=12)
    assert np.array_equal(strassen_multiply(a, b, engine=engine), naive_multiply(a, b))
    assert (engine.stats.splits, engine.stats.base_case_calls) == (1, 7)
    assert engine.stats.max_depth == 1


def test_recursion_depth_and_block_count() -> None:
    engine = StrassenEngine(StrassenConfig(threshold=1))
    a, b = random_pair(16, seed=5)
    strassen_multiply(a, b, engine=engine)

    assert engine.stats.max_depth == 4
    assert engine.stats.base_case_calls == 7 ** 4
    assert engine.stats.splits == 1 + 7 + 49 + 343


def test_identity_law() -> None:
    a, _ = random_pair(32, seed=21)
    eye = identity_matrix(32)
    config = StrassenConfig(threshold=4)

    assert np.array_equal(strassen_multiply(a, eye, config), a)
    assert np.array_equal(strassen_multiply(eye, a, config), a)


def test_zero_law() -> None:
    a, _ = random_pair(32, seed=22, low=-100, high=100)
    zero = zero_matrix(32)
    assert np.array_equal(strassen_multiply(a, zero, StrassenConfig(threshold=4)), zero)


def test_distributivity() -> None:
    config = StrassenConfig(threshold=4)
    a, b = random_pair(32, seed=31, low=-50, high=50)
    c, _ = random_pair(32, seed=32, low=-50, high=50)

    left = strassen_multiply(a, b + c, config)
    right = strassen_multiply(a, b, config) + strassen_multiply(a, c, config)
    assert np.array_equal(left, right)


def test_inputs_are_not_modified_or_aliased() -> None:
    a, b = random_pair(16, seed=41)
    a_before, b_before = a.copy(), b.copy()

    result = strassen_multiply(a, b, StrassenConfig(threshold=2))
    assert np.array_equal(a, a_before)
    assert np.array_equal(b, b_before)
    assert not np.shares_memory(result, a)
    assert not np.shares_memory(result, b)


def test_int32_wraps_silently() -> None:
    big = np.full((4, 4), 2 ** 20, dtype=np.int32)
    result = strassen_multiply(big, big, StrassenConfig(threshold=1))

    wrapped = (big.astype(np.int64) @ big.astype(np.int64)).astype(np.int32)
    assert np.array_equal(result, wrapped)


def test_int64_dtype() -> None:
    big = np.full((4, 4), 2 ** 20, dtype=np.int64)
    result = strassen_multiply(big, big, StrassenConfig(threshold=1, dtype="int64"))

    assert result.dtype == np.int64
    assert np.all(result == 4 * 2 ** 40)


# ============================================================================
# Validation
# ============================================================================

def test_non_power_of_two_rejected() -> None:
    a = np.ones((3, 3), dtype=np.int32)
    with pytest.raises(InvalidDimensionError):
        strassen_multiply(a, a)


@pytest.mark.parametrize(
    "bad",
    [
        np.zeros((0, 0), dtype=np.int32),
        np.ones((2, 4), dtype=np.int32),
        np.ones(4, dtype=np.int32),
        [[1, 2], [3]],
    ],
)
def test_malformed_inputs_rejected(bad) -> None:
    with pytest.raises(InvalidDimensionError):
        strassen_multiply(bad, bad)


def test_size_mismatch_rejected() -> None:
    with pytest.raises(DimensionMismatchError):
        strassen_multiply(np.ones((2, 2), dtype=np.int32), np.ones((4, 4), dtype=np.int32))


def test_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        strassen_multiply(np.ones((6, 6)), np.ones((6, 6)))


def test_out_of_range_entries_rejected_not_wrapped() -> None:
    big = np.array([[2 ** 32 + 3]], dtype=np.int64)
    one = np.array([[1]], dtype=np.int64)
    with pytest.raises(InvalidEntryError):
        strassen_multiply(big, one)
    with pytest.raises(InvalidEntryError):
        strassen_multiply([[-(2 ** 31) - 1]], [[1]])

    # The same value fits once the engine runs in 64-bit.
    result = strassen_multiply(big, one, StrassenConfig(dtype="int64"))
    assert result[0, 0] == 2 ** 32 + 3


def test_int32_bounds_are_accepted() -> None:
    edge = np.array([[2 ** 31 - 1, -(2 ** 31)], [0, 1]], dtype=np.int64)
    eye = identity_matrix(2, dtype=np.int64)
    result = strassen_multiply(edge, eye, StrassenConfig(threshold=1))

    assert result.dtype == np.int32
    assert np.array_equal(result, edge)


@pytest.mark.parametrize(
    "bad",
    [
        np.array([[1.5]]),
        np.array([[2.0]]),
        np.array([[True]]),
        [["1"]],
        [[2 ** 80]],
    ],
)
def test_non_integer_entries_rejected(bad) -> None:
    with pytest.raises(InvalidEntryError):
        strassen_multiply(bad, [[2]])


def test_engine_rejects_unhalvable_views() -> None:
    engine = StrassenEngine(StrassenConfig(threshold=2))
    odd = MatrixView.full(np.ones((6, 6), dtype=np.int32))
    with pytest.raises(InvalidDimensionError):
        engine.multiply_recursive(odd, odd)


def test_is_power_of_two() -> None:
    assert [n for n in range(-2, 20) if is_power_of_two(n)] == [1, 2, 4, 8, 16]


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(pytest.main([__file__]))
