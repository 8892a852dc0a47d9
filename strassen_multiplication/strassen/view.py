"""Zero-copy square windows onto integer grids.

A :class:`MatrixView` names a ``dim x dim`` sub-block of a larger backing
grid by its row/column offset. Quadrants of a view share the backing grid,
so partitioning a matrix for the recursion never copies data. Views are
read-only: every arithmetic result is written into a freshly allocated
grid by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from strassen_multiplication.strassen.errors import InvalidDimensionError

IntArray = NDArray[np.integer]


class Quadrant(str, Enum):
    """The four equal sub-blocks of a square matrix."""

    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


# (row shift, column shift) in units of half the dimension.
_QUADRANT_SHIFTS = {
    Quadrant.TOP_LEFT: (0, 0),
    Quadrant.TOP_RIGHT: (0, 1),
    Quadrant.BOTTOM_LEFT: (1, 0),
    Quadrant.BOTTOM_RIGHT: (1, 1),
}


@dataclass(frozen=True, eq=False)
class MatrixView:
    """Read-only square window onto a backing grid.

    Attributes
    ----------
    data : ndarray
        Backing 2-D integer grid, shared with other views.
    row, col : int
        Offset of the window's top-left cell inside ``data``.
    dim : int
        Side length of the window. ``row + dim`` and ``col + dim`` must not
        exceed the grid's bounds.
    """

    data: IntArray
    row: int
    col: int
    dim: int

    @classmethod
    def full(cls, grid: IntArray) -> "MatrixView":
        """Zero-offset view covering the whole of a square grid."""

        return cls(grid, 0, 0, int(grid.shape[0]))

    def dimension(self) -> int:
        return self.dim

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    def get(self, row: int, col: int) -> int:
        """Value at ``(row, col)`` relative to the window; not bounds checked."""

        return int(self.data[self.row + row, self.col + col])

    def quadrant(self, which: Quadrant) -> "MatrixView":
        """View of one quadrant over the same backing grid."""

        if self.dim % 2 != 0:
            raise InvalidDimensionError(f"cannot split a view of odd dimension {self.dim}")
        half = self.dim // 2
        row_shift, col_shift = _QUADRANT_SHIFTS[Quadrant(which)]
        return MatrixView(self.data, self.row + row_shift * half, self.col + col_shift * half, half)

    def quadrants(self) -> Tuple["MatrixView", "MatrixView", "MatrixView", "MatrixView"]:
        """All four quadrants in reading order (top-left, top-right, bottom-left, bottom-right)."""

        return (
            self.quadrant(Quadrant.TOP_LEFT),
            self.quadrant(Quadrant.TOP_RIGHT),
            self.quadrant(Quadrant.BOTTOM_LEFT),
            self.quadrant(Quadrant.BOTTOM_RIGHT),
        )

    def block(self) -> IntArray:
        """NumPy slice of the window; shares memory with ``data``."""

        return self.data[self.row : self.row + self.dim, self.col : self.col + self.dim]

    def to_array(self) -> IntArray:
        """Owned copy of the window's values."""

        return self.block().copy()
