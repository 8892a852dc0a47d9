"""Text format for matrix pairs and products.

Input is whitespace-separated integers: the side length ``n`` followed by
the ``n * n`` entries of the first matrix and then the second, both in
row-major order. For example::

    2
    1 4
    3 2
    7 5
    9 8

Output is one matrix row per line with space-separated values::

    43 37
    39 31
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np
from numpy.typing import NDArray

IntArray = NDArray[np.integer]


class MatrixParseError(ValueError):
    """Input text does not describe ``n`` followed by two ``n x n`` matrices."""


def _parse_int(token: str, position: int) -> int:
    try:
        return int(token)
    except ValueError as exc:
        raise MatrixParseError(f"token {position} is not an integer: {token!r}") from exc


def parse_matrices(text: str, dtype: str = "int32") -> Tuple[int, IntArray, IntArray]:
    """Parse ``n`` and two ``n x n`` matrices from text.

    Parameters
    ----------
    text:
        Whitespace-separated integers.
    dtype:
        Integer dtype of the returned grids.

    Returns
    -------
    (n, a, b)
        Side length and the two matrices.

    Raises
    ------
    MatrixParseError
        If a token is not an integer, ``n`` is not positive, or the number
        of entries is not exactly ``2 * n * n``.
    """

    tokens = text.split()
    if not tokens:
        raise MatrixParseError("input is empty")

    n = _parse_int(tokens[0], 0)
    if n <= 0:
        raise MatrixParseError(f"matrix size must be positive, got {n}")

    expected = 2 * n * n
    entries = tokens[1:]
    if len(entries) != expected:
        raise MatrixParseError(f"expected {expected} entries for two {n}x{n} matrices, got {len(entries)}")

    values: List[int] = [_parse_int(tok, i + 1) for i, tok in enumerate(entries)]
    bounds = np.iinfo(dtype)
    for value in values:
        if not bounds.min <= value <= bounds.max:
            raise MatrixParseError(f"entry {value} does not fit in {dtype}")

    flat = np.array(values, dtype=dtype)
    a = flat[: n * n].reshape(n, n)
    b = flat[n * n :].reshape(n, n)
    return n, a, b


def format_matrix(grid: IntArray) -> str:
    """Render a matrix row-major, space-separated, one row per line."""

    return "\n".join(" ".join(str(int(v)) for v in row) for row in np.asarray(grid))
