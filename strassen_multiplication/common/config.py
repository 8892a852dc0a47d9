"""Configuration dataclasses for the multiplication engine and benchmarks.

These provide typed containers for parameters so that the engine, the
console runner and the benchmark scripts share a common schema.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

import numpy as np

DEFAULT_THRESHOLD = 64


class MethodKind(str, Enum):
    """Multiplication methods compared by the benchmark."""

    NAIVE = "naive"
    STRASSEN = "strassen"
    NUMPY = "numpy"


@dataclass(frozen=True)
class StrassenConfig:
    """Parameters of the recursive engine.

    Attributes
    ----------
    threshold : int
        Dimension at or below which the recursion switches to the cubic
        base case. Only affects performance, never the result.
    dtype : str
        Fixed-width signed integer type of every grid. Arithmetic wraps
        silently on overflow.
    """

    threshold: int = DEFAULT_THRESHOLD
    dtype: str = "int32"

    def __post_init__(self) -> None:
        if self.threshold < 1:
            raise ValueError("threshold must be at least 1")
        kind = np.dtype(self.dtype)
        if kind.kind != "i":
            raise ValueError(f"dtype must be a signed integer type, got {self.dtype!r}")

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.dtype)


@dataclass
class BenchmarkConfig:
    """Configuration of a naive-vs-Strassen benchmark sweep."""

    sizes: List[int] = field(default_factory=lambda: [64, 128, 256, 512])
    num_trials: int = 3
    seed: int = 0
    low: int = 0
    high: int = 100
    threshold: int = DEFAULT_THRESHOLD
    methods: List[MethodKind] = field(
        default_factory=lambda: [MethodKind.NAIVE, MethodKind.STRASSEN, MethodKind.NUMPY]
    )

    def __post_init__(self) -> None:
        if self.num_trials < 1:
            raise ValueError("num_trials must be at least 1")
        if self.threshold < 1:
            raise ValueError("threshold must be at least 1")
        if self.high <= self.low:
            raise ValueError("high must be greater than low")
        bad = [n for n in self.sizes if n <= 0 or n & (n - 1)]
        if bad:
            raise ValueError(f"benchmark sizes must be positive powers of two, got {bad}")
        self.methods = [MethodKind(m) for m in self.methods]
