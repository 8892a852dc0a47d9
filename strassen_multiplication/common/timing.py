"""Timing utilities for benchmarks.

The engine itself never reads a clock; timing is wrapped around it here.
"""

from __future__ import annotations

import contextlib
import time
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


@dataclass
class RepeatedTiming:
    """Wall-clock samples, in seconds, of repeated runs of the same callable."""

    samples: List[float] = field(default_factory=list)

    @contextlib.contextmanager
    def measure(self) -> Iterator[None]:
        """Record the duration of the enclosed block as one more sample."""

        start = time.perf_counter()
        try:
            yield
        finally:
            self.samples.append(time.perf_counter() - start)

    @property
    def mean_seconds(self) -> float:
        if not self.samples:
            return 0.0
        return sum(self.samples) / len(self.samples)

    @property
    def min_seconds(self) -> float:
        return min(self.samples) if self.samples else 0.0


def time_repeated(func: Callable[[], T], repeats: int) -> Tuple[T, RepeatedTiming]:
    """Run ``func`` ``repeats`` times and collect one sample per run.

    Averaging over several runs smooths out one-off effects such as the
    first allocation of large grids.

    Parameters
    ----------
    func:
        Callable with no arguments.
    repeats:
        Number of runs; must be positive.

    Returns
    -------
    (result, RepeatedTiming)
        Return value of the last run and all timing samples.
    """

    if repeats <= 0:
        raise ValueError("repeats must be positive")

    timing = RepeatedTiming()
    for _ in range(repeats):
        with timing.measure():
            value = func()
    return value, timing
