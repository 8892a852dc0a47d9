"""Naive vs Strassen benchmark runner.

For every configured size, random integer matrices are generated and each
method is run ``num_trials`` times; the mean wall-clock time per method is
reported together with the speedup over the naive cubic product and a check
that every method reproduces the naive result exactly.

Outputs under the chosen results directory:
- ``strassen_benchmark.csv`` (one row per size and method)
- ``runs.jsonl`` (one record per benchmark invocation)
"""

from __future__ import annotations

import csv
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

import numpy as np
from numpy.typing import NDArray

from strassen_multiplication.common.config import BenchmarkConfig, MethodKind, StrassenConfig
from strassen_multiplication.common.datasets import random_pair
from strassen_multiplication.common.logging_utils import append_jsonl, get_logger
from strassen_multiplication.common.metrics import (
    count_mismatches,
    max_abs_difference,
    naive_multiplication_count,
    strassen_multiplication_count,
)
from strassen_multiplication.common.timing import time_repeated
from strassen_multiplication.overall.baselines import naive_multiply, numpy_multiply
from strassen_multiplication.strassen.core import StrassenEngine, strassen_multiply

logger = get_logger(__name__)

IntArray = NDArray[np.integer]

DEFAULT_RESULTS_DIR = Path("strassen_multiplication/results")


def _write_csv(path: Path, rows: List[Dict]) -> None:
    """Write rows to CSV with a header derived from the first row."""

    path.parent.mkdir(parents=True, exist_ok=True)
    if not rows:
        return
    fieldnames = list(rows[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        writer.writerows(rows)
    logger.info("Wrote %d rows to %s", len(rows), path)


@dataclass
class MethodResult:
    method: str
    n: int
    threshold: int
    trials: int
    mean_ms: float
    min_ms: float
    speedup_vs_naive: float
    scalar_mults: int
    mismatches: int
    max_abs_diff: int


def _method_runner(
    method: MethodKind, a: IntArray, b: IntArray, engine: StrassenEngine
) -> Callable[[], IntArray]:
    if method is MethodKind.NAIVE:
        return lambda: naive_multiply(a, b)
    if method is MethodKind.STRASSEN:
        return lambda: strassen_multiply(a, b, engine=engine)
    if method is MethodKind.NUMPY:
        return lambda: numpy_multiply(a, b)
    raise ValueError(f"unknown method: {method!r}")


def _scalar_mults(method: MethodKind, n: int, threshold: int) -> int:
    if method is MethodKind.STRASSEN:
        return strassen_multiplication_count(n, threshold)
    return naive_multiplication_count(n)


def evaluate_methods(n: int, config: BenchmarkConfig, seed: int) -> List[MethodResult]:
    """Time every configured method on one random ``n x n`` pair.

    The naive product is always computed once as the reference, even when
    the naive method is not among the timed methods.
    """

    a, b = random_pair(n, seed=seed, low=config.low, high=config.high)
    engine = StrassenEngine(StrassenConfig(threshold=config.threshold, dtype=str(a.dtype)))
    reference = naive_multiply(a, b)

    timings = {}
    results: Dict[MethodKind, IntArray] = {}
    for method in config.methods:
        product, timing = time_repeated(_method_runner(method, a, b, engine), config.num_trials)
        timings[method] = timing
        results[method] = product

    naive_timing = timings.get(MethodKind.NAIVE)
    out: List[MethodResult] = []
    for method in config.methods:
        timing = timings[method]
        if naive_timing is not None and timing.mean_seconds > 0:
            speedup = naive_timing.mean_seconds / timing.mean_seconds
        else:
            speedup = 0.0
        mismatches = count_mismatches(reference, results[method])
        if mismatches:
            logger.warning("%s disagrees with the naive product in %d cells (n=%d)", method.value, mismatches, n)
        out.append(
            MethodResult(
                method=method.value,
                n=n,
                threshold=config.threshold,
                trials=config.num_trials,
                mean_ms=timing.mean_seconds * 1000.0,
                min_ms=timing.min_seconds * 1000.0,
                speedup_vs_naive=speedup,
                scalar_mults=_scalar_mults(method, n, config.threshold),
                mismatches=mismatches,
                max_abs_diff=max_abs_difference(reference, results[method]),
            )
        )
    return out


def run_benchmark(config: Optional[BenchmarkConfig] = None, output_dir: Optional[Path] = None) -> List[MethodResult]:
    """Run the full size sweep and persist CSV and JSONL outputs."""

    config = BenchmarkConfig() if config is None else config
    base_dir = DEFAULT_RESULTS_DIR if output_dir is None else Path(output_dir)
    base_dir.mkdir(parents=True, exist_ok=True)

    logger.info("=" * 60)
    logger.info("Running naive vs Strassen benchmark (threshold=%d)", config.threshold)
    logger.info("=" * 60)

    rng = np.random.default_rng(config.seed)
    all_results: List[MethodResult] = []
    for n in config.sizes:
        results = evaluate_methods(n, config, seed=int(rng.integers(0, 1_000_000)))
        logger.info("For multiplying matrices of size %dx%d", n, n)
        for res in results:
            logger.info("  %-8s takes %10.2f ms (speedup %.2fx)", res.method, res.mean_ms, res.speedup_vs_naive)
        all_results.extend(results)

    _write_csv(base_dir / "strassen_benchmark.csv", [asdict(r) for r in all_results])
    append_jsonl(
        base_dir / "runs.jsonl",
        {
            "sizes": list(config.sizes),
            "num_trials": config.num_trials,
            "seed": config.seed,
            "threshold": config.threshold,
            "methods": [m.value for m in config.methods],
            "results": [asdict(r) for r in all_results],
        },
    )
    return all_results


if __name__ == "__main__":  # pragma: no cover - manual execution
    run_benchmark()
