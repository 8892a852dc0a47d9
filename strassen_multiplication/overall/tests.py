"""Checks for the reference multipliers and the benchmark runner."""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import numpy as np
import pytest

from strassen_multiplication.common.config import BenchmarkConfig, MethodKind
from strassen_multiplication.common.datasets import random_pair
from strassen_multiplication.overall.baselines import naive_multiply, numpy_multiply
from strassen_multiplication.overall.experiments import evaluate_methods, run_benchmark


def test_baselines_agree() -> None:
    a, b = random_pair(16, seed=1, low=-100, high=100)
    expected = a.astype(np.int64) @ b.astype(np.int64)

    assert np.array_equal(naive_multiply(a, b), expected)
    assert np.array_equal(numpy_multiply(a, b), expected)
    assert naive_multiply(a, b).dtype == np.int32


def test_baselines_validate_shapes() -> None:
    with pytest.raises(ValueError):
        naive_multiply(np.ones((2, 3), dtype=np.int32), np.ones((3, 2), dtype=np.int32))
    with pytest.raises(ValueError):
        numpy_multiply(np.ones((2, 2), dtype=np.int32), np.ones((4, 4), dtype=np.int32))


def test_evaluate_methods_reports_exact_agreement() -> None:
    config = BenchmarkConfig(sizes=[8], num_trials=2, threshold=2)
    results = evaluate_methods(8, config, seed=3)

    assert [r.method for r in results] == [m.value for m in config.methods]
    for res in results:
        assert res.mismatches == 0
        assert res.max_abs_diff == 0
        assert res.trials == 2
        assert res.mean_ms >= 0.0
    by_method = {r.method: r for r in results}
    assert by_method["naive"].scalar_mults == 8 ** 3
    assert by_method["strassen"].scalar_mults == 7 ** 2 * 2 ** 3


def test_speedup_without_naive_timing_is_zero() -> None:
    config = BenchmarkConfig(sizes=[4], num_trials=1, threshold=2, methods=[MethodKind.STRASSEN])
    (result,) = evaluate_methods(4, config, seed=0)
    assert result.speedup_vs_naive == 0.0
    assert result.mismatches == 0


def test_run_benchmark_writes_outputs() -> None:
    config = BenchmarkConfig(sizes=[2, 4], num_trials=1, threshold=1)
    with tempfile.TemporaryDirectory() as tmp:
        out_dir = Path(tmp)
        results = run_benchmark(config, out_dir)

        assert len(results) == 2 * len(config.methods)
        csv_text = (out_dir / "strassen_benchmark.csv").read_text(encoding="utf-8")
        assert csv_text.splitlines()[0].startswith("method,n,threshold")

        records = [json.loads(line) for line in (out_dir / "runs.jsonl").read_text(encoding="utf-8").splitlines()]
        assert len(records) == 1
        assert records[0]["sizes"] == [2, 4]
        assert len(records[0]["results"]) == len(results)


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(pytest.main([__file__]))
