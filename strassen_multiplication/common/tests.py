"""Sanity checks for the shared configuration, metrics, timing and dataset helpers."""

from __future__ import annotations

import json
import logging
import tempfile
from pathlib import Path

import numpy as np
import pytest

from strassen_multiplication.common.config import BenchmarkConfig, MethodKind, StrassenConfig
from strassen_multiplication.common.datasets import (
    IntegerMatrixSpec,
    identity_matrix,
    random_integer_matrix,
    random_pair,
)
from strassen_multiplication.common.logging_utils import append_jsonl, get_logger, set_verbosity
from strassen_multiplication.common.metrics import (
    count_mismatches,
    max_abs_difference,
    naive_multiplication_count,
    strassen_multiplication_count,
)
from strassen_multiplication.common.timing import RepeatedTiming, time_repeated


def test_strassen_config_validation() -> None:
    config = StrassenConfig()
    assert config.threshold == 64
    assert config.numpy_dtype == np.int32

    with pytest.raises(ValueError):
        StrassenConfig(threshold=0)
    with pytest.raises(ValueError):
        StrassenConfig(dtype="float64")
    with pytest.raises(ValueError):
        StrassenConfig(dtype="uint32")


def test_benchmark_config_defaults() -> None:
    config = BenchmarkConfig()
    assert config.sizes == [64, 128, 256, 512]
    assert config.methods == [MethodKind.NAIVE, MethodKind.STRASSEN, MethodKind.NUMPY]
    assert MethodKind("strassen") is MethodKind.STRASSEN

    coerced = BenchmarkConfig(sizes=[4], methods=["numpy", "naive"])
    assert coerced.methods == [MethodKind.NUMPY, MethodKind.NAIVE]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"num_trials": 0},
        {"threshold": 0},
        {"low": 5, "high": 5},
        {"sizes": [4, 6]},
        {"sizes": [0]},
        {"methods": ["cubic"]},
    ],
)
def test_benchmark_config_validation(kwargs) -> None:
    with pytest.raises(ValueError):
        BenchmarkConfig(**kwargs)


def test_random_matrices_are_reproducible() -> None:
    spec = IntegerMatrixSpec(n=8, low=0, high=100, seed=7)
    first = random_integer_matrix(spec)
    second = random_integer_matrix(spec)

    assert first.shape == (8, 8)
    assert first.dtype == np.int32
    assert np.array_equal(first, second)
    assert first.min() >= 0 and first.max() < 100

    a, b = random_pair(8, seed=7)
    assert not np.array_equal(a, b)

    with pytest.raises(ValueError):
        random_integer_matrix(IntegerMatrixSpec(n=0))
    with pytest.raises(ValueError):
        random_integer_matrix(IntegerMatrixSpec(n=2, low=5, high=5))


def test_mismatch_metrics() -> None:
    expected = identity_matrix(4)
    actual = expected.copy()
    assert count_mismatches(expected, actual) == 0
    assert max_abs_difference(expected, actual) == 0

    actual[1, 2] = -3
    actual[3, 3] = 5
    assert count_mismatches(expected, actual) == 2
    assert max_abs_difference(expected, actual) == 4

    with pytest.raises(ValueError):
        count_mismatches(expected, np.zeros((2, 2)))


def test_multiplication_counts() -> None:
    assert naive_multiplication_count(128) == 128 ** 3
    assert strassen_multiplication_count(64, 64) == 64 ** 3
    assert strassen_multiplication_count(128, 64) == 7 * 64 ** 3
    assert strassen_multiplication_count(1024, 64) == 7 ** 4 * 64 ** 3
    assert strassen_multiplication_count(2, 1) == 7
    assert strassen_multiplication_count(1024, 64) < naive_multiplication_count(1024)


def test_timing_helpers() -> None:
    timing = RepeatedTiming()
    assert timing.mean_seconds == 0.0
    with timing.measure():
        sum(range(1000))
    assert len(timing.samples) == 1
    assert timing.samples[0] >= 0.0

    calls = []
    value, repeated = time_repeated(lambda: calls.append(1) or len(calls), repeats=3)
    assert value == 3
    assert len(repeated.samples) == 3
    assert repeated.min_seconds <= repeated.mean_seconds

    with pytest.raises(ValueError):
        time_repeated(lambda: None, repeats=0)


def test_logger_hierarchy() -> None:
    project = get_logger()
    child = get_logger("strassen_multiplication.strassen.core")
    assert len(project.handlers) == 1
    assert not child.handlers

    set_verbosity(verbose=True)
    assert project.level == logging.DEBUG
    set_verbosity(verbose=False)
    assert project.level == logging.INFO


def test_append_jsonl() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "nested" / "runs.jsonl"
        append_jsonl(path, {"n": 2})
        append_jsonl(path, {"n": 4, "logged_at": "fixed"})

        lines = path.read_text(encoding="utf-8").splitlines()
        records = [json.loads(line) for line in lines]
        assert [r["n"] for r in records] == [2, 4]
        assert "logged_at" in records[0]
        assert records[1]["logged_at"] == "fixed"


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(pytest.main([__file__]))
