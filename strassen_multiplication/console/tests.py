"""Tests for matrix text parsing, formatting and the command-line runner."""

from __future__ import annotations

import contextlib
import csv
import io
import tempfile
from pathlib import Path

import numpy as np
import pytest

from strassen_multiplication.common.config import StrassenConfig
from strassen_multiplication.console.cli import build_parser, main, run_from_stream
from strassen_multiplication.console.matrix_io import MatrixParseError, format_matrix, parse_matrices

EXAMPLE_INPUT = """2
1 4
3 2
7 5
9 8
"""


def test_parse_example() -> None:
    n, a, b = parse_matrices(EXAMPLE_INPUT)
    assert n == 2
    assert a.dtype == np.int32
    assert np.array_equal(a, [[1, 4], [3, 2]])
    assert np.array_equal(b, [[7, 5], [9, 8]])


def test_parse_ignores_line_layout() -> None:
    n, a, b = parse_matrices("1 5 6")
    assert n == 1
    assert a[0, 0] == 5 and b[0, 0] == 6


@pytest.mark.parametrize(
    "text",
    [
        "",
        "two 1 2 3 4 5 6 7 8",
        "0",
        "-2",
        "2 1 4 3 2 7 5 9",
        "2 1 4 3 2 7 5 9 8 10",
        "2 1 4 3 x 7 5 9 8",
        "1 5 99999999999",
    ],
)
def test_parse_rejects_malformed_input(text: str) -> None:
    with pytest.raises(MatrixParseError):
        parse_matrices(text)


def test_format_matrix() -> None:
    assert format_matrix(np.array([[43, 37], [39, 31]])) == "43 37\n39 31"
    assert format_matrix(np.array([[-1]])) == "-1"


def test_run_from_stream() -> None:
    out = io.StringIO()
    run_from_stream(io.StringIO(EXAMPLE_INPUT), out, StrassenConfig(threshold=1))
    assert out.getvalue() == "43 37\n39 31\n"


def test_cli_run_from_file() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "input.txt"
        path.write_text(EXAMPLE_INPUT, encoding="utf-8")

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = main(["run", "--input", str(path), "--threshold", "1"])

    assert status == 0
    assert out.getvalue() == "43 37\n39 31\n"


def test_cli_run_rejects_non_power_of_two() -> None:
    values = " ".join(["1"] * 18)
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "input.txt"
        path.write_text(f"3 {values}", encoding="utf-8")

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = main(["run", "--input", str(path)])

    assert status == 1
    assert out.getvalue() == ""


def test_cli_run_rejects_zero_threshold() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "input.txt"
        path.write_text(EXAMPLE_INPUT, encoding="utf-8")

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            status = main(["run", "--input", str(path), "--threshold", "0"])

    assert status == 1
    assert out.getvalue() == ""


@pytest.mark.parametrize(
    "extra",
    [
        ["--threshold", "0"],
        ["--trials", "0"],
        ["--sizes", "3"],
    ],
)
def test_cli_benchmark_rejects_bad_arguments(extra) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        status = main(["benchmark", "--sizes", "4", "--trials", "1", "--output-dir", tmp] + extra)
        assert status == 1
        assert not (Path(tmp) / "strassen_benchmark.csv").exists()


def test_cli_benchmark_writes_results() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        status = main(
            [
                "benchmark",
                "--sizes", "4", "8",
                "--trials", "1",
                "--threshold", "2",
                "--methods", "naive", "strassen",
                "--output-dir", tmp,
            ]
        )
        assert status == 0
        with (Path(tmp) / "strassen_benchmark.csv").open(newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

    assert [(r["method"], r["n"]) for r in rows] == [
        ("naive", "4"),
        ("strassen", "4"),
        ("naive", "8"),
        ("strassen", "8"),
    ]
    assert all(r["mismatches"] == "0" for r in rows)


def test_parser_requires_command() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(pytest.main([__file__]))
