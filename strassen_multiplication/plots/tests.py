"""Smoke test: benchmark CSV in, figures out."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest

from strassen_multiplication.common.config import BenchmarkConfig
from strassen_multiplication.overall.experiments import run_benchmark
from strassen_multiplication.plots.plot_benchmark import generate_all_plots


def test_generate_all_plots() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        results_dir = Path(tmp)
        run_benchmark(BenchmarkConfig(sizes=[2, 4, 8], num_trials=1, threshold=2), results_dir)

        figures = results_dir / "figures"
        generate_all_plots(results_dir, figures)
        assert sorted(p.name for p in figures.glob("*.png")) == [
            "strassen_fig1_runtime_vs_size.png",
            "strassen_fig2_speedup_vs_size.png",
            "strassen_fig3_mult_counts.png",
        ]


def test_missing_results_are_skipped() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        generate_all_plots(Path(tmp), Path(tmp) / "figures")
        assert not (Path(tmp) / "figures").exists()


if __name__ == "__main__":  # pragma: no cover - manual execution
    raise SystemExit(pytest.main([__file__]))
