"""Plots for the naive vs Strassen benchmark.

Generates figures from ``strassen_benchmark.csv``:
- runtime vs matrix size (log-log, one line per method)
- speedup over the naive product vs matrix size
- scalar multiplication counts vs matrix size
"""

from __future__ import annotations

import argparse
from pathlib import Path

import matplotlib.pyplot as plt
import matplotlib.ticker as ticker
import pandas as pd

plt.rcParams.update({
    "font.size": 11,
    "axes.titlesize": 13,
    "axes.labelsize": 12,
    "legend.fontsize": 9,
    "lines.linewidth": 2,
    "lines.markersize": 7,
})

METHOD_COLORS = {
    "naive": "#7f8c8d",
    "strassen": "#27ae60",
    "numpy": "#2c3e50",
}

METHOD_MARKERS = {
    "naive": "^",
    "strassen": "D",
    "numpy": "X",
}


def _save_figure(fig: plt.Figure, path: Path) -> None:
    """Save figure with tight layout."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"Saved: {path}")


def _plot_metric_vs_size(df: pd.DataFrame, column: str, ylabel: str, title: str, path: Path, logy: bool = True) -> None:
    agg = df.groupby(["method", "n"])[column].mean().reset_index()

    fig, ax = plt.subplots(figsize=(9, 6))
    for method, group in agg.groupby("method"):
        group = group.sort_values("n")
        ax.plot(
            group["n"],
            group[column],
            color=METHOD_COLORS.get(method, "gray"),
            marker=METHOD_MARKERS.get(method, "o"),
            label=method,
        )

    ax.set_xscale("log", base=2)
    if logy:
        ax.set_yscale("log")
    ax.xaxis.set_major_formatter(ticker.FuncFormatter(lambda x, p: f"{int(x)}"))
    ax.set_xlabel("Matrix Size N")
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(True, alpha=0.3, which="both")
    ax.legend(loc="best", framealpha=0.9)
    _save_figure(fig, path)


def plot_runtime_vs_size(csv_path: Path, output_path: Path) -> None:
    df = pd.read_csv(csv_path)
    _plot_metric_vs_size(df, "mean_ms", "Mean runtime (ms)", "Runtime vs Matrix Size", output_path)


def plot_speedup_vs_size(csv_path: Path, output_path: Path) -> None:
    df = pd.read_csv(csv_path)
    df = df[df["speedup_vs_naive"] > 0]
    if df.empty:
        print(f"Skipping speedup plot: no naive timings in {csv_path}")
        return
    _plot_metric_vs_size(
        df, "speedup_vs_naive", "Speedup (vs naive)", "Speedup vs Matrix Size", output_path, logy=False
    )


def plot_mult_counts(csv_path: Path, output_path: Path) -> None:
    """Scalar multiplications per method; shows the n^3 vs n^log2(7) gap."""
    df = pd.read_csv(csv_path)
    df = df[df["method"] != "numpy"]
    _plot_metric_vs_size(df, "scalar_mults", "Scalar multiplications", "Multiplication Count vs Size", output_path)


def generate_all_plots(results_dir: Path, output_dir: Path) -> None:
    csv_path = results_dir / "strassen_benchmark.csv"
    if not csv_path.exists():
        print(f"Skipping: {csv_path} not found")
        return

    plot_runtime_vs_size(csv_path, output_dir / "strassen_fig1_runtime_vs_size.png")
    plot_speedup_vs_size(csv_path, output_dir / "strassen_fig2_speedup_vs_size.png")
    plot_mult_counts(csv_path, output_dir / "strassen_fig3_mult_counts.png")


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate Strassen benchmark plots")
    parser.add_argument(
        "--results-dir",
        type=Path,
        default=Path("strassen_multiplication/results"),
        help="Directory containing strassen_benchmark.csv",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("strassen_multiplication/results/figures"),
        help="Directory to save plots",
    )
    args = parser.parse_args()
    generate_all_plots(args.results_dir, args.output_dir)


if __name__ == "__main__":  # pragma: no cover - plotting entrypoint
    main()
