"""Command-line entry point.

``strassen-multiply run`` reads ``n`` and two matrices from stdin (or a
file) and prints their product. ``strassen-multiply benchmark`` compares
the naive and Strassen multipliers on random matrices.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from strassen_multiplication.common.config import DEFAULT_THRESHOLD, BenchmarkConfig, MethodKind, StrassenConfig
from strassen_multiplication.common.logging_utils import get_logger, set_verbosity
from strassen_multiplication.console.matrix_io import format_matrix, parse_matrices
from strassen_multiplication.overall.experiments import DEFAULT_RESULTS_DIR, run_benchmark
from strassen_multiplication.strassen.core import strassen_multiply

logger = get_logger(__name__)


def run_from_stream(stream: TextIO, out: TextIO, config: StrassenConfig) -> None:
    """Read a matrix pair from ``stream`` and write the product to ``out``."""

    n, a, b = parse_matrices(stream.read(), dtype=config.dtype)
    logger.debug("Parsed two %dx%d matrices", n, n)
    product = strassen_multiply(a, b, config)
    out.write(format_matrix(product))
    out.write("\n")


def _cmd_run(args: argparse.Namespace) -> int:
    config = StrassenConfig(threshold=args.threshold, dtype=args.dtype)
    if args.input is None:
        run_from_stream(sys.stdin, sys.stdout, config)
    else:
        with args.input.open("r", encoding="utf-8") as f:
            run_from_stream(f, sys.stdout, config)
    return 0


def _cmd_benchmark(args: argparse.Namespace) -> int:
    config = BenchmarkConfig(
        sizes=list(args.sizes),
        num_trials=args.trials,
        seed=args.seed,
        threshold=args.threshold,
        methods=[MethodKind(m) for m in args.methods],
    )
    run_benchmark(config, args.output_dir)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="strassen-multiply",
        description="Multiply power-of-two square integer matrices with Strassen's algorithm",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    run = sub.add_parser("run", help="Multiply two matrices read from stdin or a file")
    run.add_argument("--input", type=Path, default=None, help="Read input from FILE instead of stdin")
    run.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD, help="Base-case dimension")
    run.add_argument("--dtype", choices=["int32", "int64"], default="int32", help="Integer width")
    run.set_defaults(func=_cmd_run)

    bench = sub.add_parser("benchmark", help="Compare naive and Strassen multiplication")
    bench.add_argument("--sizes", type=int, nargs="+", default=[64, 128, 256, 512], help="Matrix sizes (powers of two)")
    bench.add_argument("--trials", type=int, default=3, help="Runs per method and size")
    bench.add_argument("--seed", type=int, default=0, help="Random seed")
    bench.add_argument("--threshold", type=int, default=DEFAULT_THRESHOLD, help="Base-case dimension")
    bench.add_argument(
        "--methods",
        nargs="+",
        choices=[m.value for m in MethodKind],
        default=[m.value for m in MethodKind],
        help="Methods to time",
    )
    bench.add_argument("--output-dir", type=Path, default=DEFAULT_RESULTS_DIR, help="Directory for CSV/JSONL results")
    bench.set_defaults(func=_cmd_benchmark)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    set_verbosity(args.verbose)
    try:
        return args.func(args)
    except ValueError as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover - console entrypoint
    sys.exit(main())
