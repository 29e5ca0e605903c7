#!/usr/bin/env python3
from __future__ import annotations

import argparse
import pathlib
import sys
from typing import Iterable

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from SmallTSP import MatrixParseError, Method, SmallTSP, build_report, load_matrix
from SmallTSP.solvers.meta.simulated_annealing import DEFAULT_SEED


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve a small symmetric TSP given as a weight matrix file.")
    parser.add_argument("matrix", type=pathlib.Path, help="Text file with one whitespace-separated row per line.")
    parser.add_argument(
        "--method",
        choices=[method.value for method in Method],
        default=Method.GREEDY.value,
        help="Tour construction method (default: greedy).",
    )
    parser.add_argument(
        "--start",
        type=int,
        default=1,
        help="1-based start node (ignored by nearest_neighbor, which picks one at random).",
    )
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help=f"Simulated annealing seed (default: {DEFAULT_SEED}).")
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=pathlib.Path("tsp_result.txt"),
        help="Where to write the result report.",
    )
    parser.add_argument("--figure", type=pathlib.Path, help="Optional PNG rendering of the graph and tour.")
    return parser.parse_args(raw_args)


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    if not args.matrix.exists():
        raise SystemExit(f"Matrix file not found: {args.matrix}")
    try:
        graph = load_matrix(args.matrix)
    except (MatrixParseError, OSError, UnicodeDecodeError) as exc:
        print(f"Input error: {exc}", file=sys.stderr)
        return 2

    n = graph.shape[0]
    if not 1 <= args.start <= n:
        print(f"Input error: start node must be between 1 and {n}.", file=sys.stderr)
        return 2

    result = SmallTSP().solve(graph, method=args.method, start=args.start - 1, seed=args.seed)
    report = build_report(graph, result)
    print(report, end="")

    try:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(report, encoding="utf-8")
    except OSError as exc:
        print(f"Failed to save results: {exc}", file=sys.stderr)
        return 1
    print(f"Results (with iteration count) saved to {args.output}")

    if args.figure is not None:
        from SmallTSP.rendering import save_tour_figure

        save_tour_figure(graph, result.path, args.figure)
        print(f"Saved figure to {args.figure}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
