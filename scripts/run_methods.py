#!/usr/bin/env python3
from __future__ import annotations

import argparse
import hashlib
import json
import pathlib
import sys
from dataclasses import asdict
from typing import Iterable, Iterator

import numpy as np

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from SmallTSP import AlgorithmResult, Method, SmallTSP
from SmallTSP.solvers.meta.simulated_annealing import DEFAULT_SEED


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run every tour construction method on generated matrices.")
    parser.add_argument(
        "--problems",
        type=pathlib.Path,
        default=pathlib.Path("data/matrices.jsonl"),
        help="JSONL file containing weight matrices.",
    )
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        default=pathlib.Path("data/results.jsonl"),
        help="Destination JSONL file for method outcomes.",
    )
    parser.add_argument(
        "--algorithms",
        nargs="+",
        choices=[method.value for method in Method],
        help="Subset of methods to execute (default: all).",
    )
    parser.add_argument("--start", type=int, default=0, help="0-based start node for greedy and annealing.")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Seed for annealing and nearest-neighbour starts.")
    parser.add_argument(
        "--overwrite",
        action="store_true",
        help="Re-run methods even if results already exist for a matrix.",
    )
    return parser.parse_args(raw_args)


def iter_jsonl(path: pathlib.Path) -> Iterator[dict]:
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            yield json.loads(line)


def load_existing_results(path: pathlib.Path) -> dict[tuple[str, str], dict]:
    records: dict[tuple[str, str], dict] = {}
    if not path.exists():
        return records
    for row in iter_jsonl(path):
        pid = row.get("problem_id")
        algo = row.get("algorithm")
        if not pid or not algo:
            continue
        records[(pid, algo)] = row
    return records


def ensure_problem_id(problem: dict) -> str:
    if "problem_id" in problem:
        return problem["problem_id"]
    matrix = np.asarray(problem.get("distance_matrix"), dtype=float)
    digest = hashlib.sha1(matrix.tobytes()).hexdigest()
    problem["problem_id"] = digest
    return digest


def serialize_result(problem: dict, algorithm: str, result: AlgorithmResult) -> dict:
    record = asdict(result)
    record.update(
        {
            "algorithm": algorithm,
            "problem_id": problem["problem_id"],
            "num_nodes": problem.get("num_nodes", len(result.path) - 1),
        }
    )
    return record


def main(raw_args: Iterable[str] | None = None) -> int:
    args = parse_args(raw_args)
    if not args.problems.exists():
        raise SystemExit(f"Problem file not found: {args.problems}")

    problems = list(iter_jsonl(args.problems))
    if problems:
        smallest = min(len(problem["distance_matrix"]) for problem in problems)
        if not 0 <= args.start < smallest:
            raise SystemExit(f"--start must be between 0 and {smallest - 1} (smallest matrix has {smallest} nodes)")

    selected = args.algorithms or [method.value for method in Method]
    existing = load_existing_results(args.results)
    solver = SmallTSP()
    rng = np.random.default_rng(args.seed)
    appended = 0
    reused = 0
    args.results.parent.mkdir(parents=True, exist_ok=True)

    with args.results.open("a", encoding="utf-8") as out:
        for problem in problems:
            problem_id = ensure_problem_id(problem)
            graph = np.asarray(problem["distance_matrix"], dtype=float)
            for algo_name in selected:
                key = (problem_id, algo_name)
                if not args.overwrite and key in existing:
                    reused += 1
                    print(f"{algo_name} on problem {problem_id} -> cached ({existing[key].get('status')})")
                    continue
                result = solver.solve(graph, method=algo_name, start=args.start, seed=args.seed, rng=rng)
                record = serialize_result(problem, algo_name, result)
                out.write(json.dumps(record))
                out.write("\n")
                existing[key] = record
                appended += 1
                print(
                    f"{algo_name} on problem {problem_id} (nodes={graph.shape[0]}) -> "
                    f"cost={result.cost:.2f}, iterations={result.iterations}"
                )

    print(f"Completed {appended} new runs. Reused {reused} cached results.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
