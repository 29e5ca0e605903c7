#!/usr/bin/env python3
from __future__ import annotations

import argparse
import hashlib
import json
import pathlib
from datetime import datetime, timezone
from typing import Iterable

import numpy as np


def create_instance(num_nodes: int, rng: np.random.Generator, max_weight: int) -> dict:
    upper = rng.integers(1, max_weight + 1, size=(num_nodes, num_nodes))
    matrix = np.triu(upper, k=1)
    matrix = matrix + matrix.T
    digest = hashlib.sha1(matrix.astype(float).tobytes()).hexdigest()
    return {
        "num_nodes": num_nodes,
        "problem_id": digest,
        "distance_matrix": matrix.tolist(),
        "max_weight": max_weight,
    }


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate random symmetric weight matrices.")
    parser.add_argument(
        "--counts",
        nargs="+",
        type=int,
        default=[3, 5, 8, 10, 15, 20, 25],
        help="Node counts to generate (2..25).",
    )
    parser.add_argument(
        "--instances-per-count",
        type=int,
        default=10,
        help="How many matrices to generate per node count.",
    )
    parser.add_argument(
        "--max-weight",
        type=int,
        default=100,
        help="Edge weights drawn uniformly from 1..max-weight.",
    )
    parser.add_argument(
        "--output",
        type=pathlib.Path,
        default=pathlib.Path("data/matrices.jsonl"),
        help="Destination JSONL file.",
    )
    parser.add_argument("--seed", type=int, default=42, help="Random seed (default: 42).")
    return parser.parse_args(raw_args)


def main(raw_args: Iterable[str] | None = None) -> None:
    args = parse_args(raw_args)
    bad = [count for count in args.counts if not 2 <= count <= 25]
    if bad:
        raise SystemExit(f"Node counts must lie in 2..25, got {bad}")
    rng = np.random.default_rng(args.seed)

    timestamp = datetime.now(timezone.utc).isoformat()
    args.output.parent.mkdir(parents=True, exist_ok=True)

    with args.output.open("w", encoding="utf-8") as fh:
        for count in args.counts:
            for _ in range(args.instances_per_count):
                instance = create_instance(count, rng, args.max_weight)
                record = {
                    "created_at": timestamp,
                    "seed": args.seed,
                    **instance,
                }
                fh.write(json.dumps(record))
                fh.write("\n")


if __name__ == "__main__":
    main()
