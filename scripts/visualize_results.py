#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
import pathlib
from typing import Iterable, List

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns


def parse_args(raw_args: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare tour lengths and iteration counts across methods.")
    parser.add_argument(
        "--results",
        type=pathlib.Path,
        default=pathlib.Path("data/results.jsonl"),
        help="Input JSONL file with method runs.",
    )
    parser.add_argument(
        "--figure",
        type=pathlib.Path,
        default=pathlib.Path("data/results.png"),
        help="Destination for rendered plot (PNG).",
    )
    return parser.parse_args(raw_args)


def load_records(path: pathlib.Path) -> List[dict]:
    records: List[dict] = []
    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line:
                continue
            records.append(json.loads(line))
    return records


def build_dataframe(records: List[dict]) -> pd.DataFrame:
    df = pd.DataFrame(records)
    for col in ["num_nodes", "elapsed", "cost", "iterations"]:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    completed = df[df["status"] == "complete"]
    return (
        completed.groupby("algorithm")
        .agg(
            avg_cost=("cost", "mean"),
            avg_iterations=("iterations", "mean"),
            avg_elapsed=("elapsed", "mean"),
            runs=("cost", "count"),
        )
        .reset_index()
    )


def print_summary(df: pd.DataFrame) -> None:
    summary = summarize(df)
    if summary.empty:
        print("No completed runs available for summary.")
        return
    for _, row in summary.iterrows():
        print(
            f"{row['algorithm']:>20}: avg_cost={row['avg_cost']:.2f}, "
            f"avg_iterations={row['avg_iterations']:.1f}, avg_elapsed={row['avg_elapsed']:.4f}s "
            f"({int(row['runs'])} runs)"
        )


def plot(df: pd.DataFrame, output: pathlib.Path) -> None:
    sns.set_theme(style="whitegrid")
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))
    sns.lineplot(data=df, x="num_nodes", y="cost", hue="algorithm", errorbar="sd", marker="o", ax=axes[0])
    axes[0].set_xlabel("Nodes")
    axes[0].set_ylabel("Tour length")
    axes[0].set_title("Tour length by method")
    sns.lineplot(data=df, x="num_nodes", y="iterations", hue="algorithm", marker="o", ax=axes[1])
    axes[1].set_xlabel("Nodes")
    axes[1].set_ylabel("Iterations")
    axes[1].set_yscale("log")
    axes[1].set_title("Iterations by method")
    fig.tight_layout()
    output.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output, dpi=150)
    plt.close(fig)
    print(f"Saved figure to {output}")


def main(raw_args: Iterable[str] | None = None) -> None:
    args = parse_args(raw_args)
    if not args.results.exists():
        raise SystemExit(f"Results file not found: {args.results}")
    df = build_dataframe(load_records(args.results))
    if df.empty:
        raise SystemExit("Results file is empty.")
    print_summary(df)
    plot(df, args.figure)


if __name__ == "__main__":
    main()
