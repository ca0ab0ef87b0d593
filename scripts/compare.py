#!/usr/bin/env python3
"""
Compare Dijkstra and A* heuristics on a few grids.

Usage:
    python scripts/compare.py
    python scripts/compare.py --size 40 --walls 0.25 --trials 5 --seed 1
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import logging  # noqa: E402
logging.basicConfig(level=logging.WARNING)  # Quiet mode

from pathsearch.graph import TileGrid  # noqa: E402
from pathsearch.search import SearchOptions, search  # noqa: E402

# Heuristics to compare, in report order
HEURISTICS = ["zero", "manhattan", "cross_product"]

# Fixed scenarios: (name, map lines)
SCENARIOS = [
    ("open 3x3", ["S..", "...", "..G"]),
    ("corridor", [
        "S.........",
        "########..",
        "..........",
        "..########",
        ".........G",
    ]),
    ("wall gap", [
        "S....#....",
        ".....#....",
        ".....#....",
        "..........",
        ".....#...G",
    ]),
]


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Compare search heuristics")
    parser.add_argument("--size", type=int, default=30, help="Random grid size (default: 30)")
    parser.add_argument("--walls", type=float, default=0.2, help="Random wall density (default: 0.2)")
    parser.add_argument("--trials", type=int, default=3, help="Random grids to try (default: 3)")
    parser.add_argument("--seed", type=int, default=0, help="Base random seed (default: 0)")
    return parser.parse_args()


def build_cases(args: argparse.Namespace) -> list[tuple[str, TileGrid, object, object]]:
    cases = []
    for name, lines in SCENARIOS:
        grid, start, goal = TileGrid.from_strings(lines)
        cases.append((name, grid, start, goal))

    last = args.size - 1
    for i in range(args.trials):
        grid = TileGrid.random(
            args.size,
            args.size,
            wall_density=args.walls,
            seed=args.seed + i,
            keep_free=[(0, 0), (last, last)],
        )
        cases.append((f"random #{i + 1}", grid, grid.tile(0, 0), grid.tile(last, last)))
    return cases


def run_comparison() -> None:
    args = parse_args()
    cases = build_cases(args)
    options = SearchOptions(emit_events=False)

    print("=" * 70)
    print("Path Search - Heuristic Comparison")
    print("=" * 70)
    print(f"\nTesting {len(HEURISTICS)} heuristics on {len(cases)} grids...\n")

    totals = {h: [0, 0.0] for h in HEURISTICS}

    for i, (name, grid, start, goal) in enumerate(cases, 1):
        print(f"[{i}/{len(cases)}] {name} ({grid.rows}x{grid.cols})")
        print("-" * 50)

        for heuristic in HEURISTICS:
            result = search(start, goal, heuristic, options=options, graph=grid)
            totals[heuristic][0] += result.nodes_expanded
            totals[heuristic][1] += result.elapsed_seconds

            if result.found:
                status = f"cost {result.cost:6g}"
            else:
                status = "no path    "
            print(
                f"  {heuristic:15} : {status}  "
                f"{result.nodes_expanded:5} nodes  ({result.elapsed_seconds * 1000:.2f} ms)"
            )
        print()

    # Summary
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)

    for heuristic in HEURISTICS:
        nodes, seconds = totals[heuristic]
        print(f"  {heuristic:15} : {nodes:6} nodes expanded, {seconds * 1000:.2f} ms total")


if __name__ == "__main__":
    run_comparison()
