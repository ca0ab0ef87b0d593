#!/usr/bin/env python3
"""
Path Search CLI - Run Dijkstra or A* on a tile grid.

Usage:
    python scripts/run_search.py --rows 10 --cols 10 --start 0,0 --goal 9,9
    python scripts/run_search.py --map maps/maze.msgpack --heuristic cross_product
    python scripts/run_search.py --rows 20 --cols 20 --walls 0.3 --seed 7 --start 0,0 --goal 19,19 --plot search.html
    python scripts/run_search.py --rows 5 --cols 5 --start 0,0 --goal 4,4 --animate --delay 0.05

Heuristics:
    zero / uniform / dijkstra - No estimate (Dijkstra's algorithm)
    manhattan                 - |dx| + |dy| (default)
    cross_product             - Manhattan with a straight-line tie-break
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pathsearch.config import (  # noqa: E402
    DEFAULT_COLS,
    DEFAULT_HEURISTIC,
    DEFAULT_ROWS,
    LOG_DATE_FORMAT,
    LOG_FORMAT,
    LOG_LEVEL,
    MAP_SUFFIX,
    MAPS_DIR,
    TILE_SCALE,
    list_saved_maps,
)
from pathsearch.errors import PathSearchError  # noqa: E402
from pathsearch.graph import TileGrid, load_grid  # noqa: E402
from pathsearch.heuristics import HEURISTICS  # noqa: E402
from pathsearch.search import FanOutSink, LoggingSink, SearchEngine, SearchOptions  # noqa: E402
from pathsearch.viz import TileStateSink, create_search_heatmap  # noqa: E402


def parse_coords(value: str) -> tuple[int, int]:
    """Parse 'row,col' into a tuple."""
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected 'row,col', got '{value}'") from None
    return row, col


def parse_args() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Find a shortest path on a tile grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument("--map", type=Path, help="Saved map file, or the name of a map in the maps directory")
    parser.add_argument("--list-maps", action="store_true", help="List saved maps and exit")
    parser.add_argument("--rows", type=int, default=DEFAULT_ROWS, help="Grid rows (default: %(default)s)")
    parser.add_argument("--cols", type=int, default=DEFAULT_COLS, help="Grid columns (default: %(default)s)")
    parser.add_argument("--scale", type=float, default=TILE_SCALE, help="Tile scale / step cost")
    parser.add_argument("--walls", type=float, default=0.0, help="Random wall density (0-1)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for walls")
    parser.add_argument("--start", type=parse_coords, help="Start tile as row,col")
    parser.add_argument("--goal", type=parse_coords, help="Goal tile as row,col")
    parser.add_argument(
        "--heuristic",
        type=str,
        default=DEFAULT_HEURISTIC,
        choices=sorted(HEURISTICS),
        help="Heuristic to use (default: %(default)s)",
    )
    parser.add_argument(
        "--animate",
        action="store_true",
        help="Print every search event as it happens",
    )
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Seconds to pause after each event when animating",
    )
    parser.add_argument("--plot", type=Path, help="Write an HTML heatmap of the search here")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging, including every search event",
    )

    return parser.parse_args()


def resolve_map(path: Path) -> Path:
    """Look bare map names up in the maps directory."""
    if path.exists() or path.parent != Path("."):
        return path
    candidate = MAPS_DIR / path.with_suffix(MAP_SUFFIX).name
    return candidate if candidate.exists() else path


def build_grid(args: argparse.Namespace) -> tuple[TileGrid, object, object]:
    """Load or generate the grid and resolve start/goal tiles."""
    if args.map:
        grid, start, goal = load_grid(resolve_map(args.map))
    else:
        keep_free = [c for c in (args.start, args.goal) if c is not None]
        grid = TileGrid.random(
            args.rows,
            args.cols,
            wall_density=args.walls,
            seed=args.seed,
            scale=args.scale,
            keep_free=keep_free,
        )
        start = goal = None

    if args.start:
        start = grid.tile(*args.start)
    if args.goal:
        goal = grid.tile(*args.goal)
    if start is None:
        start = grid.tile(0, 0)
    if goal is None:
        goal = grid.tile(grid.rows - 1, grid.cols - 1)
    return grid, start, goal


def main() -> int:
    """Main entry point."""
    args = parse_args()

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(level=log_level, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    if args.list_maps:
        maps = list_saved_maps()
        if not maps:
            print(f"No saved maps in {MAPS_DIR}")
        for path in maps:
            print(f"  {path.stem}")
        return 0

    try:
        grid, start, goal = build_grid(args)
        tiles = TileStateSink()
        sink = FanOutSink(tiles, LoggingSink()) if args.verbose else tiles
        engine = SearchEngine(
            start,
            goal,
            args.heuristic,
            graph=grid,
            sink=sink,
            options=SearchOptions(
                emit_events=args.animate or args.verbose or args.plot is not None,
            ),
        )

        print("\n" + "=" * 60)
        print("Path Search")
        print("=" * 60)
        print(f"  Grid:      {grid.rows}x{grid.cols} (scale {grid.scale:g})")
        print(f"  Start:     {start.coords}")
        print(f"  Goal:      {goal.coords}")
        print(f"  Heuristic: {args.heuristic}")
        print("=" * 60 + "\n")

        # The caller paces the search; the engine never sleeps
        for event in engine.steps():
            if args.animate:
                print(f"  {event.kind.value:>9}  {event.node.coords}  cost={event.cost:g}")
                if args.delay > 0:
                    time.sleep(args.delay)
        result = engine.result

    except (PathSearchError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\n\nSearch interrupted by user")
        return 130

    # Print results
    print("\n" + "=" * 60)
    if result.found:
        print(f"Found a path of {result.path_length} steps, cost {result.cost:g}")
    else:
        print(f"No path from {start.coords} to {goal.coords}")
    print("=" * 60)

    if result.found:
        print()
        print(grid.render(result.path))

    print(f"\nNodes expanded: {result.nodes_expanded}")
    print(f"Elapsed: {result.elapsed_seconds:.4f} seconds")

    if args.plot:
        fig = create_search_heatmap(grid, tiles, title=f"{args.heuristic}: {start.coords} -> {goal.coords}")
        args.plot.parent.mkdir(parents=True, exist_ok=True)
        fig.write_html(str(args.plot))
        print(f"Plot written to {args.plot}")

    return 0 if result.found else 1


if __name__ == "__main__":
    sys.exit(main())
