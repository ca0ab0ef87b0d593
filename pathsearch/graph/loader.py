"""
Saving and loading tile grids as msgpack map files.

Usage:
    from pathsearch.graph.loader import load_grid, save_grid

    save_grid(grid, "maps/maze.msgpack", start=start, goal=goal)
    grid, start, goal = load_grid("maps/maze.msgpack")
"""

from __future__ import annotations

import logging
from pathlib import Path

import msgpack
import numpy as np

from pathsearch.errors import InvalidArgument
from pathsearch.graph.grid import Tile, TileGrid

# Bumped whenever the on-disk layout changes
MAP_FORMAT_VERSION = 1

logger = logging.getLogger(__name__)


def grid_to_dict(
    grid: TileGrid,
    start: Tile | None = None,
    goal: Tile | None = None,
) -> dict:
    """Convert a grid (and optional endpoints) into a msgpack-friendly dict."""
    weights = grid.weights
    return {
        "version": MAP_FORMAT_VERSION,
        "rows": grid.rows,
        "cols": grid.cols,
        "scale": grid.scale,
        "blocked": grid.blocked.astype(np.uint8).ravel().tolist(),
        "weights": None if weights is None else weights.ravel().tolist(),
        "start": list(start.coords) if start is not None else None,
        "goal": list(goal.coords) if goal is not None else None,
    }


def grid_from_dict(data: dict) -> tuple[TileGrid, Tile | None, Tile | None]:
    """
    Rebuild a grid from the dict produced by grid_to_dict().

    Raises:
        InvalidArgument: If required keys are missing or inconsistent
    """
    if not isinstance(data, dict):
        raise InvalidArgument(f"Map data must be a dict, got {type(data).__name__}")

    version = data.get("version")
    if version != MAP_FORMAT_VERSION:
        raise InvalidArgument(f"Unsupported map format version: {version!r}")

    try:
        rows = int(data["rows"])
        cols = int(data["cols"])
        scale = float(data["scale"])
        blocked = np.asarray(data["blocked"], dtype=bool)
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidArgument(f"Malformed map data: {e}") from e

    if blocked.size != rows * cols:
        raise InvalidArgument(
            f"Map declares {rows}x{cols} tiles but has {blocked.size} wall flags"
        )

    weights = data.get("weights")
    if weights is not None:
        weights = np.asarray(weights, dtype=float)
        if weights.size != rows * cols:
            raise InvalidArgument(
                f"Map declares {rows}x{cols} tiles but has {weights.size} weights"
            )
        weights = weights.reshape(rows, cols)

    grid = TileGrid(rows, cols, scale=scale, blocked=blocked.reshape(rows, cols), weights=weights)
    start = _endpoint(grid, data.get("start"), "start")
    goal = _endpoint(grid, data.get("goal"), "goal")
    return grid, start, goal


def _endpoint(grid: TileGrid, coords, name: str) -> Tile | None:
    if coords is None:
        return None
    try:
        row, col = (int(value) for value in coords)
    except (TypeError, ValueError) as e:
        raise InvalidArgument(f"Malformed {name} coordinates: {coords!r}") from e
    return grid.tile(row, col)


def save_grid(
    grid: TileGrid,
    path: str | Path,
    start: Tile | None = None,
    goal: Tile | None = None,
) -> Path:
    """Write ``grid`` to ``path`` as msgpack and return the path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        msgpack.pack(grid_to_dict(grid, start, goal), f)
    logger.info(f"Saved {grid.rows}x{grid.cols} map to {path}")
    return path


def load_grid(path: str | Path) -> tuple[TileGrid, Tile | None, Tile | None]:
    """
    Load a grid saved with save_grid().

    Returns:
        (grid, start, goal); start/goal are None when the file has none

    Raises:
        InvalidArgument: If the file is not a valid map
    """
    path = Path(path)
    logger.info(f"Loading map from {path}...")
    with open(path, "rb") as f:
        try:
            data = msgpack.load(f)
        except (msgpack.ExtraData, msgpack.FormatError, msgpack.StackError, ValueError) as e:
            raise InvalidArgument(f"{path} is not a valid map file: {e}") from e

    grid, start, goal = grid_from_dict(data)
    logger.info(f"Loaded {grid.rows}x{grid.cols} map ({grid.walkable_count():,} walkable tiles)")
    return grid, start, goal
