"""
Tile grid graph.

The canonical search world: a rectangular grid of tiles connected in the
four cardinal directions. Moving onto a tile costs the tile scale times
the tile's traversal weight, so uniform grids have a constant step cost
equal to the scale.

Usage:
    from pathsearch.graph import TileGrid

    grid = TileGrid(3, 3)
    start, goal = grid.tile(0, 0), grid.tile(2, 2)

    grid, start, goal = TileGrid.from_strings([
        "S..#",
        ".#..",
        "...G",
    ])
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from pathsearch.config import FREE_CHAR, GOAL_CHAR, START_CHAR, TILE_SCALE, WALL_CHAR
from pathsearch.errors import InvalidArgument
from pathsearch.graph.base import Edge

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Edge labels for the four grid connections, as (row, col) offsets."""

    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)
    LEFT = (0, -1)

    @property
    def offset(self) -> tuple[int, int]:
        return self.value


@dataclass(eq=False)
class Tile:
    """
    A single grid cell.

    Tiles compare and hash by identity; each grid creates exactly one
    Tile per cell, so identity equals (grid, row, col) equality.

    Attributes:
        grid: Owning grid
        row: Row index (0 = top)
        col: Column index (0 = left)
    """

    grid: TileGrid = field(repr=False)
    row: int
    col: int

    @property
    def position(self) -> tuple[float, float]:
        """World-space (x, y) of the tile center."""
        return (self.col * self.grid.scale, self.row * self.grid.scale)

    @property
    def scale(self) -> float:
        return self.grid.scale

    @property
    def coords(self) -> tuple[int, int]:
        return (self.row, self.col)

    @property
    def walkable(self) -> bool:
        return not self.grid.is_blocked(self.row, self.col)

    def neighbors(self) -> list[Edge]:
        return self.grid.neighbors(self)


class TileGrid:
    """
    Four-connected grid of tiles.

    Blocked tiles remain nodes of the graph but have no edges in or out.
    Neighbors are always listed in Direction order: UP, RIGHT, DOWN, LEFT.
    """

    def __init__(
        self,
        rows: int,
        cols: int,
        scale: float = TILE_SCALE,
        blocked: np.ndarray | None = None,
        weights: np.ndarray | None = None,
    ) -> None:
        """
        Initialize the grid.

        Args:
            rows: Number of rows
            cols: Number of columns
            scale: Tile size; also the base cost of one step
            blocked: Optional (rows, cols) boolean array of walls
            weights: Optional (rows, cols) array of traversal weights.
                Entering tile (r, c) costs scale * weights[r, c].

        Raises:
            InvalidArgument: If the grid is empty or an array has the wrong shape
        """
        if rows <= 0 or cols <= 0:
            raise InvalidArgument(f"Grid must have at least one tile, got {rows}x{cols}")

        self._rows = rows
        self._cols = cols
        self._scale = float(scale)

        if blocked is None:
            self._blocked = np.zeros((rows, cols), dtype=bool)
        else:
            self._blocked = self._check_shape(np.asarray(blocked, dtype=bool), "blocked")

        if weights is None:
            self._weights = None
        else:
            self._weights = self._check_shape(np.asarray(weights, dtype=float), "weights")

        self._tiles = [[Tile(self, r, c) for c in range(cols)] for r in range(rows)]

    def _check_shape(self, array: np.ndarray, name: str) -> np.ndarray:
        if array.shape != (self._rows, self._cols):
            raise InvalidArgument(
                f"{name} array has shape {array.shape}, expected {(self._rows, self._cols)}"
            )
        return array.copy()

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def from_array(cls, array: Sequence | np.ndarray, scale: float = TILE_SCALE) -> TileGrid:
        """Build a grid from a 2-D occupancy array (0 = free, non-zero = wall)."""
        occupancy = np.asarray(array)
        if occupancy.ndim != 2:
            raise InvalidArgument(f"Occupancy array must be 2-D, got {occupancy.ndim}-D")
        rows, cols = occupancy.shape
        return cls(rows, cols, scale=scale, blocked=occupancy != 0)

    @classmethod
    def random(
        cls,
        rows: int,
        cols: int,
        wall_density: float = 0.2,
        seed: int | None = None,
        scale: float = TILE_SCALE,
        keep_free: Iterable[tuple[int, int]] = (),
    ) -> TileGrid:
        """
        Build a grid with randomly placed walls.

        Args:
            rows: Number of rows
            cols: Number of columns
            wall_density: Probability that a tile is a wall
            seed: Seed for numpy's random generator
            scale: Tile size
            keep_free: (row, col) tiles that must not be walls
        """
        if not 0.0 <= wall_density <= 1.0:
            raise InvalidArgument(f"wall_density must be in [0, 1], got {wall_density}")
        rng = np.random.default_rng(seed)
        blocked = rng.random((rows, cols)) < wall_density
        for r, c in keep_free:
            blocked[r, c] = False
        return cls(rows, cols, scale=scale, blocked=blocked)

    @classmethod
    def from_strings(
        cls,
        lines: Iterable[str],
        scale: float = TILE_SCALE,
    ) -> tuple[TileGrid, Tile | None, Tile | None]:
        """
        Build a grid from ASCII art.

        '#' marks a wall, '.' a free tile, 'S' and 'G' the start and goal.

        Returns:
            (grid, start, goal); start/goal are None when not marked
        """
        rows = [line.rstrip("\n") for line in lines if line.strip()]
        if not rows:
            raise InvalidArgument("Map has no rows")

        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise InvalidArgument("Map rows must all have the same width")

        known = {WALL_CHAR, FREE_CHAR, START_CHAR, GOAL_CHAR}
        blocked = np.zeros((len(rows), width), dtype=bool)
        start_at = goal_at = None
        for r, row in enumerate(rows):
            for c, char in enumerate(row):
                if char not in known:
                    raise InvalidArgument(f"Unknown map character {char!r} at ({r}, {c})")
                blocked[r, c] = char == WALL_CHAR
                if char == START_CHAR:
                    start_at = (r, c)
                elif char == GOAL_CHAR:
                    goal_at = (r, c)

        grid = cls(len(rows), width, scale=scale, blocked=blocked)
        logger.debug(f"Parsed {grid.rows}x{grid.cols} map with {int(blocked.sum())} walls")
        start = grid.tile(*start_at) if start_at else None
        goal = grid.tile(*goal_at) if goal_at else None
        return grid, start, goal

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def scale(self) -> float:
        return self._scale

    @property
    def blocked(self) -> np.ndarray:
        """Copy of the wall mask."""
        return self._blocked.copy()

    @property
    def weights(self) -> np.ndarray | None:
        """Copy of the traversal weights, or None for a uniform grid."""
        return None if self._weights is None else self._weights.copy()

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._rows and 0 <= col < self._cols

    def is_blocked(self, row: int, col: int) -> bool:
        return bool(self._blocked[row, col])

    def tile(self, row: int, col: int) -> Tile:
        """Get the tile at (row, col)."""
        if not self.in_bounds(row, col):
            raise InvalidArgument(
                f"Tile ({row}, {col}) is outside the {self._rows}x{self._cols} grid"
            )
        return self._tiles[row][col]

    def step_cost(self, tile: Tile) -> float:
        """Cost of moving onto ``tile``."""
        if self._weights is None:
            return self._scale
        return self._scale * float(self._weights[tile.row, tile.col])

    def neighbors(self, tile: Tile) -> list[Edge]:
        """Outgoing edges of ``tile`` in Direction order."""
        if self.is_blocked(tile.row, tile.col):
            return []

        edges = []
        for direction in Direction:
            dr, dc = direction.offset
            r, c = tile.row + dr, tile.col + dc
            if not self.in_bounds(r, c) or self._blocked[r, c]:
                continue
            neighbor = self._tiles[r][c]
            edges.append(Edge(direction, neighbor, self.step_cost(neighbor)))
        return edges

    def walkable_count(self) -> int:
        return int((~self._blocked).sum())

    # =========================================================================
    # Rendering
    # =========================================================================

    def render(self, path: Iterable[Tile] = ()) -> str:
        """ASCII rendering of the grid, marking ``path`` tiles with '*'."""
        on_path = {tile.coords for tile in path}
        lines = []
        for r in range(self._rows):
            chars = []
            for c in range(self._cols):
                if (r, c) in on_path:
                    chars.append("*")
                elif self._blocked[r, c]:
                    chars.append(WALL_CHAR)
                else:
                    chars.append(FREE_CHAR)
            lines.append("".join(chars))
        return "\n".join(lines)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Tile) and node.grid is self

    def __len__(self) -> int:
        return self._rows * self._cols

    def __iter__(self) -> Iterator[Tile]:
        for row in self._tiles:
            yield from row

    def __repr__(self) -> str:
        return f"TileGrid(rows={self._rows}, cols={self._cols}, scale={self._scale})"
