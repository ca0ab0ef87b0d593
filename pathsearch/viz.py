"""
Tile coloring for search visualization.

TileStateSink consumes search events and remembers, per tile, the latest
display state and the cost to show on it. create_search_heatmap() turns
that into a plotly figure: cyan open tiles, blue closed tiles, yellow for
the active tile and the final path.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

import numpy as np
import plotly.graph_objects as go

from pathsearch.config import (
    ACTIVE_COLOR,
    CLOSED_COLOR,
    FIGURE_ROW_HEIGHT,
    OPEN_COLOR,
    PATH_COLOR,
    UNVISITED_COLOR,
    WALL_COLOR,
)
from pathsearch.graph.grid import TileGrid
from pathsearch.search.events import EventKind, SearchEvent


class TileState(Enum):
    UNVISITED = 0
    WALL = 1
    OPEN = 2
    CLOSED = 3
    ACTIVE = 4
    PATH = 5


TILE_COLORS = {
    TileState.UNVISITED: UNVISITED_COLOR,
    TileState.WALL: WALL_COLOR,
    TileState.OPEN: OPEN_COLOR,
    TileState.CLOSED: CLOSED_COLOR,
    TileState.ACTIVE: ACTIVE_COLOR,
    TileState.PATH: PATH_COLOR,
}

_EVENT_STATES = {
    EventKind.ACTIVE: TileState.ACTIVE,
    EventKind.OPENED: TileState.OPEN,
    EventKind.CLOSED: TileState.CLOSED,
    EventKind.PATH_STEP: TileState.PATH,
}


class TileStateSink:
    """Event sink that tracks what each tile should currently look like."""

    def __init__(self) -> None:
        self.states: dict[Any, TileState] = {}
        self.costs: dict[Any, float] = {}
        self.event_count = 0

    def on_event(self, event: SearchEvent) -> None:
        self.event_count += 1
        self.states[event.node] = _EVENT_STATES[event.kind]
        # Only discovery changes the displayed cost
        if event.kind is EventKind.OPENED or event.node not in self.costs:
            self.costs[event.node] = event.cost

    def state_of(self, node: Any) -> TileState:
        return self.states.get(node, TileState.UNVISITED)

    def count(self, state: TileState) -> int:
        return sum(1 for s in self.states.values() if s is state)


def state_matrix(grid: TileGrid, sink: TileStateSink) -> np.ndarray:
    """(rows, cols) array of TileState values for ``grid``."""
    matrix = np.full(grid.shape, TileState.UNVISITED.value, dtype=int)
    for tile in grid:
        if not tile.walkable:
            matrix[tile.row, tile.col] = TileState.WALL.value
        else:
            matrix[tile.row, tile.col] = sink.state_of(tile).value
    return matrix


def create_search_heatmap(
    grid: TileGrid,
    sink: TileStateSink,
    title: str = "Search",
    show_costs: bool = True,
) -> go.Figure:
    """Heatmap of tile states with optional cost labels."""
    z = state_matrix(grid, sink)

    text = [["" for _ in range(grid.cols)] for _ in range(grid.rows)]
    if show_costs:
        for tile in grid:
            cost = sink.costs.get(tile)
            if cost is not None:
                text[tile.row][tile.col] = f"{cost:g}"

    # Discrete colorscale: one flat band per TileState value
    n = len(TileState)
    colorscale = []
    for state in TileState:
        lo, hi = state.value / n, (state.value + 1) / n
        colorscale.append([lo, TILE_COLORS[state]])
        colorscale.append([hi, TILE_COLORS[state]])

    fig = go.Figure(data=[
        go.Heatmap(
            z=z,
            zmin=-0.5,
            zmax=n - 0.5,
            text=text,
            texttemplate="%{text}",
            colorscale=colorscale,
            showscale=False,
            xgap=1,
            ygap=1,
            hovertemplate="row %{y}, col %{x}<br>cost %{text}<extra></extra>",
        )
    ])

    fig.update_layout(
        title=title,
        height=max(200, grid.rows * FIGURE_ROW_HEIGHT),
        margin=dict(t=35, b=20, l=20, r=20),
        plot_bgcolor="white",
    )
    fig.update_yaxes(autorange="reversed", showticklabels=False)
    fig.update_xaxes(showticklabels=False, scaleanchor="y")
    return fig
