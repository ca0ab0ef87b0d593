"""
Unit tests for the tile-state visualization sink.
"""

import numpy as np
import plotly.graph_objects as go

from pathsearch.search import SearchEngine
from pathsearch.viz import TileState, TileStateSink, create_search_heatmap, state_matrix


def run_with_sink(grid, start, goal, heuristic="manhattan") -> TileStateSink:
    sink = TileStateSink()
    SearchEngine(start, goal, heuristic, sink=sink).run()
    return sink


class TestTileStateSink:
    """Test per-tile state tracking."""

    def test_path_tiles_end_as_path(self, maze):
        """Every tile on the final path should be in the PATH state."""
        grid, start, goal = maze
        sink = TileStateSink()
        engine = SearchEngine(start, goal, "manhattan", sink=sink)
        result = engine.run()
        assert all(sink.state_of(tile) is TileState.PATH for tile in result.path)
        assert sink.count(TileState.PATH) == len(result.path)

    def test_unreached_tiles_are_unvisited(self, split_map):
        """Tiles the search never touched stay UNVISITED."""
        grid, start, goal = split_map
        sink = run_with_sink(grid, start, goal)
        assert sink.state_of(goal) is TileState.UNVISITED
        assert sink.count(TileState.CLOSED) == 4

    def test_costs_follow_discovery(self, grid3):
        """Displayed cost should be the cost a tile was opened at."""
        sink = run_with_sink(grid3, grid3.tile(0, 0), grid3.tile(2, 2), "zero")
        assert sink.costs[grid3.tile(0, 0)] == 0.0
        assert sink.costs[grid3.tile(1, 1)] == 2.0
        assert sink.costs[grid3.tile(2, 2)] == 4.0


class TestHeatmap:
    """Test figure generation."""

    def test_state_matrix_marks_walls(self, maze):
        """Walls should appear as WALL regardless of events."""
        grid, start, goal = maze
        matrix = state_matrix(grid, run_with_sink(grid, start, goal))
        assert matrix.shape == grid.shape
        assert matrix[1, 1] == TileState.WALL.value
        assert matrix[0, 0] == TileState.PATH.value

    def test_create_figure(self, grid3):
        """The heatmap should have one trace covering the grid with cost labels."""
        sink = run_with_sink(grid3, grid3.tile(0, 0), grid3.tile(2, 2))
        fig = create_search_heatmap(grid3, sink, title="test")
        assert isinstance(fig, go.Figure)
        assert len(fig.data) == 1
        assert np.asarray(fig.data[0].z).shape == (3, 3)
        assert fig.data[0].text[0][0] == "0"

    def test_costs_hidden(self, grid3):
        """show_costs=False should leave every label empty."""
        sink = run_with_sink(grid3, grid3.tile(0, 0), grid3.tile(2, 2))
        fig = create_search_heatmap(grid3, sink, show_costs=False)
        assert all(label == "" for row in fig.data[0].text for label in row)
