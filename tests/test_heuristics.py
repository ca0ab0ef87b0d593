"""
Unit tests for heuristic functions.
"""

import math

import pytest

from pathsearch.graph import TileGrid
from pathsearch.heuristics import (
    HEURISTICS,
    cross_product,
    get_heuristic,
    make_cross_product,
    manhattan,
    zero,
)


class TestHeuristicValues:
    """Test the estimate each heuristic produces."""

    def test_zero_is_always_zero(self, grid3):
        """Zero heuristic should ignore its inputs."""
        start, goal = grid3.tile(0, 0), grid3.tile(2, 2)
        assert all(zero(start, tile, goal) == 0.0 for tile in grid3)

    def test_manhattan_distance(self, grid3):
        """Manhattan should sum the axis distances."""
        start, goal = grid3.tile(0, 0), grid3.tile(2, 2)
        assert manhattan(start, start, goal) == 4
        assert manhattan(start, grid3.tile(1, 2), goal) == 1
        assert manhattan(start, goal, goal) == 0

    def test_cross_product_on_line_adds_nothing(self, grid3):
        """Tiles on the start-goal line get no bias."""
        start, goal = grid3.tile(0, 0), grid3.tile(2, 2)
        assert cross_product(start, grid3.tile(1, 1), goal) == pytest.approx(2.0)

    def test_cross_product_off_line_adds_bias(self, grid3):
        """Tiles off the start-goal line get a small positive bias."""
        start, goal = grid3.tile(0, 0), grid3.tile(2, 2)
        # sine of the angle between (-1, -2) and (-2, -2) is 1 / sqrt(10)
        estimate = cross_product(start, grid3.tile(0, 1), goal)
        assert estimate == pytest.approx(3.0 + 0.001 / math.sqrt(10))

    def test_cross_product_custom_weight(self, grid3):
        """make_cross_product should use the given weight."""
        start, goal = grid3.tile(0, 0), grid3.tile(2, 2)
        heuristic = make_cross_product(0.5)
        assert heuristic(start, grid3.tile(0, 1), goal) == pytest.approx(3.0 + 0.5 / math.sqrt(10))

    def test_cross_product_bias_bounded_on_large_grid(self):
        """The bias stays below one weighted step however far apart the tiles are."""
        grid = TileGrid(50, 50)
        start, goal = grid.tile(0, 0), grid.tile(49, 49)
        for tile in grid:
            bias = cross_product(start, tile, goal) - manhattan(start, tile, goal)
            assert 0.0 <= bias <= 0.001 + 1e-12
        assert cross_product(start, grid.tile(49, 0), goal) < 49.001

    def test_cross_product_bias_scales_with_tiles(self):
        """The bias bound follows the grid scale."""
        grid = TileGrid(3, 3, scale=10.0)
        start, goal = grid.tile(0, 0), grid.tile(2, 2)
        heuristic = make_cross_product(0.5)
        estimate = heuristic(start, grid.tile(0, 1), goal)
        assert estimate == pytest.approx(30.0 + 5.0 / math.sqrt(10))

    def test_cross_product_at_goal_is_zero(self, grid3):
        """No bias when the node is the goal or start equals goal."""
        goal = grid3.tile(2, 2)
        assert cross_product(grid3.tile(0, 0), goal, goal) == 0.0
        assert cross_product(goal, grid3.tile(0, 0), goal) == pytest.approx(4.0)

    def test_cross_product_weight_out_of_range_raises(self):
        """Negative weights and weights of a full step or more are rejected."""
        with pytest.raises(ValueError):
            make_cross_product(-0.1)
        with pytest.raises(ValueError):
            make_cross_product(1.0)

    def test_heuristics_never_negative(self, maze):
        """All registered heuristics should be non-negative everywhere."""
        grid, start, goal = maze
        for heuristic in HEURISTICS.values():
            assert all(heuristic(start, tile, goal) >= 0 for tile in grid)


class TestRegistry:
    """Test heuristic lookup by name."""

    def test_aliases_for_zero(self):
        """uniform and dijkstra should both map to the zero heuristic."""
        assert get_heuristic("uniform") is zero
        assert get_heuristic("dijkstra") is zero

    def test_lookup_is_case_insensitive(self):
        """Names should match regardless of case."""
        assert get_heuristic("Manhattan") is manhattan

    def test_callable_passes_through(self):
        """A function should be returned unchanged."""
        def custom(start, node, goal):
            return 1.0

        assert get_heuristic(custom) is custom

    def test_unknown_name_raises(self):
        """Unknown names should raise ValueError listing the choices."""
        with pytest.raises(ValueError, match="Available"):
            get_heuristic("euclidean")
