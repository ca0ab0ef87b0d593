"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pathsearch.graph import AdjacencyGraph, TileGrid


@pytest.fixture
def grid3() -> TileGrid:
    """Open 3x3 grid with unit step cost."""
    return TileGrid(3, 3)


@pytest.fixture
def maze():
    """Small walled map with S and G markers; returns (grid, start, goal)."""
    return TileGrid.from_strings([
        "S...#....",
        ".##.#.##.",
        ".#..#..#.",
        ".#.##.##.",
        "........G",
    ])


@pytest.fixture
def split_map():
    """Map whose goal is walled off from the start; returns (grid, start, goal)."""
    return TileGrid.from_strings([
        "S.#..",
        "..#.G",
    ])


@pytest.fixture
def reopen_graph() -> AdjacencyGraph:
    """
    Graph where C is first closed via S-B-C (cost 3) and later reached
    more cheaply via S-A-C (cost 2). Shortest S->G is S-A-C-G, cost 5.
    """
    return AdjacencyGraph.from_edges([
        ("S", "A", 1),
        ("S", "B", 3),
        ("A", "C", 1),
        ("B", "C", 0),
        ("C", "G", 3),
    ])


@pytest.fixture
def reopen_heuristic():
    """Admissible but inconsistent estimate that delays expanding A."""
    estimates = {"A": 3.0}

    def heuristic(start, node, goal) -> float:
        return estimates.get(node.key, 0.0)

    return heuristic
