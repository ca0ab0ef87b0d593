"""
Path Search.

A best-first graph search library implementing Dijkstra's algorithm and
A* on top of one shared node-expansion loop, with a tile-grid graph,
pluggable heuristics, and step-by-step search events for visualization.
"""

from pathsearch.errors import InvalidArgument, NegativeEdgeCost, PathSearchError
from pathsearch.search import (
    Found,
    NotFound,
    SearchEngine,
    SearchOptions,
    SearchResult,
    astar,
    dijkstra,
    search,
)

__version__ = "0.1.0"

__all__ = [
    "Found",
    "InvalidArgument",
    "NegativeEdgeCost",
    "NotFound",
    "PathSearchError",
    "SearchEngine",
    "SearchOptions",
    "SearchResult",
    "astar",
    "dijkstra",
    "search",
]
