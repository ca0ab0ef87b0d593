"""
Graph module.

Provides the graph types the search engine runs on:
- Edge / GraphNode / Graph: The capability interface a searchable node provides
- TileGrid / Tile / Direction: Four-connected tile grid
- AdjacencyGraph / Vertex: General weighted graph from adjacency lists
- load_grid / save_grid: msgpack map files
"""

from pathsearch.graph.adjacency import AdjacencyGraph, Vertex
from pathsearch.graph.base import Edge, Graph, GraphNode
from pathsearch.graph.grid import Direction, Tile, TileGrid
from pathsearch.graph.loader import load_grid, save_grid

__all__ = [
    "AdjacencyGraph",
    "Direction",
    "Edge",
    "Graph",
    "GraphNode",
    "Tile",
    "TileGrid",
    "Vertex",
    "load_grid",
    "save_grid",
]
