"""
General weighted graph stored as adjacency lists.

Nodes are identified by hashable keys ({key: [(neighbor_key, cost), ...]}),
the same shape as a link graph loaded from disk. Each key gets one Vertex
object that the search engine can expand.

Usage:
    graph = AdjacencyGraph.from_edges(
        [("A", "B", 1.0), ("B", "C", 2.5)],
        positions={"A": (0, 0), "B": (1, 0), "C": (2, 0)},
    )
    result = search(graph["A"], graph["C"], "zero", graph=graph)
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import msgpack

from pathsearch.errors import InvalidArgument
from pathsearch.graph.base import Edge

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Vertex:
    """A node of an AdjacencyGraph; compares and hashes by identity."""

    graph: AdjacencyGraph = field(repr=False)
    key: Hashable
    position: tuple[float, float] = (0.0, 0.0)

    def neighbors(self) -> list[Edge]:
        return self.graph.neighbors(self)


class AdjacencyGraph:
    """Directed weighted graph; edges keep the order they were added in."""

    def __init__(self) -> None:
        self._vertices: dict[Hashable, Vertex] = {}
        self._edges: dict[Hashable, list[Edge]] = {}

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple],
        positions: Mapping[Hashable, tuple[float, float]] | None = None,
        directed: bool = True,
    ) -> AdjacencyGraph:
        """
        Build a graph from (u, v, cost) or (u, v, cost, label) tuples.

        Args:
            edges: Edge tuples
            positions: Optional key -> (x, y) for spatial heuristics
            directed: If False, every edge is added in both directions
        """
        graph = cls()
        for key, position in (positions or {}).items():
            graph.add_node(key, position)
        for edge in edges:
            u, v, cost, *rest = edge
            label = rest[0] if rest else None
            graph.add_edge(u, v, cost, label)
            if not directed:
                graph.add_edge(v, u, cost, label)
        return graph

    @classmethod
    def from_adjacency(
        cls,
        adjacency: Mapping[Hashable, Iterable[tuple[Hashable, float]]],
        positions: Mapping[Hashable, tuple[float, float]] | None = None,
    ) -> AdjacencyGraph:
        """Build a graph from {node: [(neighbor, cost), ...]}."""
        graph = cls()
        for key, position in (positions or {}).items():
            graph.add_node(key, position)
        for u, targets in adjacency.items():
            graph.add_node(u)
            for v, cost in targets:
                graph.add_edge(u, v, cost)
        return graph

    def add_node(self, key: Hashable, position: tuple[float, float] | None = None) -> Vertex:
        """Get or create the vertex for ``key``, updating its position if given."""
        vertex = self._vertices.get(key)
        if vertex is None:
            vertex = Vertex(self, key)
            self._vertices[key] = vertex
            self._edges[key] = []
        if position is not None:
            vertex.position = (float(position[0]), float(position[1]))
        return vertex

    def add_edge(self, u: Hashable, v: Hashable, cost: float, label: Hashable = None) -> Edge:
        """
        Add a directed edge u -> v.

        Negative costs are accepted here; the search engine rejects them
        when the edge is discovered.
        """
        self.add_node(u)
        target = self.add_node(v)
        edge = Edge(label if label is not None else v, target, float(cost))
        self._edges[u].append(edge)
        return edge

    def neighbors(self, vertex: Vertex) -> list[Edge]:
        return list(self._edges[vertex.key])

    def node(self, key: Hashable) -> Vertex:
        """
        Get the vertex for ``key``.

        Raises:
            InvalidArgument: If the key is not in the graph
        """
        try:
            return self._vertices[key]
        except KeyError:
            raise InvalidArgument(f"Node {key!r} is not in the graph") from None

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._edges.values())

    def to_dict(self) -> dict:
        """msgpack-friendly representation: node keys, positions, and edges."""
        return {
            "nodes": [[v.key, list(v.position)] for v in self._vertices.values()],
            "edges": [
                [u, edge.node.key, edge.cost]
                for u, edges in self._edges.items()
                for edge in edges
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> AdjacencyGraph:
        """
        Rebuild a graph from the dict produced by to_dict().

        Raises:
            InvalidArgument: If the data is not a graph
        """
        try:
            positions = {key: tuple(pos) for key, pos in data["nodes"]}
            edges = [tuple(e) for e in data["edges"]]
            return cls.from_edges(edges, positions=positions)
        except (KeyError, IndexError, TypeError, ValueError) as e:
            raise InvalidArgument(f"Malformed graph data: {e}") from e

    def save(self, path: str | Path) -> Path:
        """Write the graph to ``path`` as msgpack."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            msgpack.pack(self.to_dict(), f)
        logger.info(f"Saved graph with {len(self):,} nodes to {path}")
        return path

    @classmethod
    def load(cls, path: str | Path) -> AdjacencyGraph:
        """
        Load a graph written by save().

        Raises:
            InvalidArgument: If the file is not a valid graph
        """
        path = Path(path)
        logger.info(f"Loading graph from {path}...")
        with open(path, "rb") as f:
            try:
                data = msgpack.load(f, use_list=False)
            except (msgpack.ExtraData, msgpack.FormatError, msgpack.StackError, ValueError) as e:
                raise InvalidArgument(f"{path} is not a valid graph file: {e}") from e
        graph = cls.from_dict(data)
        logger.info(f"Loaded {len(graph):,} nodes, {graph.edge_count():,} edges")
        return graph

    def __getitem__(self, key: Hashable) -> Vertex:
        return self.node(key)

    def __contains__(self, node: object) -> bool:
        return isinstance(node, Vertex) and node.graph is self

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices.values())
