"""
Graph node capability used by the search engine.

The engine only needs two things from a node: its outgoing edges, in a
stable order, and a position for heuristics. Any object providing
neighbors() and position can be searched.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True)
class Edge:
    """
    One outgoing connection of a graph node.

    Attributes:
        label: Direction or edge label (e.g. Direction.UP)
        node: Neighbor node the edge leads to
        cost: Cost of traversing the edge
    """

    label: Any
    node: GraphNode
    cost: float


@runtime_checkable
class GraphNode(Protocol):
    """A searchable, hashable vertex."""

    @property
    def position(self) -> tuple[float, float]:
        """(x, y) position used by spatial heuristics."""
        ...

    def neighbors(self) -> Sequence[Edge]:
        """Outgoing edges in a stable order."""
        ...


@runtime_checkable
class Graph(Protocol):
    """A collection of nodes that can answer membership queries."""

    def __contains__(self, node: object) -> bool: ...

    def __len__(self) -> int: ...
