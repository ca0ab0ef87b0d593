"""
Exceptions raised for malformed search input.

An unreachable goal is not an error: it is reported as a NotFound result.
"""

from __future__ import annotations

from typing import Any


class PathSearchError(Exception):
    """Base class for all path search errors."""


class InvalidArgument(PathSearchError, ValueError):
    """Start or goal is missing from the graph, or the graph is empty."""


class NegativeEdgeCost(PathSearchError, ValueError):
    """An edge with a negative or non-finite cost was discovered during expansion."""

    def __init__(self, node: Any, neighbor: Any, cost: float) -> None:
        self.node = node
        self.neighbor = neighbor
        self.cost = cost
        super().__init__(
            f"Invalid edge cost {cost} on edge {node!r} -> {neighbor!r}"
        )
