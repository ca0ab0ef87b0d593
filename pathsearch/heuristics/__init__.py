"""
Heuristics module.

Provides heuristic functions for guiding the search. Every heuristic has
the signature ``heuristic(start, node, goal) -> float`` and must never
return a negative value.

- zero: Always 0; turns A* into Dijkstra
- manhattan: |dx| + |dy| between node and goal
- cross_product: Manhattan plus a tiny bias towards the start->goal line
"""

from __future__ import annotations

import math
from collections.abc import Callable
from typing import Any

from pathsearch.config import CROSS_PRODUCT_WEIGHT

Heuristic = Callable[[Any, Any, Any], float]


def zero(start: Any, node: Any, goal: Any) -> float:
    """Uniform heuristic: no estimate at all."""
    return 0.0


def manhattan(start: Any, node: Any, goal: Any) -> float:
    """Manhattan distance; admissible on a four-connected uniform grid."""
    nx, ny = node.position
    gx, gy = goal.position
    return abs(nx - gx) + abs(ny - gy)


def make_cross_product(weight: float = CROSS_PRODUCT_WEIGHT) -> Heuristic:
    """
    Build a cross-product tie-break heuristic with the given bias weight.

    Among nodes with equal Manhattan distance, the ones closer to the
    straight line from start to goal get a slightly smaller estimate, so
    the search prefers straighter-looking paths.

    The cross product is divided by the lengths of both vectors, leaving
    the sine of the angle between them, so the bias is at most
    ``weight * scale`` on any map size. ``scale`` is the goal's step size
    (a tile's grid scale) or 1.0 for nodes that carry none.

    Raises:
        ValueError: If weight is outside [0, 1)
    """
    if not 0 <= weight < 1:
        raise ValueError(f"Cross-product weight must be in [0, 1), got {weight}")

    def cross_product(start: Any, node: Any, goal: Any) -> float:
        nx, ny = node.position
        sx, sy = start.position
        gx, gy = goal.position
        dx1, dy1 = nx - gx, ny - gy
        dx2, dy2 = sx - gx, sy - gy
        estimate = manhattan(start, node, goal)

        norm = math.hypot(dx1, dy1) * math.hypot(dx2, dy2)
        if norm == 0:
            return estimate
        sine = abs(dx1 * dy2 - dy1 * dx2) / norm
        return estimate + weight * getattr(goal, "scale", 1.0) * sine

    return cross_product


cross_product = make_cross_product()

HEURISTICS: dict[str, Heuristic] = {
    "zero": zero,
    "uniform": zero,
    "dijkstra": zero,
    "manhattan": manhattan,
    "cross_product": cross_product,
    "cross-product": cross_product,
}


def get_heuristic(name: str | Heuristic) -> Heuristic:
    """
    Get a heuristic by name.

    Args:
        name: Heuristic identifier (zero, uniform, dijkstra, manhattan, cross_product),
            or a heuristic function, which is returned unchanged

    Returns:
        The heuristic function

    Raises:
        ValueError: If heuristic name is unknown
    """
    if callable(name):
        return name

    key = name.lower()
    if key not in HEURISTICS:
        available = ", ".join(HEURISTICS.keys())
        raise ValueError(f"Unknown heuristic '{name}'. Available: {available}")
    return HEURISTICS[key]


__all__ = [
    "HEURISTICS",
    "Heuristic",
    "cross_product",
    "get_heuristic",
    "make_cross_product",
    "manhattan",
    "zero",
]
