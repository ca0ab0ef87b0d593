"""
Path reconstruction from predecessor links.

reconstruct_path() is a generator: it yields one PathStep per node while
walking from the goal back to the start, then returns the start-to-goal
node list, so callers write ``path = yield from reconstruct_path(...)``.
"""

from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from typing import Any

from pathsearch.search.events import PathStep, SearchEvent
from pathsearch.search.records import NodeRecord, RecordTable

Suspend = Callable[[SearchEvent], Iterator[SearchEvent]]


def walk_back(table: RecordTable, record: NodeRecord) -> Iterator[NodeRecord]:
    """Yield ``record`` and its predecessors, goal first, ending at the start record."""
    current: NodeRecord | None = record
    seen = 0
    while current is not None:
        yield current
        seen += 1
        if seen > len(table):
            raise RuntimeError("Predecessor links form a cycle")
        current = table.predecessor(current)


def reconstruct_path(
    table: RecordTable,
    record: NodeRecord,
    suspend: Suspend | None = None,
) -> Generator[SearchEvent, None, list[Any]]:
    """
    Walk the predecessor links ending at ``record``.

    Args:
        table: Records of the finished search
        record: Terminal (goal) record
        suspend: Optional generator function each PathStep is delegated to,
            in place of yielding it directly

    Yields:
        One PathStep per node, goal first

    Returns:
        The path as a start-to-goal list of nodes
    """
    nodes = []
    for step in walk_back(table, record):
        nodes.append(step.node)
        event = PathStep(step.node, step.cost_so_far)
        if suspend is None:
            yield event
        else:
            yield from suspend(event)
    nodes.reverse()
    return nodes
