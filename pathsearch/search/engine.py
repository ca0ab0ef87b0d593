"""
Best-first search engine shared by Dijkstra and A*.

The engine is a generator: steps() yields one event at each state
transition (active, opened, closed, path step), so a caller can pace the
search, for example to animate it, without the engine knowing about time.
run() simply drives the generator to completion.

Dijkstra is A* with the zero heuristic; both go through the same loop.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterator
from typing import Any

from pathsearch.config import DEFAULT_HEURISTIC
from pathsearch.errors import InvalidArgument, NegativeEdgeCost
from pathsearch.graph.base import Edge, Graph
from pathsearch.heuristics import Heuristic, get_heuristic, zero
from pathsearch.search.events import Active, Closed, EventSink, NullSink, Opened, SearchEvent
from pathsearch.search.path import reconstruct_path
from pathsearch.search.records import NodeRecord, RecordTable
from pathsearch.search.result import Found, NotFound, SearchOptions, SearchResult, Stopwatch

EdgeCost = Callable[[Any, Edge], float]

logger = logging.getLogger(__name__)


def edge_weight(node: Any, edge: Edge) -> float:
    """Default edge cost: the cost the edge carries."""
    return edge.cost


class SearchEngine:
    """
    One search from ``start`` to ``goal``.

    The engine owns its open and closed sets for the duration of the search.
    Every yield happens between complete updates, so a caller may stop
    iterating steps() at any point and simply discard the engine.
    """

    def __init__(
        self,
        start: Any,
        goal: Any,
        heuristic: str | Heuristic = DEFAULT_HEURISTIC,
        *,
        graph: Graph | None = None,
        edge_cost: EdgeCost | None = None,
        sink: EventSink | None = None,
        options: SearchOptions | None = None,
    ) -> None:
        """
        Initialize the search.

        Args:
            start: Node to search from
            goal: Node to reach
            heuristic: Heuristic name or function (start, node, goal) -> float
            graph: Optional graph used to validate start and goal
            edge_cost: Optional override (node, edge) -> cost; defaults to edge.cost
            sink: Receives events as they happen; a NullSink if omitted
            options: Path collection and event emission switches

        Raises:
            InvalidArgument: If start/goal are missing or not in ``graph``
            ValueError: If the heuristic name is unknown
        """
        if start is None or goal is None:
            raise InvalidArgument("Start and goal nodes are required")
        if graph is not None:
            if len(graph) == 0:
                raise InvalidArgument("Graph has no nodes")
            if start not in graph:
                raise InvalidArgument(f"Start node {start!r} is not in the graph")
            if goal not in graph:
                raise InvalidArgument(f"Goal node {goal!r} is not in the graph")

        self._start = start
        self._goal = goal
        self._heuristic = get_heuristic(heuristic)
        self._edge_cost = edge_cost or edge_weight
        self._sink = sink or NullSink()
        self._options = options or SearchOptions()

        self._table = RecordTable()
        self._watch = Stopwatch()
        self._result: SearchResult | None = None
        self._started = False

    @property
    def table(self) -> RecordTable:
        """Open and closed records of this search."""
        return self._table

    @property
    def result(self) -> SearchResult | None:
        """Final result, or None until the search has finished."""
        return self._result

    @property
    def finished(self) -> bool:
        return self._result is not None

    def run(self) -> SearchResult:
        """Run the search to completion and return the result."""
        for _ in self.steps():
            pass
        return self._result

    def steps(self) -> Iterator[SearchEvent]:
        """
        Run the search one event at a time.

        Yields the same events the sink receives, in the same order. When
        emit_events is off nothing is yielded but the search still runs.

        Raises:
            NegativeEdgeCost: If an edge with negative cost is discovered
            RuntimeError: If called a second time on the same engine
        """
        if self._started:
            raise RuntimeError("A SearchEngine can only be run once")
        self._started = True

        with self._watch:
            reached = yield from self._expand()

        nodes_expanded = self._table.open_count + self._table.closed_count
        elapsed = self._watch.elapsed

        logger.info(f"Seconds Elapsed: {elapsed:.4f}")
        logger.info(f"Nodes Expanded: {nodes_expanded}")

        if reached is None:
            logger.info(f"Search failed: no path from {self._start!r} to {self._goal!r}")
            self._result = NotFound(nodes_expanded=nodes_expanded, elapsed_seconds=elapsed)
            return

        path: list[Any] = []
        if self._options.collect_path:
            path = yield from reconstruct_path(self._table, reached, self._suspend)
            logger.info(f"Path Length: {len(path) - 1}")

        self._result = Found(
            path=tuple(path),
            cost=reached.cost_so_far,
            nodes_expanded=nodes_expanded,
            elapsed_seconds=elapsed,
        )

    def _expand(self) -> Iterator[SearchEvent]:
        """Main loop. Returns the goal record, or None if the goal is unreachable."""
        table = self._table
        start, goal = self._start, self._goal

        table.add(start, 0.0, None, self._heuristic(start, start, goal))

        while table.has_open():
            current = table.peek_min()
            yield from self._suspend(Active(current.node, current.cost_so_far))

            if current.node == goal:
                return current

            for edge in current.node.neighbors():
                opened = self._relax(current, edge)
                if opened is None:
                    continue
                yield from self._suspend(opened)

            table.close(current)
            yield from self._suspend(Closed(current.node, current.cost_so_far))

        return None

    def _relax(self, current: NodeRecord, edge: Edge) -> Opened | None:
        """
        Offer the route through ``current`` to the edge's target.

        Returns:
            The Opened event if the target was discovered or improved, else None
        """
        cost = self._edge_cost(current.node, edge)
        if not 0 <= cost < math.inf:
            raise NegativeEdgeCost(current.node, edge.node, cost)

        tentative = current.cost_so_far + cost
        record = self._table.get(edge.node)

        if record is None:
            heuristic = self._heuristic(self._start, edge.node, self._goal)
            self._table.add(edge.node, tentative, current, heuristic)
            return Opened(edge.node, tentative)

        if tentative >= record.cost_so_far:
            return None

        # The stored estimate is reused rather than recomputed
        reopened = self._table.relax(record, tentative, current, record.heuristic)
        if reopened:
            logger.debug(f"Re-opened {edge.node!r} at cost {tentative:g}")
        return Opened(edge.node, tentative, reopened=reopened)

    def _suspend(self, event: SearchEvent) -> Iterator[SearchEvent]:
        """Hand ``event`` to the sink and the caller; time spent suspended is not counted."""
        if not self._options.emit_events:
            return
        self._sink.on_event(event)
        timing = self._watch.running
        self._watch.stop()
        yield event
        if timing:
            self._watch.start()


def search(
    start: Any,
    goal: Any,
    heuristic: str | Heuristic = DEFAULT_HEURISTIC,
    options: SearchOptions | None = None,
    **kwargs: Any,
) -> SearchResult:
    """
    Find a minimum-cost path from ``start`` to ``goal``.

    Args:
        start: Node to search from
        goal: Node to reach
        heuristic: Heuristic name or function
        options: Path collection and event emission switches
        **kwargs: Passed to SearchEngine (graph, edge_cost, sink)

    Returns:
        Found with the path and cost, or NotFound if the goal is unreachable
    """
    return SearchEngine(start, goal, heuristic, options=options, **kwargs).run()


def dijkstra(start: Any, goal: Any, **kwargs: Any) -> SearchResult:
    """Dijkstra's algorithm: search with the zero heuristic."""
    return search(start, goal, zero, **kwargs)


def astar(
    start: Any,
    goal: Any,
    heuristic: str | Heuristic = DEFAULT_HEURISTIC,
    **kwargs: Any,
) -> SearchResult:
    """A* search guided by ``heuristic``."""
    return search(start, goal, heuristic, **kwargs)
