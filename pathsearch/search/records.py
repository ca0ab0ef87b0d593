"""
Per-search node bookkeeping.

Every node discovered during a search gets exactly one NodeRecord, stored
in an arena (a plain list) owned by a RecordTable. Predecessor links are
arena indices rather than object references, so re-opening a record and
changing its predecessor never leaves a dangling link.

The open set is a binary heap ordered by (estimated_total_cost, sequence).
Each time a record is (re)inserted it gets a fresh sequence number; heap
entries whose sequence no longer matches their record are stale and are
discarded when they reach the top.
"""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable, Iterator
from dataclasses import dataclass
from enum import Enum


class RecordState(Enum):
    OPEN = "open"
    CLOSED = "closed"


@dataclass
class NodeRecord:
    """
    Search bookkeeping for one node.

    Attributes:
        index: Position of this record in the arena
        node: The graph node described
        cost_so_far: Best known cost from the start node
        predecessor: Arena index of the record this one was reached from
            (None for the start record)
        estimated_total_cost: cost_so_far + heuristic estimate to the goal
        state: Whether the record is in the open or closed set
        sequence: Insertion order into the open set, used to break ties
    """

    index: int
    node: Hashable
    cost_so_far: float
    predecessor: int | None
    estimated_total_cost: float
    state: RecordState = RecordState.OPEN
    sequence: int = 0

    @property
    def heuristic(self) -> float:
        """Heuristic value stored in this record."""
        return self.estimated_total_cost - self.cost_so_far

    @property
    def is_open(self) -> bool:
        return self.state is RecordState.OPEN

    @property
    def is_closed(self) -> bool:
        return self.state is RecordState.CLOSED


class RecordTable:
    """Open and closed sets for a single search."""

    def __init__(self) -> None:
        self._records: list[NodeRecord] = []
        self._by_node: dict[Hashable, int] = {}
        self._heap: list[tuple[float, int, int]] = []
        self._sequence = itertools.count()
        self._open_count = 0
        self._closed_count = 0

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, node: Hashable) -> NodeRecord | None:
        """Record for ``node``, or None if it has not been discovered."""
        index = self._by_node.get(node)
        if index is None:
            return None
        return self._records[index]

    def predecessor(self, record: NodeRecord) -> NodeRecord | None:
        if record.predecessor is None:
            return None
        return self._records[record.predecessor]

    @property
    def open_count(self) -> int:
        return self._open_count

    @property
    def closed_count(self) -> int:
        return self._closed_count

    def has_open(self) -> bool:
        return self._open_count > 0

    def open_records(self) -> Iterator[NodeRecord]:
        return (r for r in self._records if r.is_open)

    def closed_records(self) -> Iterator[NodeRecord]:
        return (r for r in self._records if r.is_closed)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, node: object) -> bool:
        return node in self._by_node

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(
        self,
        node: Hashable,
        cost_so_far: float,
        predecessor: NodeRecord | None,
        heuristic: float,
    ) -> NodeRecord:
        """Create the record for a newly discovered node and open it."""
        if node in self._by_node:
            raise KeyError(f"Node {node!r} already has a record")

        record = NodeRecord(
            index=len(self._records),
            node=node,
            cost_so_far=cost_so_far,
            predecessor=None if predecessor is None else predecessor.index,
            estimated_total_cost=cost_so_far + heuristic,
        )
        self._records.append(record)
        self._by_node[node] = record.index
        self._open_count += 1
        self._push(record)
        return record

    def relax(
        self,
        record: NodeRecord,
        cost_so_far: float,
        predecessor: NodeRecord,
        heuristic: float,
    ) -> bool:
        """
        Give ``record`` a cheaper route, re-opening it if it was closed.

        Returns:
            True if the record was taken out of the closed set
        """
        reopened = record.is_closed
        if reopened:
            self._closed_count -= 1
            self._open_count += 1
            record.state = RecordState.OPEN

        record.cost_so_far = cost_so_far
        record.predecessor = predecessor.index
        record.estimated_total_cost = cost_so_far + heuristic
        self._push(record)
        return reopened

    def close(self, record: NodeRecord) -> None:
        """Move ``record`` from the open set to the closed set."""
        if not record.is_open:
            raise ValueError(f"Record for {record.node!r} is not open")
        record.state = RecordState.CLOSED
        self._open_count -= 1
        self._closed_count += 1

    def peek_min(self) -> NodeRecord:
        """
        Open record with the lowest estimated total cost.

        Ties go to the record inserted into the open set first. The record
        stays open; call close() once it has been expanded.

        Raises:
            IndexError: If the open set is empty
        """
        while self._heap:
            _, sequence, index = self._heap[0]
            record = self._records[index]
            if record.is_open and record.sequence == sequence:
                return record
            heapq.heappop(self._heap)
        raise IndexError("peek_min() on an empty open set")

    def _push(self, record: NodeRecord) -> None:
        record.sequence = next(self._sequence)
        heapq.heappush(self._heap, (record.estimated_total_cost, record.sequence, record.index))
