"""
Search options, results, and timing.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(frozen=True)
class SearchOptions:
    """
    Caller choices for a single search.

    Attributes:
        collect_path: Reconstruct the path on success (cost is reported either way)
        emit_events: Send events to the sink and yield them from steps()
    """

    collect_path: bool = True
    emit_events: bool = True


@dataclass(frozen=True)
class Found:
    """
    A path from start to goal was found.

    Attributes:
        path: Nodes from start to goal inclusive (empty if collect_path was off)
        cost: Total cost of the path
        nodes_expanded: Open + closed records when the search stopped
        elapsed_seconds: Time spent inside the engine
    """

    path: tuple[Any, ...]
    cost: float
    nodes_expanded: int
    elapsed_seconds: float

    @property
    def found(self) -> bool:
        return True

    @property
    def path_length(self) -> int:
        """Number of edges on the path."""
        return max(len(self.path) - 1, 0)


@dataclass(frozen=True)
class NotFound:
    """The open set ran dry without reaching the goal."""

    nodes_expanded: int
    elapsed_seconds: float

    @property
    def found(self) -> bool:
        return False


SearchResult = Union[Found, NotFound]


@dataclass
class Stopwatch:
    """
    Accumulating wall-clock timer owned by one search.

    Can be stopped and restarted; elapsed only counts running time.
    """

    _elapsed: float = 0.0
    _started_at: float | None = field(default=None, repr=False)

    def start(self) -> None:
        if self._started_at is None:
            self._started_at = time.perf_counter()

    def stop(self) -> None:
        if self._started_at is not None:
            self._elapsed += time.perf_counter() - self._started_at
            self._started_at = None

    @property
    def running(self) -> bool:
        return self._started_at is not None

    @property
    def elapsed(self) -> float:
        """Seconds accumulated so far, including the current run."""
        if self._started_at is None:
            return self._elapsed
        return self._elapsed + time.perf_counter() - self._started_at

    def __enter__(self) -> Stopwatch:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()
