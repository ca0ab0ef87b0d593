"""
Search module.

Provides the search engine and its bookkeeping:
- SearchEngine: Step-by-step best-first search (Dijkstra / A*)
- search / dijkstra / astar: One-call helpers
- NodeRecord / RecordTable: Open and closed sets
- Active / Opened / Closed / PathStep: Events sent to sinks
- Found / NotFound: Search results
"""

from pathsearch.search.engine import SearchEngine, astar, dijkstra, search
from pathsearch.search.events import (
    Active,
    Closed,
    EventKind,
    EventSink,
    FanOutSink,
    LoggingSink,
    NullSink,
    Opened,
    PathStep,
    RecordingSink,
    SearchEvent,
)
from pathsearch.search.path import reconstruct_path
from pathsearch.search.records import NodeRecord, RecordState, RecordTable
from pathsearch.search.result import Found, NotFound, SearchOptions, SearchResult, Stopwatch

__all__ = [
    "Active",
    "Closed",
    "EventKind",
    "EventSink",
    "FanOutSink",
    "Found",
    "LoggingSink",
    "NodeRecord",
    "NotFound",
    "NullSink",
    "Opened",
    "PathStep",
    "RecordState",
    "RecordTable",
    "RecordingSink",
    "SearchEngine",
    "SearchEvent",
    "SearchOptions",
    "SearchResult",
    "Stopwatch",
    "astar",
    "dijkstra",
    "reconstruct_path",
    "search",
]
