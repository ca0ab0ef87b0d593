"""
Search events and the sinks that consume them.

The engine reports four kinds of state transition, in order:
- Active: A node was selected from the open set for expansion
- Opened: A node was discovered or given a cheaper route
- Closed: A node finished expanding
- PathStep: A node is on the final path (emitted goal first)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class EventKind(Enum):
    ACTIVE = "active"
    OPENED = "opened"
    CLOSED = "closed"
    PATH_STEP = "path_step"


@dataclass(frozen=True)
class SearchEvent:
    """
    Base class for engine events.

    Attributes:
        node: The node whose state changed
        cost: Cost so far of the node, for display
    """

    node: Any
    cost: float

    kind = None  # set by subclasses


@dataclass(frozen=True)
class Active(SearchEvent):
    kind = EventKind.ACTIVE


@dataclass(frozen=True)
class Opened(SearchEvent):
    """A node entered the open set; ``reopened`` if it came back from closed."""

    reopened: bool = False

    kind = EventKind.OPENED


@dataclass(frozen=True)
class Closed(SearchEvent):
    kind = EventKind.CLOSED


@dataclass(frozen=True)
class PathStep(SearchEvent):
    kind = EventKind.PATH_STEP


class EventSink(Protocol):
    """Anything that can receive search events."""

    def on_event(self, event: SearchEvent) -> None: ...


class NullSink:
    """Discards every event."""

    def on_event(self, event: SearchEvent) -> None:
        pass


class RecordingSink:
    """Keeps every event in order, for tests and replays."""

    def __init__(self) -> None:
        self.events: list[SearchEvent] = []

    def on_event(self, event: SearchEvent) -> None:
        self.events.append(event)

    def of_kind(self, kind: EventKind) -> list[SearchEvent]:
        return [e for e in self.events if e.kind is kind]

    def nodes(self, kind: EventKind) -> list[Any]:
        return [e.node for e in self.events if e.kind is kind]

    def __len__(self) -> int:
        return len(self.events)


class LoggingSink:
    """Writes every event to the log at the given level."""

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def on_event(self, event: SearchEvent) -> None:
        logger.log(self._level, f"{event.kind.value:>9}: {event.node!r} (cost {event.cost:g})")


class FanOutSink:
    """Forwards each event to several sinks in order."""

    def __init__(self, *sinks: EventSink) -> None:
        self._sinks = list(sinks)

    def on_event(self, event: SearchEvent) -> None:
        for sink in self._sinks:
            sink.on_event(event)
