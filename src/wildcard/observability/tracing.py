"""Match tracing: MatchEvent dataclass and TraceSink implementations."""

from __future__ import annotations

import collections
import dataclasses
import json
import logging
import sys
import threading
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "MatchEvent",
    "TraceSink",
    "InMemorySink",
    "StdoutSink",
    "LoggingSink",
]


@dataclass(frozen=True)
class MatchEvent:
    """Outcome of one top-level match call.

    Attributes:
        pattern: Pattern text, or the canonical text of a parsed sequence.
        target: The candidate string.
        ignore_case: Case mode the match ran with.
        matched: The decision returned to the caller.
        steps: Number of segment search states visited.
        start_time: ``time.time()`` when the match began.
        end_time: ``time.time()`` when the decision was made.
    """

    pattern: str | None
    target: str | None
    ignore_case: bool
    matched: bool
    steps: int = 0
    start_time: float = 0.0
    end_time: float = 0.0

    @property
    def duration_ms(self) -> float:
        return (self.end_time - self.start_time) * 1000


@runtime_checkable
class TraceSink(Protocol):
    """Protocol for match event destinations."""

    def export(self, event: MatchEvent) -> None:
        """Receive a completed match event."""
        ...


class StdoutSink:
    """Writes match events as JSON lines to stdout."""

    def export(self, event: MatchEvent) -> None:
        data: dict[str, Any] = dataclasses.asdict(event)
        data["duration_ms"] = event.duration_ms
        sys.stdout.write(json.dumps(data, default=str) + "\n")


class LoggingSink:
    """Forwards match events to a stdlib logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.DEBUG) -> None:
        self._logger = logger or logging.getLogger("wildcard.trace")
        self._level = level

    def export(self, event: MatchEvent) -> None:
        self._logger.log(
            self._level,
            "match pattern=%r target=%r ignore_case=%s matched=%s steps=%d",
            event.pattern,
            event.target,
            event.ignore_case,
            event.matched,
            event.steps,
        )


class InMemorySink:
    """Collects match events in memory for testing.

    Thread-safe and bounded: uses a deque with a configurable max size.
    """

    def __init__(self, max_events: int = 10_000) -> None:
        self._events: collections.deque[MatchEvent] = collections.deque(maxlen=max_events)
        self._lock = threading.Lock()

    def export(self, event: MatchEvent) -> None:
        with self._lock:
            self._events.append(event)

    def get_events(self) -> list[MatchEvent]:
        """Return all collected events."""
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
