"""wildcard observability package.

Re-exports the trace sinks that can be passed as ``trace=`` to the matcher::

    from wildcard.observability import InMemorySink, LoggingSink, StdoutSink
"""

from wildcard.observability.tracing import (
    InMemorySink,
    LoggingSink,
    MatchEvent,
    StdoutSink,
    TraceSink,
)

__all__ = [
    "InMemorySink",
    "LoggingSink",
    "MatchEvent",
    "StdoutSink",
    "TraceSink",
]
