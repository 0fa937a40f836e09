"""Tests for MatchEvent and the trace sink implementations."""

from __future__ import annotations

import json
import logging
import threading

import pytest

from wildcard.matcher import compile, match_found, match_pattern
from wildcard.observability import InMemorySink, LoggingSink, MatchEvent, StdoutSink, TraceSink
from wildcard.parser import parse_pattern


def _event(**overrides: object) -> MatchEvent:
    fields: dict[str, object] = {
        "pattern": "a*",
        "target": "abc",
        "ignore_case": False,
        "matched": True,
        "steps": 2,
        "start_time": 10.0,
        "end_time": 10.5,
    }
    fields.update(overrides)
    return MatchEvent(**fields)  # type: ignore[arg-type]


class TestMatchEvent:
    def test_duration_ms(self) -> None:
        assert _event().duration_ms == pytest.approx(500.0)

    def test_defaults(self) -> None:
        event = MatchEvent(pattern=None, target=None, ignore_case=False, matched=True)
        assert event.steps == 0
        assert event.duration_ms == 0


class TestTraceSinkProtocol:
    """All sinks satisfy the runtime-checkable TraceSink protocol."""

    @pytest.mark.parametrize("sink_cls", [InMemorySink, StdoutSink, LoggingSink])
    def test_isinstance(self, sink_cls: type) -> None:
        assert isinstance(sink_cls(), TraceSink)

    def test_plain_object_is_not_a_sink(self) -> None:
        assert not isinstance(object(), TraceSink)


class TestInMemorySink:
    def test_collects_events(self) -> None:
        sink = InMemorySink()
        sink.export(_event())
        sink.export(_event(matched=False))
        assert [e.matched for e in sink.get_events()] == [True, False]

    def test_bounded(self) -> None:
        sink = InMemorySink(max_events=2)
        for target in ["a", "b", "c"]:
            sink.export(_event(target=target))
        assert [e.target for e in sink.get_events()] == ["b", "c"]

    def test_clear(self) -> None:
        sink = InMemorySink()
        sink.export(_event())
        sink.clear()
        assert sink.get_events() == []

    def test_concurrent_matches_share_sink(self) -> None:
        sink = InMemorySink()

        def worker() -> None:
            for _ in range(50):
                match_found("*b*", "abc", trace=sink)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        events = sink.get_events()
        assert len(events) == 200
        assert all(e.matched for e in events)

    def test_shared_parsed_pattern_across_threads(self) -> None:
        """One parsed sequence and one compiled pattern serve many threads."""
        sink = InMemorySink()
        shared_seq = parse_pattern("*a?c*e")
        shared_compiled = compile("*A?C*E", ignore_case=True)
        targets = {"xabcde": True, "abcq": False, "zzaxcqqe": True, "abcd": False}
        failures: list[str] = []

        def worker() -> None:
            for _ in range(50):
                for target, expected in targets.items():
                    if match_pattern(shared_seq, target, trace=sink) is not expected:
                        failures.append(target)
                    if shared_compiled.match(target.upper()) is not expected:
                        failures.append(target)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert failures == []
        assert len(sink.get_events()) == 4 * 50 * len(targets)
        assert shared_seq == parse_pattern("*a?c*e")


class TestStdoutSink:
    def test_writes_json_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        StdoutSink().export(_event())
        out = capsys.readouterr().out
        assert out.endswith("\n")
        data = json.loads(out)
        assert data["pattern"] == "a*"
        assert data["matched"] is True
        assert data["duration_ms"] == pytest.approx(500.0)


class TestLoggingSink:
    def test_logs_at_debug_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="wildcard.trace"):
            LoggingSink().export(_event())
        [record] = caplog.records
        assert record.levelno == logging.DEBUG
        assert "pattern='a*'" in record.getMessage()
        assert "matched=True" in record.getMessage()

    def test_custom_logger_and_level(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("tests.custom_trace")
        with caplog.at_level(logging.INFO, logger="tests.custom_trace"):
            LoggingSink(logger=logger, level=logging.INFO).export(_event(matched=False))
        [record] = caplog.records
        assert record.name == "tests.custom_trace"
        assert "matched=False" in record.getMessage()
