"""Wildcard matching against parsed or raw patterns."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable, Sequence

from wildcard.observability.tracing import MatchEvent, TraceSink
from wildcard.parser import parse_pattern
from wildcard.types import Segment, SegmentSequence, Wildcard
from wildcard.utils.pattern import ends_with_wild, equals_wild, index_of_wild

__all__ = ["match_found", "match_pattern", "compile", "filter", "WildcardPattern"]

_logger = logging.getLogger("wildcard.matcher")


class _SegmentSearch:
    """Backtracking search of one target against a multi-segment sequence.

    Holds per-call state only; the sequence itself is never modified.
    """

    __slots__ = ("_segments", "_target", "_failed", "steps")

    def __init__(self, segments: tuple[Segment, ...], target: str) -> None:
        self._segments = segments
        self._target = target
        self._failed: set[tuple[int, int]] = set()
        self.steps = 0

    def _resolve(self, segment_index: int, target_index: int) -> bool | None:
        """Decide a state directly, or return None if it needs an occurrence scan."""
        self.steps += 1
        segments = self._segments
        target = self._target

        if segment_index >= len(segments):
            return True

        segment = segments[segment_index]
        if target_index >= len(target):
            # Only a trailing '*' can match nothing.
            return isinstance(segment, Wildcard)

        if isinstance(segment, Wildcard):
            if segment_index == 0:
                return self._resolve(1, 0)
            return True

        if segment_index == len(segments) - 1:
            return ends_with_wild(target[target_index:], segment.text)

        if (segment_index, target_index) in self._failed:
            return False
        return None

    def find_match(self, segment_index: int = 0, target_index: int = 0) -> bool:
        """Return whether target[target_index:] satisfies segments[segment_index:].

        Interior literals are scanned with an explicit stack of
        [segment_index, target_index, occurrence] frames, so the pattern
        length is not bounded by the recursion limit.
        """
        decided = self._resolve(segment_index, target_index)
        if decided is not None:
            return decided

        segments = self._segments
        target = self._target
        if segment_index == 0 and isinstance(segments[0], Wildcard):
            segment_index, target_index = 1, 0

        stack = [[segment_index, target_index, index_of_wild(target, segments[segment_index].text, target_index)]]
        while stack:
            frame = stack[-1]
            seg, start, found = frame
            literal = segments[seg].text

            # No leading '*': the first literal is anchored at the start.
            if found < 0 or (seg == 0 and found > start):
                self._failed.add((seg, start))
                stack.pop()
                if stack:
                    parent = stack[-1]
                    parent[2] = index_of_wild(target, segments[parent[0]].text, parent[2] + 1)
                continue

            next_start = found + len(literal)
            decided = self._resolve(seg + 1, next_start)
            if decided:
                return True
            if decided is None:
                stack.append([seg + 1, next_start, index_of_wild(target, segments[seg + 1].text, next_start)])
            else:
                frame[2] = index_of_wild(target, literal, found + 1)

        return False


def _match_segments(sequence: SegmentSequence, target: str) -> tuple[bool, int]:
    if len(sequence) == 1:
        segment = sequence[0]
        if isinstance(segment, Wildcard):
            return True, 0
        return equals_wild(target, segment.text), 0

    search = _SegmentSearch(sequence.segments, target)
    return search.find_match(0, 0), search.steps


def _report(
    trace: TraceSink | None,
    pattern: str | None,
    target: str | None,
    ignore_case: bool,
    matched: bool,
    steps: int,
    start_time: float,
) -> None:
    _logger.debug("The match on %s for %s is %s", pattern, target, matched)
    if trace is None:
        return
    event = MatchEvent(
        pattern=pattern,
        target=target,
        ignore_case=ignore_case,
        matched=matched,
        steps=steps,
        start_time=start_time,
        end_time=time.time(),
    )
    try:
        trace.export(event)
    except Exception:
        _logger.warning("Trace sink %r failed", trace, exc_info=True)


def match_found(
    pattern: str | None,
    target: str | None,
    ignore_case: bool = False,
    trace: TraceSink | None = None,
) -> bool:
    """Return whether target fits the pattern, parsing the pattern on every call.

    Use parse_pattern() with match_pattern(), or compile(), when the same
    pattern is checked against many strings.

    Args:
        pattern: The pattern. A None or empty pattern matches anything.
        target: The string to test. None or empty never matches a non-empty
            pattern.
        ignore_case: Compare the upper-cased pattern and target.
        trace: Optional sink receiving a MatchEvent for this call.

    Returns:
        True if target matches pattern, False otherwise.
    """
    start_time = time.time()
    steps = 0
    if not pattern:
        matched = True
    elif not target:
        matched = False
    else:
        pat, text = (pattern.upper(), target.upper()) if ignore_case else (pattern, target)
        sequence = parse_pattern(pat)
        matched, steps = _match_segments(sequence, text) if sequence else (True, 0)

    _report(trace, pattern, target, ignore_case, matched, steps, start_time)
    return matched


def match_pattern(
    sequence: SegmentSequence | Sequence[Segment] | None,
    target: str | None,
    ignore_case: bool = False,
    trace: TraceSink | None = None,
) -> bool:
    """Return whether target fits an already parsed pattern.

    A sequence parsed with ignore_case=True always matches case-insensitively.

    Args:
        sequence: Output of parse_pattern(). None or empty matches anything.
        target: The string to test.
        ignore_case: Upper-case the target and the sequence's literals.
        trace: Optional sink receiving a MatchEvent for this call.
    """
    start_time = time.time()
    if sequence is not None and not isinstance(sequence, SegmentSequence):
        sequence = SegmentSequence(segments=tuple(sequence))

    if sequence is not None and sequence.ignore_case:
        ignore_case = True

    steps = 0
    if not sequence:
        matched = True
    elif not target:
        matched = False
    elif ignore_case:
        matched, steps = _match_segments(sequence.upper(), target.upper())
    else:
        matched, steps = _match_segments(sequence, target)

    pattern = sequence.pattern if sequence else None
    _report(trace, pattern, target, ignore_case, matched, steps, start_time)
    return matched


@dataclass(frozen=True)
class WildcardPattern:
    """A pattern parsed once and matched against many strings.

    Immutable, so one instance can be shared between threads.
    """

    pattern: str | None
    ignore_case: bool
    sequence: SegmentSequence | None

    def match(self, target: str | None, trace: TraceSink | None = None) -> bool:
        return match_pattern(self.sequence, target, self.ignore_case, trace=trace)

    def filter(self, targets: Iterable[str | None]) -> list[str | None]:
        """Return the targets that match, in their original order."""
        return [t for t in targets if self.match(t)]


def compile(pattern: str | None, ignore_case: bool = False) -> WildcardPattern:
    return WildcardPattern(
        pattern=pattern,
        ignore_case=ignore_case,
        sequence=parse_pattern(pattern, ignore_case),
    )


def filter(
    pattern: str | None,
    targets: Iterable[str | None],
    ignore_case: bool = False,
) -> list[str | None]:
    """Return the members of targets that match pattern."""
    return compile(pattern, ignore_case).filter(targets)
