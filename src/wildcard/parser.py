"""Pattern parser: splits a wildcard pattern into literal segments."""

from __future__ import annotations

from wildcard.types import WILDCARD, Literal, Segment, SegmentSequence

__all__ = ["parse_pattern"]


def parse_pattern(pattern: str | None, ignore_case: bool = False) -> SegmentSequence | None:
    """Parse a pattern into a SegmentSequence.

    Runs of ``*`` are collapsed, so ``"a**b"`` and ``"a*b"`` parse the same.
    A leading ``*`` becomes a marker at index 0 and a trailing ``*`` a marker
    at the end, unless the pattern is made only of ``*``, in which case the
    result is a single marker.

    Args:
        pattern: The pattern to parse. May contain '*' and '?' wildcards.
        ignore_case: Upper-case every literal segment.

    Returns:
        The parsed sequence, or None for a None or empty pattern (matches
        everything).
    """
    if not pattern:
        return None

    segments: list[Segment] = []
    if pattern.startswith("*"):
        segments.append(WILDCARD)

    for text in pattern.split("*"):
        if not text:
            continue
        segments.append(Literal(text.upper() if ignore_case else text))

    if pattern.endswith("*") and any(isinstance(s, Literal) for s in segments):
        segments.append(WILDCARD)

    return SegmentSequence(segments=tuple(segments), ignore_case=ignore_case)
