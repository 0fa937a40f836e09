"""Segment types: Literal, Wildcard, SegmentSequence."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

__all__ = [
    "Literal",
    "Wildcard",
    "WILDCARD",
    "Segment",
    "SegmentSequence",
]


@dataclass(frozen=True)
class Literal:
    """Text between two ``*`` runs. May contain ``?`` placeholders."""

    text: str

    def upper(self) -> Literal:
        return Literal(self.text.upper())


@dataclass(frozen=True)
class Wildcard:
    """Marker for a ``*`` at the start or end of a pattern."""


WILDCARD = Wildcard()

Segment = Union[Literal, Wildcard]


@dataclass(frozen=True)
class SegmentSequence:
    """Parsed form of a wildcard pattern.

    A marker can only sit at index 0 (pattern starts with ``*``) or at the
    last index (pattern ends with ``*``). Consecutive literals are separated
    by an implicit ``*``.

    Attributes:
        segments: Ordered literal segments and boundary markers.
        ignore_case: Whether the literals were upper-cased at parse time.
    """

    segments: tuple[Segment, ...]
    ignore_case: bool = False

    def __len__(self) -> int:
        return len(self.segments)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __getitem__(self, index: int) -> Segment:
        return self.segments[index]

    @property
    def leading_wildcard(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[0], Wildcard)

    @property
    def trailing_wildcard(self) -> bool:
        return bool(self.segments) and isinstance(self.segments[-1], Wildcard)

    @property
    def pattern(self) -> str:
        """Canonical pattern text, with ``*`` runs collapsed."""
        if self.segments == (WILDCARD,):
            return "*"
        body = "*".join(s.text for s in self.segments if isinstance(s, Literal))
        return ("*" if self.leading_wildcard else "") + body + ("*" if self.trailing_wildcard else "")

    def upper(self) -> SegmentSequence:
        """Return a copy with every literal upper-cased."""
        if self.ignore_case:
            return self
        return SegmentSequence(
            segments=tuple(s.upper() if isinstance(s, Literal) else s for s in self.segments),
            ignore_case=True,
        )
