"""Comparison helpers where '?' in a literal matches any single character."""

from __future__ import annotations

__all__ = ["equals_wild", "ends_with_wild", "index_of_wild"]


def equals_wild(target: str | None, literal: str | None) -> bool:
    """Compare a target against a literal that may contain '?'.

    Args:
        target: The string to test.
        literal: The literal segment. Each '?' matches exactly one character.

    Returns:
        True if both are strings of the same length and every position
        either matches or holds '?' in the literal.
    """
    if target is None or literal is None:
        return False
    if "?" not in literal:
        return target == literal
    if len(target) != len(literal):
        return False
    return all(p == "?" or p == c for p, c in zip(literal, target))


def ends_with_wild(target: str | None, literal: str | None) -> bool:
    """Return whether target ends with literal, '?' matching any character."""
    if target is None or literal is None:
        return False
    if "?" not in literal:
        return target.endswith(literal)
    if len(target) < len(literal):
        return False
    return equals_wild(target[len(target) - len(literal):], literal)


def index_of_wild(target: str | None, literal: str | None, from_index: int = 0) -> int:
    """Find the first occurrence of literal in target at or after from_index.

    Returns:
        The lowest matching index, or -1 if there is none.
    """
    if target is None or literal is None or from_index < 0:
        return -1
    if "?" not in literal:
        return target.find(literal, from_index)

    size = len(literal)
    for index in range(from_index, len(target) - size + 1):
        if equals_wild(target[index:index + size], literal):
            return index
    return -1
