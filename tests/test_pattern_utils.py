"""Tests for the '?'-aware comparison helpers."""

from __future__ import annotations

import pytest

from wildcard.utils.pattern import ends_with_wild, equals_wild, index_of_wild


class TestEqualsWild:
    @pytest.mark.parametrize(
        "target,literal,expected",
        [
            ("abc", "abc", True),
            ("abc", "abd", False),
            ("abc", "a?c", True),
            ("abc", "???", True),
            ("abc", "a?", False),
            ("ab", "a??", False),
            ("", "", True),
            ("?", "?", True),
        ],
    )
    def test_equality(self, target: str, literal: str, expected: bool) -> None:
        assert equals_wild(target, literal) is expected

    def test_question_mark_in_target_is_not_a_wildcard(self) -> None:
        """Only '?' in the literal is special."""
        assert equals_wild("a?c", "abc") is False

    def test_none_arguments(self) -> None:
        assert equals_wild(None, "a") is False
        assert equals_wild("a", None) is False
        assert equals_wild(None, None) is False


class TestEndsWithWild:
    @pytest.mark.parametrize(
        "target,literal,expected",
        [
            ("xabc", "abc", True),
            ("xabc", "?bc", True),
            ("xabc", "x?", False),
            ("bc", "?bc", False),
            ("abc", "", True),
        ],
    )
    def test_suffix(self, target: str, literal: str, expected: bool) -> None:
        assert ends_with_wild(target, literal) is expected

    def test_none_arguments(self) -> None:
        assert ends_with_wild(None, "a") is False
        assert ends_with_wild("a", None) is False


class TestIndexOfWild:
    def test_plain_literal_uses_substring_search(self) -> None:
        assert index_of_wild("abcabc", "bc") == 1
        assert index_of_wild("abcabc", "bc", 2) == 4
        assert index_of_wild("abcabc", "xy") == -1

    def test_wild_literal(self) -> None:
        assert index_of_wild("xxabcab", "a?c") == 2
        assert index_of_wild("xxabcab", "a?c", 3) == -1
        assert index_of_wild("xxabcadc", "a?c", 3) == 5

    def test_from_index_at_match(self) -> None:
        assert index_of_wild("abc", "?b", 0) == 0

    def test_negative_from_index(self) -> None:
        assert index_of_wild("abc", "a", -1) == -1
        assert index_of_wild("abc", "?", -1) == -1

    def test_remaining_target_too_short(self) -> None:
        assert index_of_wild("abc", "a?cd") == -1
        assert index_of_wild("abcd", "?d", 3) == -1

    def test_from_index_past_end(self) -> None:
        assert index_of_wild("abc", "?", 10) == -1
        assert index_of_wild("abc", "a", 10) == -1

    def test_none_arguments(self) -> None:
        assert index_of_wild(None, "a") == -1
        assert index_of_wild("a", None) == -1
