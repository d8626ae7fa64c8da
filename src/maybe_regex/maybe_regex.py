"""
Main module - public interface.

Provides MaybeRegex, a search term that is treated as a regular expression
when it looks like one and as a plain substring otherwise.
"""

import re
from functools import total_ordering
from typing import Callable, List, Optional, Tuple

from .errors import InvalidPatternError
from .mode import Mode, detect_mode
from .needle import split_negation


__all__ = ['MaybeRegex', 'matches', 'is_contained_within', 'is_regex']


def _compile(pattern: str, case_sensitive: bool) -> "re.Pattern[str]":
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(pattern, flags)
    except re.error as e:
        raise InvalidPatternError(pattern, e.msg, e.pos) from e
    except (OverflowError, RecursionError) as e:
        # Oversized repeat counts and deeply nested groups
        raise InvalidPatternError(pattern, str(e)) from e


@total_ordering
class MaybeRegex:
    """
    A needle that may or may not be a regular expression.

    A leading or trailing "-" marks the needle as negative: matches() then
    succeeds only for haystacks that do not contain it.
    """

    def __init__(self, needle: str, case_sensitive: bool = False):
        """
        Create a new MaybeRegex.

        Args:
            needle: The search term, optionally prefixed or suffixed with "-"
            case_sensitive: Compare case exactly (default is case-insensitive)

        Raises:
            InvalidPatternError: The needle looks like a regex but won't compile
        """
        if not isinstance(needle, str):
            raise TypeError(f"needle must be a str, not {type(needle).__name__}")

        self.raw_needle = needle
        self.pattern, self.is_negative = split_negation(needle)
        self.mode = detect_mode(self.pattern)
        self.case_sensitive = case_sensitive

        if self.mode is Mode.REGEX:
            self._regex = _compile(self.pattern, case_sensitive)
            self._literal: Optional[str] = None
        else:
            # Case-insensitive literals go through the escaped pattern so that
            # every operation folds case the same way
            self._regex = _compile(re.escape(self.pattern), case_sensitive)
            self._literal = self.pattern if case_sensitive else None

    @classmethod
    def new(cls, needle: str) -> "MaybeRegex":
        return cls(needle)

    @classmethod
    def from_str(cls, needle: str) -> "MaybeRegex":
        return cls(needle)

    def as_case_sensitive(self) -> "MaybeRegex":
        """Return a case-sensitive version of this needle."""
        if self.case_sensitive:
            return self
        return type(self)(self.raw_needle, case_sensitive=True)

    def is_regex(self) -> bool:
        return self.mode is Mode.REGEX

    def matches(self, haystack: str) -> bool:
        """
        Test the haystack, taking negation into account.

        A negative needle matches haystacks that do NOT contain it.
        """
        return self.is_contained_within(haystack) != self.is_negative

    def is_contained_within(self, haystack: str) -> bool:
        """
        Test whether the needle occurs anywhere in the haystack.

        You likely want matches(); this ignores whether the needle is negative.
        """
        if self._literal is not None:
            return self._literal in haystack
        return self._regex.search(haystack) is not None

    def match_indices(self, haystack: str) -> List[Tuple[int, int]]:
        """
        Find every non-overlapping occurrence of the needle.

        Returns:
            List of (start, length) pairs, left to right
        """
        return [(m.start(), m.end() - m.start()) for m in self._regex.finditer(haystack)]

    def matches_exactly(self, text: str) -> bool:
        """Test whether the needle covers the whole text."""
        if self._literal is not None:
            return text == self._literal
        return self._regex.fullmatch(text) is not None

    def starts_with(self, text: str) -> bool:
        """Test whether the text begins with an occurrence of the needle."""
        if self._literal is not None:
            return text.startswith(self._literal)
        return self._regex.match(text) is not None

    def replace(self, text: str, to_string: Callable[[str], str]) -> str:
        """
        Replace every occurrence of the needle.

        Args:
            text: The text to rewrite
            to_string: Called with each matched substring, returns its replacement

        Returns:
            The rewritten text
        """
        return self._regex.sub(lambda m: to_string(m.group(0)), text)

    def _key(self) -> Tuple[str, bool]:
        return (self.pattern, self.is_negative)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MaybeRegex):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: "MaybeRegex") -> bool:
        if not isinstance(other, MaybeRegex):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return self.pattern

    def __repr__(self) -> str:
        flags = []
        if self.is_negative:
            flags.append("negative")
        if self.case_sensitive:
            flags.append("case_sensitive")
        suffix = f", {', '.join(flags)}" if flags else ""
        return f"MaybeRegex({self.raw_needle!r}, {self.mode.name.lower()}{suffix})"


def matches(needle: str, haystack: str, case_sensitive: bool = False) -> bool:
    """
    Convenience function to test a needle against a haystack.

    Args:
        needle: The search term, optionally negated with "-"
        haystack: The text to test
        case_sensitive: Compare case exactly

    Returns:
        True if matches, False otherwise
    """
    return MaybeRegex(needle, case_sensitive=case_sensitive).matches(haystack)


def is_contained_within(needle: str, haystack: str, case_sensitive: bool = False) -> bool:
    """Test whether the needle occurs in the haystack, ignoring negation."""
    return MaybeRegex(needle, case_sensitive=case_sensitive).is_contained_within(haystack)


def is_regex(needle: str) -> bool:
    return MaybeRegex(needle).is_regex()
