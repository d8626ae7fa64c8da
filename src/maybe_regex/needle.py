"""Helpers for preparing needle strings."""

from typing import Tuple

NEGATION_MARKER = "-"


def remove_first_n_chars(s: str, n: int) -> str:
    return s[n:]


def remove_last_n_chars(s: str, n: int) -> str:
    if n <= 0:
        return s
    return s[:-n]


def split_negation(needle: str) -> Tuple[str, bool]:
    """
    Strip a single negation marker from a needle.

    The leading end is checked first, so "-e-" becomes ("e-", True).
    At most one character is ever removed.

    Returns:
        (pattern, is_negative)
    """
    if needle.startswith(NEGATION_MARKER):
        return remove_first_n_chars(needle, len(NEGATION_MARKER)), True
    if needle.endswith(NEGATION_MARKER):
        return remove_last_n_chars(needle, len(NEGATION_MARKER)), True
    return needle, False
