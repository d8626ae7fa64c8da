"""
maybe-regex - Search terms that may or may not be regular expressions.

Accepts a single user-supplied search string and decides whether to treat
it as a regex or as a plain substring, based on whether it contains regex
metacharacters. A leading or trailing "-" negates the search.
"""

__version__ = "0.1.0"

from .errors import InvalidPatternError, MaybeRegexError
from .maybe_regex import MaybeRegex, is_contained_within, is_regex, matches
from .mode import REGEX_METACHARACTERS, Mode, detect_mode
from .needle import NEGATION_MARKER

__all__ = [
    "MaybeRegex",
    "Mode",
    "MaybeRegexError",
    "InvalidPatternError",
    "REGEX_METACHARACTERS",
    "NEGATION_MARKER",
    "detect_mode",
    "matches",
    "is_contained_within",
    "is_regex",
]
