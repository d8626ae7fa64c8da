"""Error types raised by maybe-regex."""

from typing import Optional


class MaybeRegexError(Exception):
    """Base class for all maybe-regex errors."""

    def __init__(self, message: str = ""):
        self.message = message
        super().__init__(message)


class InvalidPatternError(MaybeRegexError):
    """A needle that looks like a regex but does not compile."""

    def __init__(self, pattern: str, reason: str = "", position: Optional[int] = None):
        self.pattern = pattern
        self.reason = reason
        self.position = position
        # Include position in error message if the engine reported one
        if position is not None:
            formatted_message = f"Bad regex {pattern!r}: {reason} (position {position})"
        elif reason:
            formatted_message = f"Bad regex {pattern!r}: {reason}"
        else:
            formatted_message = f"Bad regex {pattern!r}"
        super().__init__(formatted_message)
