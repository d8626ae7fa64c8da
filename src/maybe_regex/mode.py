"""Heuristic classification of needles as regex or literal."""

import logging
from enum import Enum, auto

logger = logging.getLogger(__name__)


# Simplistic check: any one of these makes a needle a regex.
REGEX_METACHARACTERS = frozenset("$^.*+?[](){}|\\")


class Mode(Enum):
    """How a needle is searched for."""

    LITERAL = auto()
    REGEX = auto()


def detect_mode(pattern: str) -> Mode:
    """Classify a needle (with any negation marker already removed)."""
    if any(ch in REGEX_METACHARACTERS for ch in pattern):
        mode = Mode.REGEX
    else:
        mode = Mode.LITERAL
    logger.debug("Classified needle %r as %s", pattern, mode.name)
    return mode
