"""Shared base types for line blocks."""

import re
from typing import Sequence, TypeAlias

# A line sequence, typically command output already split on newlines
Lines: TypeAlias = Sequence[str]

# Anything that can stand in for a compiled pattern
PatternLike: TypeAlias = re.Pattern[str] | str


def as_pattern(pattern: PatternLike) -> re.Pattern[str]:
    """Coerce a pattern string into a compiled pattern.

    Raises:
        re.error: If the pattern string is not a valid regular expression.
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def maybe_pattern(pattern: PatternLike | None) -> re.Pattern[str] | None:
    """Same as `as_pattern`, passing `None` through."""
    if pattern is None:
        return None
    return as_pattern(pattern)
