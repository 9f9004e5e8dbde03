"""Line filters applied to blocks before they are compared.

Every filter takes a list of lines and returns a new one.
"""

import re
from functools import lru_cache
from typing import Callable

LineFilter = Callable[[list[str]], list[str]]


@lru_cache(maxsize=8)
def duration_pattern(alternatives: tuple[str, ...]) -> re.Pattern[str]:
    """Join duration alternatives into one pattern bounded by non-word characters."""
    return re.compile(r"(?<!\w)(?:" + "|".join(alternatives) + r")(?!\w)")


def trim_trailing_space(lines: list[str]) -> list[str]:
    return [line.rstrip(" \t\r\n") for line in lines]


def squeeze_blank_lines(lines: list[str]) -> list[str]:
    """Blank out whitespace-only lines and keep only the first of consecutive blanks."""
    result: list[str] = []
    last_empty = False
    for line in lines:
        if not line.strip():
            if last_empty:
                continue
            line = ""
            last_empty = True
        else:
            last_empty = False
        result.append(line)
    return result


def drop_lines(pattern: re.Pattern[str]) -> LineFilter:
    def _drop(lines: list[str]) -> list[str]:
        return [line for line in lines if pattern.search(line) is None]

    return _drop


def mask_spans(pattern: re.Pattern[str], placeholder: str) -> LineFilter:
    def _mask(lines: list[str]) -> list[str]:
        return [pattern.sub(lambda _: placeholder, line) for line in lines]

    return _mask


def redact_duration_tokens(alternatives: list[str], placeholder: str) -> LineFilter:
    pattern = duration_pattern(tuple(alternatives))

    def _redact(lines: list[str]) -> list[str]:
        # a lambda keeps backslashes in the placeholder literal
        return [pattern.sub(lambda _: placeholder, line) for line in lines]

    return _redact


def apply_filters(lines: list[str], filters: list[LineFilter]) -> list[str]:
    """Run `lines` through each filter in turn."""
    for ffilter in filters:
        lines = ffilter(lines)
    return lines
