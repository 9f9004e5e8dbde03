"""Expand command templates into concrete commands.

A template marks the variable words between `^` and `$`:

- `^0-4$` expands to 0, 1, 2, 3, 4
- `^0-5+2$` expands to 0, 2, 4
- `^34, er_8, 9 8y$` expands to 34, er_8, 9 8y

Markers are combined as a cartesian product in the order they appear, so
`"I had ^2-3$ eggs for ^breakfast, dinner$"` gives four sentences.
"""

import re

_MARKER = re.compile(r"(?:\^\s*(\d+)\s*-\s*(\d+)\s*(?:\+(\d+))?\$)|(?:\^([\w\s,]+)\$)")


def _expand_marker(match: re.Match[str]) -> list[str]:
    if match.group(4) is not None:
        return [word.strip() for word in match.group(4).split(",")]

    start, end = int(match.group(1)), int(match.group(2))
    step = int(match.group(3) or 1) or 1  # "+0" would never advance
    # The first value is kept verbatim, so "^01-03$" starts with "01"
    values = [match.group(1)]
    values.extend(str(n) for n in range(start + step, end + 1, step))
    return values


def interpolate(template: str) -> list[str] | None:
    """Expand every marker in `template`; None if there is nothing to expand."""
    markers = list(_MARKER.finditer(template))
    if not markers:
        return None

    results = [template]
    for marker in markers:
        expansions = _expand_marker(marker)
        results = [result.replace(marker.group(0), value, 1) for result in results for value in expansions]
    return results
