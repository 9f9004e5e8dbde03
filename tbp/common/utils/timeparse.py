"""Duration and timestamp conversion for values scraped from device output."""

import re
from datetime import datetime, timedelta, timezone

# Units accepted by parse_duration, in seconds
_UNITS: dict[str, float] = {
    "ns": 1e-9,
    "us": 1e-6,
    "µs": 1e-6,
    "ms": 1e-3,
    "s": 1.0,
    "m": 60.0,
    "h": 3600.0,
}

_DURATION_PART = re.compile(r"(\d+(?:\.\d*)?|\.\d+)(ns|us|µs|ms|s|m|h)")

_JUNOS_TIMESTAMP = re.compile(r"^(?P<clock>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}) (?P<zone>[A-Z]{2,5})$")
_UNIX_TIMESTAMP = re.compile(
    r"^(?P<clock>[A-Z][a-z]{2} [A-Z][a-z]{2} \d{1,2} \d{2}:\d{2}:\d{2}) (?P<zone>[A-Z]{2,5}) (?P<year>\d{4})$"
)

# Offsets (seconds east of UTC) for the zone abbreviations devices print
TZ_OFFSETS: dict[str, int] = {
    "UTC": 0,
    "GMT": 0,
    "AST": -14400,
    "EST": -18000,
    "EDT": -14400,
    "CST": -21600,
    "CDT": -18000,
    "MST": -25200,
    "MDT": -21600,
    "PST": -28800,
    "PDT": -25200,
    "AKST": -32400,
    "AKDT": -28800,
    "HST": -36000,
    "HAST": -36000,
    "HADT": -32400,
    "SST": -39600,
    "SDT": -36000,
    "CHST": 36000,
}


def _parse_clock_duration(text: str) -> timedelta | None:
    """Parse a duration such as `1h30m`, `1.5h` or `-250ms`, None if malformed."""
    if not text:
        return None

    sign = 1
    if text[0] in "+-":
        sign = -1 if text[0] == "-" else 1
        text = text[1:]

    if text == "0":
        return timedelta(0)

    pos = 0
    seconds = 0.0
    for match in _DURATION_PART.finditer(text):
        if match.start() != pos:
            return None
        seconds += float(match.group(1)) * _UNITS[match.group(2)]
        pos = match.end()

    if pos == 0 or pos != len(text):
        return None
    return timedelta(seconds=sign * seconds)


def parse_duration(text: str) -> timedelta:
    """Convert a duration string to a timedelta.

    On top of the `h`/`m`/`s`/`ms`/`us`/`ns` units a leading day count is
    accepted, e.g. `3d4h5m`. Invalid strings give a zero timedelta.
    """
    days, sep, rest = text.partition("d")
    if sep:
        if not days.isdigit():
            return timedelta(0)
        clock = _parse_clock_duration(rest) if rest else timedelta(0)
        if clock is None:
            return timedelta(0)
        return timedelta(days=int(days)) + clock

    return _parse_clock_duration(text) or timedelta(0)


def string_to_epoch(text: str) -> int:
    """Convert a device timestamp to UTC epoch seconds.

    Two layouts are understood: JUNOS (`2021-03-18 10:04:05 PDT`) and `date`
    output as printed by SROS and Ubuntu (`Thu Mar 18 10:04:05 PDT 2021`).
    Unknown zone abbreviations are taken as UTC.

    Raises:
        ValueError: If the string matches neither layout.
    """
    text = " ".join(text.split())

    if match := _JUNOS_TIMESTAMP.match(text):
        parsed = datetime.strptime(match["clock"], "%Y-%m-%d %H:%M:%S")
    elif match := _UNIX_TIMESTAMP.match(text):
        parsed = datetime.strptime(f"{match['clock']} {match['year']}", "%a %b %d %H:%M:%S %Y")
    else:
        raise ValueError(f"Unrecognised timestamp: {text!r}")

    offset = TZ_OFFSETS.get(match["zone"], 0)
    return int(parsed.replace(tzinfo=timezone.utc).timestamp()) - offset


def epoch_to_string(epoch: int) -> str:
    """Format UTC epoch seconds the way `date` prints them."""
    dt = datetime.fromtimestamp(epoch, tz=timezone.utc)
    return f"{dt:%a %b} {dt.day:>2} {dt:%H:%M:%S} UTC {dt.year}"
