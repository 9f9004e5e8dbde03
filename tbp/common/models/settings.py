"""Settings models for diff formatting."""

import re

from pydantic import BaseModel


class DiffSettings(BaseModel):
    """How a block is flattened before it is diffed against another snapshot.

    Pattern fields accept either compiled patterns or pattern strings.
    """

    drop: re.Pattern[str] | None = None  # whole lines matching this are removed (e.g. timestamps)
    mask: re.Pattern[str] | None = None  # matched spans are replaced by the mask placeholder
    redact_durations: bool = True  # replace uptime-like tokens with the duration placeholder
