"""Main entrypoint. Exposes the public API."""

from tbp.blocks import (
    Block,
    BlockArray,
    FetchResult,
    MatchResult,
    cut,
    fetch_block,
    match_in_block,
    prefix_end_pattern,
    remove_from_block,
    segment,
    slice_match_in_block,
    solo_match_in_block,
)
from tbp.processor import DiffSettings, diff_blocks, diff_format, normalize, redact_durations, render
from tbp.common.utils.interpolate import interpolate
from tbp.common.utils.timeparse import epoch_to_string, parse_duration, string_to_epoch

__all__ = [
    "Block",
    "BlockArray",
    "FetchResult",
    "MatchResult",
    "cut",
    "fetch_block",
    "match_in_block",
    "prefix_end_pattern",
    "remove_from_block",
    "segment",
    "slice_match_in_block",
    "solo_match_in_block",
    "DiffSettings",
    "diff_blocks",
    "diff_format",
    "normalize",
    "redact_durations",
    "render",
    "interpolate",
    "epoch_to_string",
    "parse_duration",
    "string_to_epoch",
]
