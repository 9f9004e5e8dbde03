"""Internally exposed API for matching lines and cutting blocks out of captured output."""

from tbp.blocks.core import (
    EndStrategy,
    cut,
    fetch_block,
    match_in_block,
    prefix_end_pattern,
    remove_from_block,
    segment,
    slice_match_in_block,
    solo_match_in_block,
)
from tbp.blocks.models import Block, BlockArray, FetchResult, MatchResult, Title

__all__ = [
    "EndStrategy",
    "cut",
    "fetch_block",
    "match_in_block",
    "prefix_end_pattern",
    "remove_from_block",
    "segment",
    "slice_match_in_block",
    "solo_match_in_block",
    "Block",
    "BlockArray",
    "FetchResult",
    "MatchResult",
    "Title",
]
