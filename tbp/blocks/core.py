"""Core start/end pattern block extraction over captured command output."""

import re
from typing import Callable

from tbp.blocks.models import Block, BlockArray, FetchResult, MatchResult, Title
from tbp.common.models import Lines, PatternLike, as_pattern, maybe_pattern
from tbp.common.utils.config import get_config
from tbp.common.utils.logger import get_logger

logger = get_logger("app.blocks")

# Derives the pattern that ends a block from the match on its start line
EndStrategy = Callable[[re.Match[str]], re.Pattern[str]]


def prefix_end_pattern(start: re.Match[str]) -> re.Pattern[str]:
    """End a block at the next line carrying the same literal prefix as its start line.

    The prefix is the start match's first group, followed by any non-space
    character. With a start pattern like `^(\\s*)(\\S+)\\s+up` the block runs
    until the next line indented exactly like the start line, which is how
    tabular and indented device output repeats its entries.

    An empty (or missing) first group gives `^\\S`, which ends the block at the
    first unindented line.
    """
    prefix = start.group(1) if start.re.groups else ""
    return re.compile("^" + re.escape(prefix or "") + r"\S")


def _groups(match: re.Match[str]) -> list[str]:
    return list(match.groups(default=""))


def match_in_block(lines: Lines, pattern: PatternLike) -> MatchResult:
    """Match every line against `pattern`, collecting the groups of each matching line."""
    p = as_pattern(pattern)
    captures = [_groups(m) for line in lines if (m := p.search(line)) is not None]
    return MatchResult(found=bool(captures), captures=captures)


def solo_match_in_block(lines: Lines, pattern: PatternLike) -> tuple[bool, str]:
    """Match a single value in the whole block: the first group of the first matching line."""
    result = match_in_block(lines, pattern)
    if not result.found:
        return False, ""
    first = result.captures[0]
    return True, first[0] if first else ""


def slice_match_in_block(lines: Lines, pattern: PatternLike) -> tuple[bool, list[str]]:
    """Match one value per line: the first group of every matching line."""
    result = match_in_block(lines, pattern)
    if not result.found:
        return False, []
    return True, [groups[0] if groups else "" for groups in result.captures]


def remove_from_block(lines: Lines, pattern: PatternLike) -> tuple[bool, Block]:
    """Return a new block of the lines not matching `pattern`, and whether any line matched."""
    p = as_pattern(pattern)
    kept = [line for line in lines if p.search(line) is None]
    return len(kept) != len(lines), Block(lines=kept)


def fetch_block(
    lines: Lines,
    start: PatternLike,
    end: PatternLike | None = None,
    *,
    end_strategy: EndStrategy = prefix_end_pattern,
) -> FetchResult:
    """Find blocks opened by `start` and closed by `end`.

    The line matched by the end pattern is not part of the block, but it may
    open the next one when it also matches the start pattern. Blank lines are
    skipped. Without an explicit `end`, each block's end pattern is derived
    from its start line by `end_strategy`.

    When the start match has more than one group, the groups after the first
    are the block's title. Titles are index-aligned with the blocks, and come
    back as None altogether when no block has one.

    Sample start pattern: `^(.*?)([A-Z]\\S+)\\s+(Up|Down)\\s+(Up|Down)\\S*\\s+(\\S+)\\s+(\\S+)$`
    """
    start_re = as_pattern(start)
    end_re = maybe_pattern(end)
    blank = re.compile(get_config().blank_line_pattern)

    blocks: list[Block] = []
    titles: list[Title | None] = []
    current: list[str] | None = None
    active_end: re.Pattern[str] | None = None

    for line in lines:
        if blank.search(line):
            continue

        if current is not None and active_end is not None:
            if active_end.search(line) is None:
                current.append(line)
                continue
            blocks.append(Block(lines=current))
            current = None
            # the end line falls through and may start the next block

        m = start_re.search(line)
        if m is None:
            continue

        current = [line]
        active_end = end_re if end_re is not None else end_strategy(m)
        if end_re is None:
            logger.debug("Derived end pattern %r from %r", active_end.pattern, line)

        groups = _groups(m)
        titles.append(groups[1:] if len(groups) > 1 else None)

    # ran out of input inside a block
    if current is not None:
        blocks.append(Block(lines=current))

    logger.debug("fetch_block: %d block(s) from %d line(s)", len(blocks), len(lines))

    if all(title is None for title in titles):
        return FetchResult(blocks=blocks, titles=None)
    return FetchResult(blocks=blocks, titles=titles)


def cut(lines: Lines, start: PatternLike) -> BlockArray:
    """Split lines into blocks, each starting at a line matching `start`.

    Lines before the first start line belong to no block.
    """
    start_re = as_pattern(start)

    segments: list[list[str]] = [[]]
    titles: list[Title | None] = [None]
    for line in lines:
        m = start_re.search(line)
        if m is not None:
            segments.append([line])
            titles.append(_groups(m))
        else:
            segments[-1].append(line)

    # the leading segment never holds a start line
    blocks = [Block(lines=segment) for segment in segments[1:]]
    logger.debug("cut: %d block(s) from %d line(s)", len(blocks), len(lines))
    return BlockArray(blocks=blocks, titles=titles[1:])


def segment(lines: Lines, start: PatternLike, end: PatternLike) -> BlockArray:
    """Split lines into segments closed by `end`, keeping the ones that contain a `start` line.

    The end line belongs to the segment it closes. A trailing segment without an
    end line is considered too. The title is taken from the first start line in
    the segment.
    """
    start_re = as_pattern(start)
    end_re = as_pattern(end)

    segments: list[list[str]] = []
    current: list[str] = []
    for line in lines:
        current.append(line)
        if end_re.search(line):
            segments.append(current)
            current = []
    if current:
        segments.append(current)

    blocks: list[Block] = []
    titles: list[Title | None] = []
    for seg in segments:
        for line in seg:
            m = start_re.search(line)
            if m is not None:
                blocks.append(Block(lines=seg))
                titles.append(_groups(m))
                break

    logger.debug("segment: kept %d of %d segment(s)", len(blocks), len(segments))
    return BlockArray(blocks=blocks, titles=titles)
