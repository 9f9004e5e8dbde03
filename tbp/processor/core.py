"""Post-processing of extracted blocks: rendering, normalization and snapshot diffing."""

import difflib

from tbp.blocks.models import Block
from tbp.common.models import DiffSettings, Lines
from tbp.common.utils.config import get_config
from tbp.common.utils.logger import get_logger
from tbp.processor.post_filters import (
    LineFilter,
    apply_filters,
    drop_lines,
    mask_spans,
    redact_duration_tokens,
    squeeze_blank_lines,
    trim_trailing_space,
)

logger = get_logger("app.processor")


def render(block: Lines) -> str:
    """Join lines back into a single string, one trailing newline per line."""
    return "".join(f"{line}\n" for line in block)


def normalize(block: Lines) -> Block:
    """Trim trailing whitespace and collapse runs of empty lines into one.

    Applying it twice gives the same block as applying it once.
    """
    return Block(lines=apply_filters(list(block), [trim_trailing_space, squeeze_blank_lines]))


def redact_durations(block: Lines, placeholder: str | None = None) -> Block:
    """Replace uptime-like tokens (`3d04h22m`, `12h30m45s`, `10:30:45`, ...) with a placeholder.

    Two captures of the same output taken minutes apart then compare equal.
    """
    cfg = get_config()
    if placeholder is None:
        placeholder = cfg.duration_placeholder
    redact = redact_duration_tokens(cfg.duration_patterns, placeholder)
    return Block(lines=redact(list(block)))


def _diff_filters(settings: DiffSettings) -> list[LineFilter]:
    cfg = get_config()
    filters: list[LineFilter] = []
    if settings.drop is not None:
        filters.append(drop_lines(settings.drop))
    if settings.mask is not None:
        filters.append(mask_spans(settings.mask, cfg.mask_placeholder))
    if settings.redact_durations:
        filters.append(redact_duration_tokens(cfg.duration_patterns, cfg.duration_placeholder))
    filters.extend([trim_trailing_space, squeeze_blank_lines])
    return filters


def diff_format(block: Lines, settings: DiffSettings | None = None) -> str:
    """Flatten a block into a string suitable for diffing against another snapshot.

    Lines matching `settings.drop` are removed, spans matching `settings.mask`
    are masked, durations are redacted unless disabled, and the result is
    normalized before rendering.
    """
    settings = settings or DiffSettings()
    return render(apply_filters(list(block), _diff_filters(settings)))


def diff_blocks(
    before: Lines,
    after: Lines,
    settings: DiffSettings | None = None,
    *,
    context: int | None = None,
) -> list[str]:
    """Unified diff between two snapshots of the same output, after `diff_format`.

    Returns an empty list when the snapshots only differ in what the settings
    filter out.
    """
    old = diff_format(before, settings).splitlines(keepends=True)
    new = diff_format(after, settings).splitlines(keepends=True)
    n = get_config().diff_context_lines if context is None else context

    diff = list(difflib.unified_diff(old, new, fromfile="before", tofile="after", n=n))
    logger.debug("diff_blocks: %d diff line(s)", len(diff))
    return diff
