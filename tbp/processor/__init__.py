"""Post-process extracted blocks into comparable text."""

from tbp.processor.core import diff_blocks, diff_format, normalize, redact_durations, render
from tbp.common.models import DiffSettings

__all__ = ["diff_blocks", "diff_format", "normalize", "redact_durations", "render", "DiffSettings"]
