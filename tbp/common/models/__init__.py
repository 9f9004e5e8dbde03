from tbp.common.models.base import Lines, PatternLike, as_pattern, maybe_pattern
from tbp.common.models.settings import DiffSettings

__all__ = ["Lines", "PatternLike", "as_pattern", "maybe_pattern", "DiffSettings"]
