"""Line block models."""

from collections.abc import Iterator

from pydantic import BaseModel, field_validator

# Capture groups taken from a block's start line
Title = list[str]


class Block(BaseModel):
    """A contiguous run of lines taken from a larger capture.

    A block always owns its lines: building one from a list copies the list, so
    changing the source afterwards never shows through.
    """

    lines: list[str] = []

    @field_validator("lines", mode="before")
    def copy_lines(cls, value: object) -> object:
        if isinstance(value, Block):
            return list(value.lines)
        if isinstance(value, (list, tuple)):
            return list(value)
        return value

    @property
    def text(self) -> str:
        """Lines joined back into one string, each followed by a newline."""
        return "".join(f"{line}\n" for line in self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def __iter__(self) -> Iterator[str]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return iter(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __str__(self) -> str:
        return self.text


class MatchResult(BaseModel):
    found: bool = False
    captures: list[list[str]] = []  # one entry per matched line, "" for groups that did not take part


class BlockArray(BaseModel):
    """Blocks cut from a capture, with the title capture of each. Exposes a list-like interface."""

    blocks: list[Block] = []
    titles: list[Title | None] | None = []  # aligned with blocks

    def __getitem__(self, index: int) -> Block:
        return self.blocks[index]

    def __iter__(self) -> Iterator[Block]:  # pyright: ignore[reportIncompatibleMethodOverride]
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)

    def title(self, index: int) -> Title | None:
        """Title of the block at `index`, None when titles were not captured."""
        if not self.titles:
            return None
        return self.titles[index]


class FetchResult(BlockArray):
    """Result of a start/end scan.

    `titles` is None as a whole when no block captured a title, instead of a
    list of Nones.
    """

    titles: list[Title | None] | None = None
