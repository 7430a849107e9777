"""Document metadata models consumed by the subpath core.

These mirror the metadata an editor keeps for a markdown note: an ordered
list of headings and a table of block anchors, each carrying the span of
its own line. Selections arrive as PosRange values whose endpoints may be
in either order.
"""

from collections.abc import Mapping, Sequence
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A point in a document as line, column and absolute character offset."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0, description="Zero-based line number")
    col: int = Field(0, ge=0, description="Zero-based column")
    offset: int = Field(..., ge=0, description="Character offset from start")


class Span(BaseModel):
    """Start and end location of a heading or block line."""

    model_config = ConfigDict(frozen=True)

    start: Location
    end: Location


class Heading(BaseModel):
    """One markdown heading occurrence.

    Attributes:
        title: Heading text exactly as written (not unique in a document)
        level: Nesting depth, 1 for ``#``
        position: Span of the heading's own line
    """

    model_config = ConfigDict(frozen=True)

    title: str
    level: int = Field(..., ge=1)
    position: Span


class Block(BaseModel):
    """A named single-line anchor (``^id``)."""

    model_config = ConfigDict(frozen=True)

    id: str
    position: Span


class Cursor(BaseModel):
    """An editor cursor position."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=0)
    col: int = Field(0, ge=0)


class PosRange(BaseModel):
    """A selection between two cursors.

    ``start`` is not guaranteed to precede ``end``; some callers pass the
    anchor and head of a selection as-is. Containment checks go through
    first_line/last_line, which are order independent.
    """

    model_config = ConfigDict(frozen=True)

    start: Cursor
    end: Cursor

    @classmethod
    def from_lines(
        cls, start_line: int, end_line: int, start_col: int = 0, end_col: int = 0
    ) -> "PosRange":
        """Build a range from raw line/column numbers."""
        return cls(
            start=Cursor(line=start_line, col=start_col),
            end=Cursor(line=end_line, col=end_col),
        )

    @property
    def first_line(self) -> int:
        """Smallest line touched by the range."""
        return min(self.start.line, self.end.line)

    @property
    def last_line(self) -> int:
        """Largest line touched by the range."""
        return max(self.start.line, self.end.line)

    @property
    def is_reversed(self) -> bool:
        """Whether ``start`` is positioned after ``end``."""
        return (self.start.line, self.start.col) > (self.end.line, self.end.col)

    def normalized(self) -> "PosRange":
        """Return the same interval with start before end."""
        if self.is_reversed:
            return PosRange(start=self.end, end=self.start)
        return self


class OffsetRange(BaseModel):
    """Character offsets of a slice of document text."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0)
    end: int = Field(..., ge=0)


@runtime_checkable
class DocumentMetadata(Protocol):
    """Anything exposing an ordered heading list and a block-id table.

    The subpath core depends only on this shape, never on how the document
    was parsed. Either attribute may be None for documents without headings
    or blocks.
    """

    @property
    def headings(self) -> Sequence[Heading] | None: ...

    @property
    def blocks(self) -> Mapping[str, Block] | None: ...


class CachedMetadata(BaseModel):
    """Concrete metadata snapshot for one document.

    Headings must be in document order; block ids are assumed unique.
    """

    model_config = ConfigDict(frozen=True)

    headings: list[Heading] = Field(default_factory=list)
    blocks: dict[str, Block] = Field(default_factory=dict)
