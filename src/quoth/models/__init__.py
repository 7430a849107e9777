"""Pydantic models for document metadata and configuration."""

from quoth.models.config import QuothConfig
from quoth.models.document import (
    Block,
    CachedMetadata,
    Cursor,
    DocumentMetadata,
    Heading,
    Location,
    OffsetRange,
    PosRange,
    Span,
)

__all__ = [
    "Block",
    "CachedMetadata",
    "Cursor",
    "DocumentMetadata",
    "Heading",
    "Location",
    "OffsetRange",
    "PosRange",
    "QuothConfig",
    "Span",
]
