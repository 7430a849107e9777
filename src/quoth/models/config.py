"""Configuration model for reference formatting and CLI output."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class QuothConfig(BaseModel):
    """Resolved Quoth configuration.

    Attributes:
        link_style: ``wikilink`` renders ``[[note#A#1]]``, ``plain`` renders
            ``note#A#1``
        fallback: What to emit when a selection has no unique subpath:
            ``none`` (no reference), ``document`` (link to the whole note) or
            ``lines`` (a ``note:L3-L5`` line citation)
        verbose: Enable debug logging
        quiet: Only log warnings and errors
    """

    model_config = ConfigDict(extra="forbid")

    link_style: Literal["wikilink", "plain"] = Field(
        default="wikilink", description="Reference link style"
    )
    fallback: Literal["none", "document", "lines"] = Field(
        default="none", description="Fallback when no unique subpath exists"
    )
    verbose: bool = Field(default=False, description="Enable debug logging")
    quiet: bool = Field(default=False, description="Only log warnings and errors")
