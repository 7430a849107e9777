"""Core library: subpath synthesis, outline extraction and references."""

from quoth.lib.blocks import resolve_block
from quoth.lib.headings import content_span, heading_chains, resolve_ancestors
from quoth.lib.subpath import resolve_subpath, synthesize_path

__all__ = [
    "content_span",
    "heading_chains",
    "resolve_ancestors",
    "resolve_block",
    "resolve_subpath",
    "synthesize_path",
]
