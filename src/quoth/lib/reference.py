"""Reference and embed helpers built on top of subpaths.

ReferenceBuilder turns a selection into a link such as ``[[note#B#1]]``.
extract_section goes the other way and returns the text a subpath points
at, which is what an embed of that reference displays.
"""

import re

from quoth.lib.logging_config import get_logger
from quoth.lib.subpath import BLOCK_PREFIX, resolve_subpath, synthesize_path
from quoth.models.config import QuothConfig
from quoth.models.document import DocumentMetadata, PosRange

logger = get_logger(__name__)

BLOCK_MARKER_PATTERN = re.compile(r"\s\^[A-Za-z0-9-]+\s*$")


class ReferenceBuilder:
    """Format references to selections inside a note.

    Attributes:
        config: Formatting options (link style and fallback)

    Example:
        >>> builder = ReferenceBuilder(QuothConfig(link_style="wikilink"))
        >>> builder.build("notes", metadata, PosRange.from_lines(8, 8))
        '[[notes#B#1]]'
    """

    def __init__(self, config: QuothConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Formatting options, defaults to QuothConfig()
        """
        self.config = config or QuothConfig()

    def build(
        self, document_name: str, metadata: DocumentMetadata, selection: PosRange
    ) -> str | None:
        """Build a reference for a selection.

        Args:
            document_name: Note name used as the link target
            metadata: Heading and block snapshot of the note
            selection: Selected range; endpoint order does not matter

        Returns:
            The formatted reference, or None when the selection has no unique
            subpath and the fallback is ``none``
        """
        subpath = synthesize_path(metadata, selection)
        if subpath:
            return self._link(f"{document_name}{subpath}")

        fallback = self.config.fallback
        logger.info(
            f"No unique subpath for lines {selection.first_line + 1}-"
            f"{selection.last_line + 1} in '{document_name}', fallback={fallback}"
        )
        if fallback == "document":
            return self._link(document_name)
        if fallback == "lines":
            return self.line_citation(document_name, selection)
        return None

    @staticmethod
    def line_citation(document_name: str, selection: PosRange) -> str:
        """Cite a selection by 1-based line numbers (``note:L3-L5``)."""
        ordered = selection.normalized()
        first = ordered.start.line + 1
        last = ordered.end.line + 1
        if first == last:
            return f"{document_name}:L{first}"
        return f"{document_name}:L{first}-L{last}"

    def _link(self, target: str) -> str:
        if self.config.link_style == "wikilink":
            return f"[[{target}]]"
        return target


def extract_section(
    text: str,
    metadata: DocumentMetadata,
    subpath: str,
    include_heading: bool = True,
) -> str | None:
    """Return the text a subpath refers to.

    Heading subpaths yield everything the heading owns, block subpaths yield
    the block line without its ``^id`` marker, and an empty subpath yields
    the whole document.

    Args:
        text: Full document text
        metadata: Heading and block snapshot of the same text
        subpath: ``#^blockid``, ``#title1#...`` or ``""``
        include_heading: Keep the heading line of a heading section

    Returns:
        The referenced text, or None if the subpath does not resolve to
        exactly one location
    """
    span = resolve_subpath(metadata, subpath, len(text))
    if span is None:
        return None

    section = text[span.start : min(span.end + 1, len(text))].rstrip("\n")

    if subpath.strip().startswith(BLOCK_PREFIX):
        return BLOCK_MARKER_PATTERN.sub("", section)

    if not include_heading and subpath.strip().strip("#"):
        _, _, body = section.partition("\n")
        return body.strip("\n")
    return section
