"""Markdown outline extraction.

Builds the CachedMetadata snapshot (headings and block anchors with their
line spans) that the subpath functions consume. This stands in for the
metadata cache an editor would normally provide.

Key Features:
- ATX headings (``#`` to ``######``) with line and offset spans
- Block anchors (a trailing `` ^id`` on a line)
- Fenced code blocks (``` and ~~~) are skipped; a fence closes only on a
  marker of the same character at least as long as the opener
- Closing ATX sequences (``## Title ##``) are dropped from titles
"""

import re
from pathlib import Path

from quoth.lib.errors import DocumentError, FileNotFoundError
from quoth.lib.logging_config import get_logger
from quoth.models.document import Block, CachedMetadata, Heading, Location, Span

logger = get_logger(__name__)


class MarkdownMetadataExtractor:
    """Line-based extractor for headings and block anchors.

    Offsets count one character per line break, so documents are expected
    to use ``\\n`` line endings.

    Example:
        >>> extractor = MarkdownMetadataExtractor()
        >>> metadata = extractor.extract("# Title\\nText ^abc\\n")
        >>> [h.title for h in metadata.headings], list(metadata.blocks)
        (['Title'], ['abc'])
    """

    HEADING_PATTERN = re.compile(r"^(#{1,6})\s+(.+)$")
    CLOSING_SEQUENCE_PATTERN = re.compile(r"(?:^|\s+)#+\s*$")
    BLOCK_PATTERN = re.compile(r"\s\^([A-Za-z0-9-]+)$")
    CODE_FENCE_PATTERN = re.compile(r"^\s*(`{3,}|~{3,})")

    def extract(self, text: str) -> CachedMetadata:
        """Extract headings and block anchors from markdown text.

        Args:
            text: Markdown content

        Returns:
            CachedMetadata with headings in document order
        """
        headings: list[Heading] = []
        blocks: dict[str, Block] = {}

        offset = 0
        # Opening marker of the code fence we are inside, if any
        fence: str | None = None
        for line_num, line in enumerate(text.split("\n")):
            span = self._line_span(line_num, line, offset)
            offset += len(line) + 1

            fence_match = self.CODE_FENCE_PATTERN.match(line)
            if fence_match:
                marker = fence_match.group(1)
                if fence is None:
                    fence = marker
                elif marker[0] == fence[0] and len(marker) >= len(fence):
                    fence = None
                continue
            if fence is not None:
                continue

            heading_match = self.HEADING_PATTERN.match(line)
            if heading_match:
                title = self.CLOSING_SEQUENCE_PATTERN.sub(
                    "", heading_match.group(2).strip()
                )
                if title:
                    headings.append(
                        Heading(
                            title=title,
                            level=len(heading_match.group(1)),
                            position=span,
                        )
                    )

            block_match = self.BLOCK_PATTERN.search(line)
            if block_match:
                block_id = block_match.group(1)
                if block_id in blocks:
                    logger.warning(
                        f"Duplicate block id '{block_id}' on line {line_num + 1}, "
                        f"keeping the later one"
                    )
                blocks[block_id] = Block(id=block_id, position=span)

        logger.debug(f"Extracted {len(headings)} headings and {len(blocks)} blocks")
        return CachedMetadata(headings=headings, blocks=blocks)

    def extract_file(self, path: str | Path) -> tuple[str, CachedMetadata]:
        """Read a markdown file and extract its metadata.

        Args:
            path: Path to a UTF-8 markdown file

        Returns:
            Tuple of (file text, metadata)

        Raises:
            FileNotFoundError: If the file does not exist or cannot be read
            DocumentError: If the file is not valid UTF-8
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise FileNotFoundError(
                str(file_path), "Check the note path and try again."
            )
        try:
            text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise DocumentError(
                str(file_path),
                f"Not valid UTF-8 at byte {e.start}. Re-save the note as UTF-8.",
            ) from e
        except OSError as e:
            raise FileNotFoundError(str(file_path), f"Could not read note: {e}") from e
        logger.debug(f"Read {len(text)} characters from {file_path}")
        return text, self.extract(text)

    @staticmethod
    def _line_span(line_num: int, line: str, offset: int) -> Span:
        """Span covering a whole line."""
        return Span(
            start=Location(line=line_num, col=0, offset=offset),
            end=Location(line=line_num, col=len(line), offset=offset + len(line)),
        )
