"""Shortest unique subpaths for document locations.

A subpath addresses a location inside one document, either through a block
anchor (``#^blockid``) or through a run of heading titles ending at the
innermost heading containing the location (``#Section#Subsection``). The
run is grown from the innermost heading outwards only as far as needed for
it to match exactly one heading in the whole document.

Key operations:
- synthesize_path: selection -> shortest unique subpath ("" when none exists)
- resolve_subpath: subpath -> character offsets it owns (inverse lookup)
"""

from collections.abc import Sequence

from quoth.lib.blocks import resolve_block
from quoth.lib.headings import content_span, heading_chains, resolve_ancestors
from quoth.lib.logging_config import get_logger
from quoth.models.document import DocumentMetadata, OffsetRange, PosRange

logger = get_logger(__name__)

SUBPATH_SEPARATOR = "#"
BLOCK_PREFIX = "#^"


def format_subpath(titles: Sequence[str]) -> str:
    """Join heading titles into ``#t1#t2...`` form."""
    return "".join(f"{SUBPATH_SEPARATOR}{title}" for title in titles)


def parse_subpath(subpath: str) -> list[str]:
    """Split a heading subpath back into its titles.

    Args:
        subpath: Subpath such as ``#Section 1#A#1``

    Returns:
        Titles root to leaf; empty for ``""`` or ``"#"``. A title that
        contains ``#`` is split as well.
    """
    body = subpath.strip()
    if body.startswith(SUBPATH_SEPARATOR):
        body = body[len(SUBPATH_SEPARATOR) :]
    if not body:
        return []
    return body.split(SUBPATH_SEPARATOR)


def synthesize_path(metadata: DocumentMetadata, selection: PosRange) -> str:
    """Compute the shortest subpath that uniquely addresses a selection.

    A block anchor on the selected line always wins. Otherwise the chain of
    headings containing the selection is taken and suffixes of it are tried
    from the innermost heading outwards: ``[leaf]``, ``[parent, leaf]``, ...
    up to the full chain. The first suffix that matches exactly one heading
    anywhere in the document is returned.

    Args:
        metadata: Heading and block snapshot of the document
        selection: Selected range; endpoint order does not matter

    Returns:
        ``#^blockid``, ``#title1#...#titleN``, or ``""`` when the location
        is outside every heading or no suffix of the chain is unique (a
        duplicated root-level title).

    Example:
        >>> synthesize_path(metadata, PosRange.from_lines(8, 8))
        '#B#1'
    """
    block = resolve_block(metadata.blocks, selection)
    if block is not None:
        logger.debug(f"Selection {_describe(selection)} is inside block '{block.id}'")
        return f"{BLOCK_PREFIX}{block.id}"

    chain = resolve_ancestors(metadata.headings, selection)
    if not chain:
        logger.debug(f"No heading contains selection {_describe(selection)}")
        return ""

    titles = [heading.title for heading in chain]
    document_chains = [
        [heading.title for heading in ancestors]
        for ancestors in heading_chains(metadata.headings)
    ]

    for k in range(1, len(titles) + 1):
        candidate = format_subpath(titles[-k:])
        if _count_matches(document_chains, candidate, limit=2) == 1:
            return candidate

    logger.debug(
        f"Heading chain {format_subpath(titles)!r} is not unique in the document"
    )
    return ""


def resolve_subpath(
    metadata: DocumentMetadata, subpath: str, doc_length: int
) -> OffsetRange | None:
    """Find the character range a subpath refers to.

    Args:
        metadata: Heading and block snapshot of the document
        subpath: ``#^blockid``, ``#title1#...``, or ``""`` for the whole
            document
        doc_length: Length of the document text

    Returns:
        OffsetRange of the block line or the heading's owned content, or
        None when the block is unknown or the titles match zero or several
        headings.
    """
    subpath = subpath.strip()
    if subpath.startswith(BLOCK_PREFIX):
        block_id = subpath[len(BLOCK_PREFIX) :]
        block = (metadata.blocks or {}).get(block_id)
        if block is None:
            logger.debug(f"Unknown block id '{block_id}'")
            return None
        return OffsetRange(
            start=block.position.start.offset, end=block.position.end.offset
        )

    if not parse_subpath(subpath):
        return OffsetRange(start=0, end=doc_length)
    if not subpath.startswith(SUBPATH_SEPARATOR):
        subpath = SUBPATH_SEPARATOR + subpath

    headings = list(metadata.headings or [])
    matches = [
        i
        for i, ancestors in enumerate(heading_chains(headings))
        if _matches([h.title for h in ancestors], subpath)
    ]
    if len(matches) != 1:
        logger.debug(f"Subpath {subpath!r} matched {len(matches)} headings")
        return None
    return content_span(headings[matches[0]], headings, doc_length)


def _matches(chain: Sequence[str], subpath: str) -> bool:
    """Whether some suffix of a title chain formats exactly to subpath.

    Titles may themselves contain ``#``, so chains are compared as
    formatted text.
    """
    return any(
        format_subpath(chain[-k:]) == subpath for k in range(1, len(chain) + 1)
    )


def _count_matches(chains: Sequence[Sequence[str]], subpath: str, limit: int) -> int:
    """Count chains matching subpath, stopping once limit is reached."""
    count = 0
    for chain in chains:
        if _matches(chain, subpath):
            count += 1
            if count >= limit:
                break
    return count


def _describe(selection: PosRange) -> str:
    return (
        f"{selection.start.line}:{selection.start.col}"
        f"-{selection.end.line}:{selection.end.col}"
    )
