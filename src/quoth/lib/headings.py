"""Heading ancestry and ownership over a flat, document-ordered heading list.

Headings are never materialized as a tree. Ancestry is recovered on demand
by comparing levels: the parent of a heading is the nearest earlier heading
with a strictly smaller level.
"""

import math
from collections.abc import Sequence

from quoth.models.document import Heading, OffsetRange, PosRange


def resolve_ancestors(
    headings: Sequence[Heading] | None, selection: PosRange
) -> list[Heading]:
    """Return the chain of headings containing a selection, root first.

    The walk starts at the last heading whose own line ends on or before the
    selection's last line and moves backwards, keeping only headings with a
    strictly smaller level than any seen so far. A candidate is kept only if
    it starts on or before the selection's first line, so a selection that
    spans several sibling sections collapses to their common parent.

    Args:
        headings: Document headings in document order, or None
        selection: Selected range; endpoint order does not matter

    Returns:
        Ancestor headings from root to leaf. Empty when no heading
        precedes the selection.

    Example:
        >>> chain = resolve_ancestors(metadata.headings, PosRange.from_lines(8, 8))
        >>> [h.title for h in chain]
        ['First Level', 'Second Level Two', 'Third Level One']
    """
    if not headings:
        return []

    first_line = selection.first_line
    last_index = _index_of_last_heading(headings, selection.last_line)

    parents: list[Heading] = []
    level = math.inf
    for i in range(last_index, -1, -1):
        heading = headings[i]
        if heading.level < level:
            level = heading.level
            if heading.position.start.line <= first_line:
                parents.insert(0, heading)
    return parents


def content_span(
    heading: Heading, headings: Sequence[Heading], doc_length: int
) -> OffsetRange:
    """Return the offsets of everything a heading owns.

    The span starts at the heading line itself and stops one character
    before the next heading of the same or a shallower level. The last such
    section runs to the end of the document.

    Args:
        heading: Heading whose section is wanted
        headings: All document headings in document order
        doc_length: Length of the document text

    Returns:
        OffsetRange with an inclusive end offset
    """
    start = heading.position.start.offset
    end = doc_length
    for other in headings:
        if other.position.start.offset <= start:
            continue
        if other.level <= heading.level:
            end = other.position.start.offset - 1
            break
    return OffsetRange(start=start, end=end)


def heading_chains(headings: Sequence[Heading] | None) -> list[list[Heading]]:
    """Compute the ancestor chain of every heading in one pass.

    Equivalent to calling resolve_ancestors() on each heading's own line:
    entry ``i`` is the root-to-leaf chain ending with ``headings[i]``.

    Args:
        headings: Document headings in document order, or None

    Returns:
        One chain per heading, in the same order
    """
    chains: list[list[Heading]] = []
    parent_stack: list[Heading] = []
    for heading in headings or []:
        # Pop until the top of the stack is a strict ancestor
        while parent_stack and parent_stack[-1].level >= heading.level:
            parent_stack.pop()
        parent_stack.append(heading)
        chains.append(list(parent_stack))
    return chains


def _index_of_last_heading(headings: Sequence[Heading], before_line: int) -> int:
    """Index of the last heading ending on or before a line, or -1."""
    index = -1
    for i, heading in enumerate(headings):
        if heading.position.end.line > before_line:
            break
        index = i
    return index
