"""Block anchor lookup."""

from collections.abc import Mapping

from quoth.models.document import Block, PosRange


def resolve_block(
    blocks: Mapping[str, Block] | None, selection: PosRange
) -> Block | None:
    """Return the block whose line fully contains a selection.

    Blocks occupy a single line, so a match means the whole selection lies
    on that line. If the table ever holds two blocks on one line the last
    one in mapping order wins.

    Args:
        blocks: Block table keyed by id, or None
        selection: Selected range; endpoint order does not matter

    Returns:
        The containing Block, or None
    """
    if not blocks:
        return None

    found: Block | None = None
    for block in blocks.values():
        if (
            selection.first_line >= block.position.start.line
            and selection.last_line <= block.position.end.line
        ):
            found = block
    return found
