"""CLI command for copying a reference to a selection.

Implements 'quoth ref', which prints the shortest unique link to a range of
lines in a markdown note.
"""

import sys
from pathlib import Path

import click

from quoth.cli.common import (
    EXIT_CONFIG_ERROR,
    EXIT_NOT_FOUND,
    format_cursor,
    load_cli_config,
    parse_cursor,
)
from quoth.lib.errors import QuothError
from quoth.lib.logging_config import get_logger
from quoth.lib.markdown_metadata import MarkdownMetadataExtractor
from quoth.lib.reference import ReferenceBuilder
from quoth.models.document import Cursor, PosRange

logger = get_logger(__name__)


@click.command(name="ref")
@click.argument("note", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--from",
    "start",
    required=True,
    callback=parse_cursor,
    help="Selection start as LINE or LINE:COL (1-based line)",
)
@click.option(
    "--to",
    "end",
    default=None,
    callback=parse_cursor,
    help="Selection end as LINE or LINE:COL (defaults to --from)",
)
@click.option(
    "--link-style",
    type=click.Choice(["wikilink", "plain"]),
    default=None,
    help="Reference link style",
)
@click.option(
    "--fallback",
    type=click.Choice(["none", "document", "lines"]),
    default=None,
    help="What to print when no unique subpath exists",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to quoth.yaml (defaults to ./quoth.yaml if present)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option("--quiet", "-q", is_flag=True, help="Only log warnings and errors")
def ref(
    note: str,
    start: Cursor,
    end: Cursor | None,
    link_style: str | None,
    fallback: str | None,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Print a reference to a selection in NOTE.

    The reference uses a block anchor when the selection sits on a block
    line, otherwise the shortest run of heading titles that is unique in
    the note.

    Example:

        quoth ref notes/design.md --from 12

        quoth ref notes/design.md --from 12:4 --to 15 --link-style plain
    """
    config = load_cli_config(
        config_path, verbose, quiet, link_style=link_style, fallback=fallback
    )
    selection = PosRange(start=start, end=end or start).normalized()
    logger.info(
        f"Ref command invoked: note={note}, "
        f"from={format_cursor(selection.start)}, to={format_cursor(selection.end)}"
    )

    try:
        _, metadata = MarkdownMetadataExtractor().extract_file(note)
        reference = ReferenceBuilder(config).build(
            Path(note).stem, metadata, selection
        )
    except QuothError as e:
        logger.error(f"Ref failed: {e}", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    if reference is None:
        click.secho("No unique reference for the selection", fg="yellow", err=True)
        sys.exit(EXIT_NOT_FOUND)

    click.echo(reference)
