"""CLI command for printing the content behind a subpath.

Implements 'quoth embed', the inverse of 'quoth ref': given a note and a
subpath it prints the section or block the subpath points at.
"""

import sys

import click

from quoth.cli.common import EXIT_CONFIG_ERROR, EXIT_NOT_FOUND, load_cli_config
from quoth.lib.errors import QuothError
from quoth.lib.logging_config import get_logger
from quoth.lib.markdown_metadata import MarkdownMetadataExtractor
from quoth.lib.reference import extract_section

logger = get_logger(__name__)


@click.command(name="embed")
@click.argument("note", type=click.Path(exists=True, dir_okay=False))
@click.argument("subpath", default="")
@click.option(
    "--no-heading",
    is_flag=True,
    help="Drop the heading line from heading sections",
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
def embed(
    note: str,
    subpath: str,
    no_heading: bool,
    config_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Print the part of NOTE addressed by SUBPATH.

    SUBPATH is '#^blockid', '#Heading#Subheading', or empty for the whole
    note.

    Example:

        quoth embed notes/design.md '#Storage#Caching'

        quoth embed notes/design.md '#^decision' --quiet
    """
    load_cli_config(config_path, verbose, quiet)
    logger.info(f"Embed command invoked: note={note}, subpath={subpath!r}")

    try:
        text, metadata = MarkdownMetadataExtractor().extract_file(note)
        section = extract_section(
            text, metadata, subpath, include_heading=not no_heading
        )
    except QuothError as e:
        logger.error(f"Embed failed: {e}", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(EXIT_CONFIG_ERROR)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    if section is None:
        click.secho(
            f"Subpath {subpath!r} does not match exactly one location",
            fg="yellow",
            err=True,
        )
        sys.exit(EXIT_NOT_FOUND)

    click.echo(section)
