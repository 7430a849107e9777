"""Helpers shared by Quoth CLI commands."""

import re
import sys
from typing import Any

import click

from quoth.config.loader import ConfigLoader
from quoth.lib.errors import ConfigError, FileNotFoundError
from quoth.lib.logging_config import get_logger, setup_logging
from quoth.models.config import QuothConfig
from quoth.models.document import Cursor

logger = get_logger(__name__)

EXIT_NOT_FOUND = 1
EXIT_CONFIG_ERROR = 2

CURSOR_PATTERN = re.compile(r"^\s*(\d+)(?::(\d+))?\s*$")


def parse_cursor(
    ctx: click.Context | None, param: click.Parameter | None, value: str | None
) -> Cursor | None:
    """Click callback turning a 1-based ``LINE[:COL]`` into a Cursor.

    Raises:
        click.BadParameter: If the value is malformed or the line is 0
    """
    if value is None:
        return None
    match = CURSOR_PATTERN.match(value)
    if not match:
        raise click.BadParameter(f"expected LINE or LINE:COL, got {value!r}")
    line = int(match.group(1))
    if line < 1:
        raise click.BadParameter("line numbers start at 1")
    col = int(match.group(2)) if match.group(2) else 0
    return Cursor(line=line - 1, col=col)


def format_cursor(cursor: Cursor) -> str:
    """Render a Cursor in the 1-based ``LINE:COL`` form parse_cursor accepts."""
    return f"{cursor.line + 1}:{cursor.col}"


def load_cli_config(
    config_path: str | None, verbose: bool, quiet: bool, **overrides: Any
) -> QuothConfig:
    """Resolve configuration for a command and configure logging.

    Exits with EXIT_CONFIG_ERROR when the configuration cannot be loaded.
    """
    setup_logging(verbose=verbose, quiet=quiet)

    cli_overrides: dict[str, Any] = {
        "verbose": verbose or None,
        "quiet": quiet or None,
        **overrides,
    }
    try:
        config = ConfigLoader().load(config_path, cli_overrides=cli_overrides)
    except (ConfigError, FileNotFoundError) as e:
        logger.error(f"Configuration error: {e}", exc_info=True)
        click.secho("Error: Failed to load configuration", fg="red", err=True)
        click.echo(f"  {str(e)}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    # The config file may enable verbose/quiet on its own
    if (config.verbose, config.quiet) != (verbose, quiet):
        setup_logging(verbose=config.verbose, quiet=config.quiet)
    return config
