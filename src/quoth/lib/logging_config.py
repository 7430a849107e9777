"""Logging setup shared by the Quoth CLI and library modules.

Library code obtains loggers through get_logger() so every logger lives
under the ``quoth`` namespace; CLI commands call setup_logging() once with
their --verbose/--quiet flags.
"""

import logging
import sys

ROOT_LOGGER_NAME = "quoth"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the quoth namespace.

    Args:
        name: Module name, usually ``__name__``

    Returns:
        Logger instance
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the quoth logger hierarchy.

    Output goes to stderr so command results on stdout stay pipeable.
    Calling this again replaces the previously installed handler.

    Args:
        verbose: Log DEBUG and above
        quiet: Log WARNING and above (ignored when verbose is set)
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
