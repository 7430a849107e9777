"""Quoth - unique subpath references for markdown notes.

Quoth computes the shortest human-readable address (``#Heading#Sub`` or
``#^blockid``) that identifies a selection inside a markdown note, and
resolves such addresses back to the text they cover.

Main features:
- Heading ancestry over a flat outline, with sibling collapsing
- Block anchors take precedence over heading paths
- Shortest globally unique heading suffix
- Reference formatting and section embedding from the CLI
"""

from quoth.lib.errors import ConfigError, DocumentError, QuothError, ValidationError
from quoth.lib.subpath import resolve_subpath, synthesize_path

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ConfigError",
    "DocumentError",
    "QuothError",
    "ValidationError",
    "resolve_subpath",
    "synthesize_path",
]
