"""Default configuration values for Quoth."""

# Project configuration file looked up in the working directory
DEFAULT_CONFIG_FILENAMES: tuple[str, ...] = ("quoth.yaml", "quoth.yml")

DEFAULT_CONFIG: dict[str, str | bool] = {
    "link_style": "wikilink",
    "fallback": "none",
    "verbose": False,
    "quiet": False,
}
