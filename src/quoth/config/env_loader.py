"""Environment variable substitution for configuration files."""

import os
import re

from quoth.lib.errors import ConfigError

ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def get_env_var(name: str, default: str | None = None) -> str | None:
    """Return an environment variable, or default when unset."""
    return os.environ.get(name, default)


def substitute_env_vars(text: str) -> str:
    """Replace ``${VAR_NAME}`` references with environment values.

    Args:
        text: Raw configuration text

    Returns:
        Text with every reference substituted

    Raises:
        ConfigError: If a referenced variable is not set
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        value = os.environ.get(name)
        if value is None:
            raise ConfigError(name, f"Environment variable '{name}' is not set")
        return value

    return ENV_VAR_PATTERN.sub(_replace, text)
