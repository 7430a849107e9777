"""Configuration loading and validation for Quoth.

Main components:
- ConfigLoader: Resolve QuothConfig from CLI flags, quoth.yaml, env and defaults
- Environment variable substitution (${VAR_NAME} pattern)
"""

from quoth.config.env_loader import get_env_var, substitute_env_vars
from quoth.config.loader import ConfigLoader

__all__ = [
    "ConfigLoader",
    "substitute_env_vars",
    "get_env_var",
]
