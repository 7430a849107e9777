"""Configuration loader for Quoth.

Resolves a QuothConfig from CLI flags, an optional ``quoth.yaml`` file,
``QUOTH_*`` environment variables and built-in defaults.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from quoth.config.defaults import DEFAULT_CONFIG, DEFAULT_CONFIG_FILENAMES
from quoth.config.env_loader import get_env_var, substitute_env_vars
from quoth.config.validator import flatten_pydantic_errors
from quoth.lib.errors import ConfigError, FileNotFoundError, ValidationError
from quoth.lib.logging_config import get_logger
from quoth.models.config import QuothConfig

logger = get_logger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "link_style": "QUOTH_LINK_STYLE",
    "fallback": "QUOTH_FALLBACK",
    "verbose": "QUOTH_VERBOSE",
    "quiet": "QUOTH_QUIET",
}

_BOOL_FIELDS = ("verbose", "quiet")
_CHOICE_FIELDS: dict[str, tuple[str, ...]] = {
    "link_style": ("wikilink", "plain"),
    "fallback": ("none", "document", "lines"),
}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to the field's type.

    Raises:
        ValidationError: If value is not one of the field's choices
    """
    if field_name in _BOOL_FIELDS:
        return value.lower() in ("true", "1", "yes", "on")
    choices = _CHOICE_FIELDS.get(field_name)
    if choices is not None and value.lower() not in choices:
        raise ValidationError(
            field=ENV_VAR_MAP[field_name],
            message="Unknown choice",
            expected=" | ".join(choices),
            actual=value,
        )
    return value.lower()


def _get_env_value(field_name: str) -> Any | None:
    """Get environment variable value for a field, or None if unset/invalid."""
    env_var_name = ENV_VAR_MAP.get(field_name)
    raw = get_env_var(env_var_name) if env_var_name else None
    if raw is None:
        return None

    try:
        return _parse_env_value(field_name, raw)
    except ValidationError as e:
        logger.warning(f"Ignoring {env_var_name}={e.actual!r}, expected {e.expected}")
        return None


class ConfigLoader:
    """Loads and validates Quoth configuration.

    Configuration precedence (highest to lowest):
    1. CLI flags
    2. quoth.yaml settings
    3. Environment variables (QUOTH_*)
    4. Built-in defaults
    """

    def parse_yaml(self, file_path: str | Path) -> dict[str, Any]:
        """Parse a YAML config file with ``${VAR}`` substitution.

        Args:
            file_path: Path to the YAML file

        Returns:
            Parsed mapping (empty for an empty file)

        Raises:
            FileNotFoundError: If the file cannot be read
            ConfigError: If YAML parsing fails or the top level is not a mapping
        """
        path = Path(file_path)
        try:
            raw_text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise FileNotFoundError(
                str(file_path),
                f"Configuration file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e

        try:
            content = yaml.safe_load(substitute_env_vars(raw_text))
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Expected a mapping at the top of {file_path}, "
                f"got {type(content).__name__}",
            )
        return content

    def find_config_file(self, base_dir: str | Path | None = None) -> Path | None:
        """Locate quoth.yaml (or quoth.yml) in a directory.

        Args:
            base_dir: Directory to search, defaults to the working directory

        Returns:
            Path of the first file found, or None
        """
        directory = Path(base_dir) if base_dir is not None else Path.cwd()
        for name in DEFAULT_CONFIG_FILENAMES:
            candidate = directory / name
            if candidate.is_file():
                return candidate
        return None

    def load(
        self,
        config_path: str | Path | None = None,
        cli_overrides: dict[str, Any] | None = None,
        base_dir: str | Path | None = None,
    ) -> QuothConfig:
        """Resolve the effective configuration.

        Args:
            config_path: Explicit config file; when None, quoth.yaml is looked
                up in base_dir
            cli_overrides: Values from CLI flags; None entries are ignored
            base_dir: Directory searched for quoth.yaml

        Returns:
            Validated QuothConfig

        Raises:
            FileNotFoundError: If an explicit config_path does not exist
            ConfigError: If the file is malformed or fails validation
        """
        path = Path(config_path) if config_path else self.find_config_file(base_dir)
        file_config: dict[str, Any] = {}
        if path is not None:
            logger.debug(f"Loading configuration from {path}")
            file_config = self.parse_yaml(path)

        return self.resolve(cli_overrides or {}, file_config, str(path or "defaults"))

    def resolve(
        self,
        cli_overrides: dict[str, Any],
        file_config: dict[str, Any],
        source: str = "defaults",
    ) -> QuothConfig:
        """Merge configuration layers field by field and validate.

        Unknown keys in file_config are passed through so validation can
        reject them.
        """
        resolved: dict[str, Any] = {}

        for field in QuothConfig.model_fields:
            if cli_overrides.get(field) is not None:
                resolved[field] = cli_overrides[field]
            elif file_config.get(field) is not None:
                resolved[field] = file_config[field]
            elif (env_value := _get_env_value(field)) is not None:
                resolved[field] = env_value
            else:
                resolved[field] = DEFAULT_CONFIG.get(field)

        for key, value in file_config.items():
            if key not in resolved:
                resolved[key] = value

        try:
            return QuothConfig(**resolved)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "config_validation",
                f"Invalid configuration in {source}:\n{error_text}",
            ) from e
