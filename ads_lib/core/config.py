"""Configuration management for the ads library.

Configuration precedence (highest to lowest):
function arguments > environment variables > YAML file > defaults

Example YAML file:

    ads_lib:
      application_name: "My reporting app"
      include_utilities_in_user_agent: true
"""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from loguru import logger

from ads_lib.core.constants import (
    CONFIG_SECTION,
    DEFAULT_APPLICATION_NAME,
    ENV_APPLICATION_NAME,
    ENV_CONFIG_PATH,
    ENV_INCLUDE_UTILITIES,
    LIBRARY_NAME,
)
from ads_lib.core.exceptions import ConfigurationError
from shared.utils.env import get_env, parse_bool


def _to_bool(key: str, value: Any) -> bool:
    """Coerce a configuration value to bool.

    Raises:
        ConfigurationError: If the value is not a recognised boolean
    """
    if isinstance(value, bool):
        return value
    parsed = parse_bool(str(value))
    if parsed is None:
        raise ConfigurationError(
            f"Invalid boolean value for '{key}': {value!r}",
            details={"key": key},
        )
    return parsed


@dataclass
class AdsLibConfiguration:
    """Client configuration shared by every request of a session.

    Attributes:
        application_name: Name of the calling application, first token of the user agent
        include_utilities_in_user_agent: Whether utility usage is reported in the user agent
        library_name: Library token reported in the user agent
    """

    application_name: str = DEFAULT_APPLICATION_NAME
    include_utilities_in_user_agent: bool = True
    library_name: str = LIBRARY_NAME

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "AdsLibConfiguration":
        """Create configuration from a plain mapping, ignoring unknown keys.

        Raises:
            ConfigurationError: If a value has the wrong type
        """
        return cls().merged(values)

    @classmethod
    def from_env(cls) -> "AdsLibConfiguration":
        """Create configuration from environment variables.

        Returns:
            AdsLibConfiguration instance, defaults for unset variables
        """
        return cls().merged(_env_overrides())

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "AdsLibConfiguration":
        """Create configuration from the ``ads_lib`` section of a YAML file.

        Args:
            path: Path to the YAML file

        Returns:
            AdsLibConfiguration instance

        Raises:
            ConfigurationError: If the file is missing or invalid
        """
        return cls().merged(_read_yaml_section(Path(path)))

    def merged(self, values: Dict[str, Any]) -> "AdsLibConfiguration":
        """Return a copy with the given values applied.

        None values are skipped so callers can pass optional overrides directly.
        """
        changes: Dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if key == "include_utilities_in_user_agent":
                changes[key] = _to_bool(key, value)
            elif key in ("application_name", "library_name"):
                changes[key] = str(value)
            else:
                logger.warning(f"Ignoring unknown configuration key: {key}")
        return replace(self, **changes)


def _env_overrides() -> Dict[str, Any]:
    return {
        "application_name": get_env(ENV_APPLICATION_NAME),
        "include_utilities_in_user_agent": get_env(ENV_INCLUDE_UTILITIES),
    }


def _read_yaml_section(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Failed to parse YAML configuration: {path}",
            details={"error": str(e)},
        )

    if not isinstance(yaml_config, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {path}")

    section = yaml_config.get(CONFIG_SECTION, {})
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{CONFIG_SECTION}' must be a mapping: {path}"
        )
    return section


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    include_utilities_in_user_agent: Optional[bool] = None,
    application_name: Optional[str] = None,
    use_dotenv: bool = True,
) -> AdsLibConfiguration:
    """Load the library configuration.

    Args:
        config_path: Optional YAML file, defaults to ADS_LIB_CONFIG_PATH
        include_utilities_in_user_agent: Override for the utilities flag
        application_name: Override for the application name
        use_dotenv: Load a .env file before reading the environment

    Returns:
        AdsLibConfiguration instance

    Raises:
        ConfigurationError: If the YAML file or a value is invalid
    """
    if use_dotenv:
        load_dotenv()

    config = AdsLibConfiguration()

    config_path = config_path or get_env(ENV_CONFIG_PATH)
    if config_path:
        config = config.merged(_read_yaml_section(Path(config_path)))
        logger.debug(f"Loaded configuration from {config_path}")

    config = config.merged(_env_overrides())
    config = config.merged(
        {
            "include_utilities_in_user_agent": include_utilities_in_user_agent,
            "application_name": application_name,
        }
    )
    return config
