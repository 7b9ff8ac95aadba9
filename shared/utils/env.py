"""
Environment variable utilities.
Provides functions for accessing environment variables with proper error handling.
"""

import os
from typing import Optional

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.environ.get(key, default)


def parse_bool(value: str) -> Optional[bool]:
    """
    Parse a textual boolean.

    Args:
        value: Raw value such as "true", "0" or "off"

    Returns:
        The boolean, or None if the value is not recognised
    """
    value = value.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return None


def get_env_bool(key: str, default: Optional[bool] = False) -> Optional[bool]:
    """
    Get environment variable as boolean.

    Args:
        key: Environment variable name
        default: Default value if not set or not a recognised boolean

    Returns:
        Boolean value
    """
    parsed = parse_bool(os.environ.get(key, ""))
    if parsed is None:
        return default
    return parsed
