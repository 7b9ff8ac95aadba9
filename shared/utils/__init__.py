"""Utility functions module."""

from shared.utils.logging import setup_logging
from shared.utils.env import get_env, get_env_bool, parse_bool

__all__ = [
    "setup_logging",
    "get_env",
    "get_env_bool",
    "parse_bool",
]
