"""
Shared module for the ads client library.
Contains common logging and environment helpers.
"""

from shared.utils.logging import setup_logging
from shared.utils.env import get_env, get_env_bool, parse_bool

__all__ = [
    "setup_logging",
    "get_env",
    "get_env_bool",
    "parse_bool",
]
