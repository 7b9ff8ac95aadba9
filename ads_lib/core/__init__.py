"""Core abstractions, constants and configuration for the ads library."""

from ads_lib.core.constants import AdsUtility
from ads_lib.core.exceptions import (
    AdsLibError,
    ConfigurationError,
    QueryBuildError,
)
from ads_lib.core.config import AdsLibConfiguration, load_config
from ads_lib.core.protocols import RegistrySupplier, UserAgentProvider

__all__ = [
    # Constants
    "AdsUtility",
    # Exceptions
    "AdsLibError",
    "ConfigurationError",
    "QueryBuildError",
    # Configuration
    "AdsLibConfiguration",
    "load_config",
    # Protocols
    "RegistrySupplier",
    "UserAgentProvider",
]
