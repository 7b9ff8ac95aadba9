"""User agent providers and the combiner that assembles them."""

from ads_lib.useragent.utilities_provider import AdsUtilitiesUserAgentProvider
from ads_lib.useragent.library_provider import (
    LibraryUserAgentProvider,
    PythonUserAgentProvider,
)
from ads_lib.useragent.combiner import UserAgentCombiner

__all__ = [
    "AdsUtilitiesUserAgentProvider",
    "LibraryUserAgentProvider",
    "PythonUserAgentProvider",
    "UserAgentCombiner",
]
