"""
ads_lib: client-side helpers for Google ads APIs.

Tracks the optional utilities used by an application and reports them in
the user agent of the next request.

Example:
    from ads_lib import AdsSession, AdsLibConfiguration, AdsUtility

    session = AdsSession(AdsLibConfiguration(application_name="MyApp"))
    session.utility_registry.add_utility(AdsUtility.REPORT_DOWNLOADER)
    session.get_user_agent()
    # "MyApp (AdsLib-Python/1.0.0, Python/3.12.1, ReportDownloader)"
"""

from ads_lib.core.constants import LIBRARY_VERSION, AdsUtility
from ads_lib.core.config import AdsLibConfiguration, load_config
from ads_lib.core.exceptions import AdsLibError, ConfigurationError, QueryBuildError
from ads_lib.utils.registry import AdsUtilityRegistry
from ads_lib.utils.decorators import uses_utility
from ads_lib.utils.statement_builder import Statement, StatementBuilder
from ads_lib.utils.selector_builder import SelectorBuilder
from ads_lib.useragent import (
    AdsUtilitiesUserAgentProvider,
    LibraryUserAgentProvider,
    PythonUserAgentProvider,
    UserAgentCombiner,
)
from ads_lib.session import AdsSession

__all__ = [
    "AdsSession",
    "AdsUtility",
    "AdsUtilityRegistry",
    "AdsLibConfiguration",
    "load_config",
    "uses_utility",
    "AdsUtilitiesUserAgentProvider",
    "LibraryUserAgentProvider",
    "PythonUserAgentProvider",
    "UserAgentCombiner",
    "Statement",
    "StatementBuilder",
    "SelectorBuilder",
    "AdsLibError",
    "ConfigurationError",
    "QueryBuildError",
]

__version__ = LIBRARY_VERSION
