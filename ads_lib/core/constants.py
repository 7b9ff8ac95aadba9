"""Constants and enumerations for the ads library.

This module centralizes the utility identifiers, configuration keys and
user agent defaults so they are not duplicated across modules.
"""

from enum import Enum
from typing import Final


# User agent constants
LIBRARY_NAME: Final[str] = "AdsLib-Python"
LIBRARY_VERSION: Final[str] = "1.0.0"
DEFAULT_APPLICATION_NAME: Final[str] = "INSERT_APPLICATION_NAME_HERE"
USER_AGENT_SEPARATOR: Final[str] = ", "
USER_AGENT_HEADER: Final[str] = "User-Agent"
APPLICATION_NAME_HEADER: Final[str] = "applicationName"

# Configuration constants
CONFIG_SECTION: Final[str] = "ads_lib"
ENV_APPLICATION_NAME: Final[str] = "ADS_LIB_APPLICATION_NAME"
ENV_INCLUDE_UTILITIES: Final[str] = "ADS_LIB_INCLUDE_UTILITIES_IN_USER_AGENT"
ENV_CONFIG_PATH: Final[str] = "ADS_LIB_CONFIG_PATH"


class AdsUtility(Enum):
    """Optional client-side utilities whose usage is reported in the user agent.

    The value of each member is the identifier emitted in the user agent.
    """

    BATCH_JOB_HELPER = "BatchJobHelper"
    DATE_TIMES = "DateTimes"
    PQL = "Pql"
    PRODUCT_PARTITION_TREE = "ProductPartitionTree"
    REPORT_DOWNLOADER = "ReportDownloader"
    SELECTOR_BUILDER = "SelectorBuilder"
    STATEMENT_BUILDER = "StatementBuilder"

    @property
    def user_agent_identifier(self) -> str:
        """Identifier used in the user agent, also the sort key."""
        return self.value
