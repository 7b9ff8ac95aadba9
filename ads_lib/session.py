"""Client session.

The session is the owning context of the utility registry: helpers record
their usage on ``session.utility_registry`` and every request built from the
session reports (and clears) it through the user agent.
"""

from typing import Dict, Optional

from loguru import logger

from ads_lib.core.config import AdsLibConfiguration, load_config
from ads_lib.core.constants import (
    APPLICATION_NAME_HEADER,
    DEFAULT_APPLICATION_NAME,
    LIBRARY_VERSION,
    USER_AGENT_HEADER,
)
from ads_lib.useragent.combiner import UserAgentCombiner
from ads_lib.useragent.library_provider import (
    LibraryUserAgentProvider,
    PythonUserAgentProvider,
)
from ads_lib.useragent.utilities_provider import AdsUtilitiesUserAgentProvider
from ads_lib.utils.registry import AdsUtilityRegistry
from ads_lib.utils.selector_builder import SelectorBuilder
from ads_lib.utils.statement_builder import StatementBuilder


class AdsSession:
    """Holds the configuration and utility registry of one API client.

    Attributes:
        configuration: Library configuration
        utility_registry: Registry of utilities used since the last request
    """

    def __init__(self, configuration: Optional[AdsLibConfiguration] = None) -> None:
        self.configuration = configuration or load_config()
        self.utility_registry = AdsUtilityRegistry()

        application_name = self.configuration.application_name
        if not application_name or not application_name.strip():
            application_name = DEFAULT_APPLICATION_NAME
        if application_name == DEFAULT_APPLICATION_NAME:
            logger.warning(
                "Application name is not set, please set application_name in the "
                "configuration to identify your requests"
            )

        self._combiner = UserAgentCombiner(
            application_name,
            [
                LibraryUserAgentProvider(self.configuration.library_name, LIBRARY_VERSION),
                PythonUserAgentProvider(),
                AdsUtilitiesUserAgentProvider(
                    lambda: self.utility_registry, self.configuration
                ),
            ],
        )

    def get_user_agent(self) -> str:
        """Build the user agent for the next request. Clears the registry."""
        return self._combiner.combine()

    def get_request_headers(self) -> Dict[str, str]:
        """Build the headers for the next request. Clears the registry.

        Returns:
            HTTP ``User-Agent`` and SOAP ``applicationName`` headers
        """
        user_agent = self.get_user_agent()
        return {
            USER_AGENT_HEADER: user_agent,
            APPLICATION_NAME_HEADER: user_agent,
        }

    def statement_builder(self) -> StatementBuilder:
        """Create a statement builder recording usage on this session."""
        return StatementBuilder(self.utility_registry)

    def selector_builder(self) -> SelectorBuilder:
        """Create a selector builder recording usage on this session."""
        return SelectorBuilder(self.utility_registry)
