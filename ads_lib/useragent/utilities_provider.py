"""User agent part listing the utilities used since the previous request."""

from typing import Optional

from loguru import logger

from ads_lib.core.config import AdsLibConfiguration
from ads_lib.core.constants import USER_AGENT_SEPARATOR
from ads_lib.core.protocols import RegistrySupplier


class AdsUtilitiesUserAgentProvider:
    """Builds the utilities clause of the user agent.

    Every call drains the registry, whether or not the clause is emitted,
    so usage is never reported twice or carried over to a later request.

    Attributes:
        registry_supplier: Accessor for the session's registry, called once per computation
        configuration: Configuration holding the include-utilities flag
    """

    def __init__(
        self,
        registry_supplier: RegistrySupplier,
        configuration: AdsLibConfiguration,
    ) -> None:
        self.registry_supplier = registry_supplier
        self.configuration = configuration

    def get_user_agent(self) -> Optional[str]:
        """Return the registered utilities sorted by identifier, or None.

        Returns:
            Identifiers joined by ", ", or None when the flag is off or
            nothing was registered
        """
        include_utilities = self.configuration.include_utilities_in_user_agent
        utilities = self.registry_supplier().drain_and_clear()

        if not include_utilities:
            logger.debug("Utilities excluded from user agent by configuration")
            return None
        if not utilities:
            return None

        identifiers = sorted(u.user_agent_identifier for u in utilities)
        return USER_AGENT_SEPARATOR.join(identifiers)
