"""Combines the user agent parts into a single header value."""

from typing import List, Optional, Sequence

from loguru import logger

from ads_lib.core.constants import USER_AGENT_SEPARATOR
from ads_lib.core.exceptions import ConfigurationError
from ads_lib.core.protocols import UserAgentProvider


class UserAgentCombiner:
    """Joins the application name with the parts of every provider.

    Format: ``<application name> (<part>, <part>, ...)``. Providers returning
    None are omitted; with no parts left only the application name remains.

    Example:
        ```python
        combiner = UserAgentCombiner(
            "MyApp",
            [LibraryUserAgentProvider(), utilities_provider],
        )
        combiner.combine()  # "MyApp (AdsLib-Python/1.0.0, SelectorBuilder)"
        ```
    """

    def __init__(self, application_name: str, providers: Sequence[UserAgentProvider]) -> None:
        if not application_name or not application_name.strip():
            raise ConfigurationError("Application name cannot be empty")
        self.application_name = application_name.strip()
        self.providers = list(providers)

    def combine(self) -> str:
        """Build the user agent.

        Every provider is consulted on every call, even if an earlier one
        returned None, since some providers clear state when called.
        """
        parts: List[str] = []
        for provider in self.providers:
            part: Optional[str] = provider.get_user_agent()
            if part:
                parts.append(part)

        if not parts:
            user_agent = self.application_name
        else:
            user_agent = f"{self.application_name} ({USER_AGENT_SEPARATOR.join(parts)})"
        logger.debug(f"User agent: {user_agent}")
        return user_agent
