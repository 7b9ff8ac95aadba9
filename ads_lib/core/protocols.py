"""Protocol definitions (interfaces) for the ads library."""

from typing import Callable, Optional, Protocol, TYPE_CHECKING

if TYPE_CHECKING:
    from ads_lib.utils.registry import AdsUtilityRegistry


class UserAgentProvider(Protocol):
    """Interface for a component contributing one part of the user agent."""

    def get_user_agent(self) -> Optional[str]:
        """Return this provider's user agent part.

        Returns:
            The part to include, or None to omit it
        """
        ...


RegistrySupplier = Callable[[], "AdsUtilityRegistry"]
"""Zero-argument accessor returning the registry owned by the current session."""
