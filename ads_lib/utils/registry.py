"""Utility usage registry.

Tracks which optional utilities were exercised since the last user agent
was computed. One registry is owned by each session for its whole lifetime.
"""

import threading
from typing import FrozenSet, Set

from loguru import logger

from ads_lib.core.constants import AdsUtility


class AdsUtilityRegistry:
    """Set of utilities used since the last drain.

    Example:
        ```python
        registry = AdsUtilityRegistry()
        registry.add_utility(AdsUtility.SELECTOR_BUILDER)
        registry.drain_and_clear()  # frozenset({AdsUtility.SELECTOR_BUILDER})
        registry.drain_and_clear()  # frozenset()
        ```
    """

    def __init__(self) -> None:
        self._utilities: Set[AdsUtility] = set()
        self._lock = threading.Lock()

    def add_utility(self, utility: AdsUtility) -> None:
        """Record a utility usage. Adding it again has no effect.

        Args:
            utility: Utility that was used
        """
        with self._lock:
            self._utilities.add(utility)
        logger.debug(f"Registered utility: {utility.user_agent_identifier}")

    def get_registered_utilities(self) -> FrozenSet[AdsUtility]:
        """Return the current contents without clearing them."""
        with self._lock:
            return frozenset(self._utilities)

    def drain_and_clear(self) -> FrozenSet[AdsUtility]:
        """Atomically return the current contents and empty the registry.

        Returns:
            Utilities registered since the previous drain
        """
        with self._lock:
            drained, self._utilities = self._utilities, set()
        return frozenset(drained)

    def __len__(self) -> int:
        with self._lock:
            return len(self._utilities)

    def __contains__(self, utility: object) -> bool:
        with self._lock:
            return utility in self._utilities

    def __repr__(self) -> str:
        names = sorted(u.user_agent_identifier for u in self.get_registered_utilities())
        return f"AdsUtilityRegistry({names})"
