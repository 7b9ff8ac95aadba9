"""Decorators for marking utility usage."""

from functools import wraps
from typing import Callable

from ads_lib.core.constants import AdsUtility


def uses_utility(*utilities: AdsUtility):
    """
    Decorator recording utility usage on the instance's registry.

    The decorated method's instance must expose a ``utility_registry``
    attribute. When it is None, nothing is recorded.

    Args:
        utilities: Utilities to record each time the method runs

    Returns:
        Decorated function
    """

    def decorator(func: Callable):
        @wraps(func)
        def wrapper(self, *args, **kwargs):
            registry = getattr(self, "utility_registry", None)
            if registry is not None:
                for utility in utilities:
                    registry.add_utility(utility)
            return func(self, *args, **kwargs)

        return wrapper

    return decorator
