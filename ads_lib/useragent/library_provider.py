"""Static user agent parts: library and Python runtime versions."""

import platform
from typing import Optional

from ads_lib.core.constants import LIBRARY_NAME, LIBRARY_VERSION


class LibraryUserAgentProvider:
    """Returns ``<name>/<version>`` for the client library."""

    def __init__(self, name: str = LIBRARY_NAME, version: str = LIBRARY_VERSION) -> None:
        self.name = name
        self.version = version

    def get_user_agent(self) -> Optional[str]:
        return f"{self.name}/{self.version}"


class PythonUserAgentProvider:
    """Returns ``Python/<version>`` for the running interpreter."""

    def get_user_agent(self) -> Optional[str]:
        return f"Python/{platform.python_version()}"
