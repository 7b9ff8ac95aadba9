"""Custom exception hierarchy for the ads library.

The user agent core itself never raises; these exceptions cover the
configuration layer and the query builders around it.
"""

from typing import Optional, Dict, Any


class AdsLibError(Exception):
    """Base exception for all ads library errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ConfigurationError(AdsLibError):
    """Raised when configuration is invalid or missing.

    Examples:
        - Configuration file not found or not valid YAML
        - Non-boolean value for a boolean setting
        - Blank application name
    """

    pass


class QueryBuildError(AdsLibError):
    """Raised when a statement or selector cannot be built.

    Examples:
        - SELECT without FROM
        - Negative limit or offset
        - Selector without fields
    """

    def __init__(
        self,
        message: str,
        clause: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize query build error.

        Args:
            message: Human-readable error message
            clause: Clause that failed (e.g. "LIMIT")
            details: Optional additional context
        """
        super().__init__(message, details)
        self.clause = clause

    def __str__(self) -> str:
        """Return string representation with the failing clause."""
        base = self.message
        if self.clause:
            base = f"{base} (clause: {self.clause})"
        if self.details:
            base = f"{base}\nDetails: {self.details}"
        return base
