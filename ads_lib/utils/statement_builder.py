"""PQL statement builder.

Builds the ``Statement`` objects (query plus bind variables) accepted by
the ad manager services, e.g. ``getAdRulesByStatement`` and
``performAdRuleAction``.

Example:
    ```python
    statement = (
        StatementBuilder(session.utility_registry)
        .where("status = :status")
        .order_by("id ASC")
        .limit(StatementBuilder.SUGGESTED_PAGE_LIMIT)
        .with_bind_variable("status", "ACTIVE")
        .to_statement()
    )
    statement.query  # "WHERE status = :status ORDER BY id ASC LIMIT 500"
    ```
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from loguru import logger

from ads_lib.core.constants import AdsUtility
from ads_lib.core.exceptions import QueryBuildError
from ads_lib.utils.decorators import uses_utility
from ads_lib.utils.registry import AdsUtilityRegistry


@dataclass(frozen=True)
class TextValue:
    value: str
    xsi_type: str = "TextValue"


@dataclass(frozen=True)
class NumberValue:
    """Numeric bind value. The API transports numbers as strings."""

    value: str
    xsi_type: str = "NumberValue"


@dataclass(frozen=True)
class BooleanValue:
    value: bool
    xsi_type: str = "BooleanValue"


Value = Union[TextValue, NumberValue, BooleanValue]


@dataclass(frozen=True)
class BindVariable:
    key: str
    value: Value


@dataclass(frozen=True)
class Statement:
    """A PQL query with its bind variables."""

    query: str
    values: List[BindVariable] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the mapping shape used in SOAP request bodies."""
        return {
            "query": self.query,
            "values": [
                {
                    "key": bind.key,
                    "value": {"xsi_type": bind.value.xsi_type, "value": bind.value.value},
                }
                for bind in self.values
            ],
        }


def to_value(value: Any) -> Value:
    """Wrap a Python value in the matching bind value type.

    Raises:
        QueryBuildError: If the type has no PQL equivalent
    """
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return BooleanValue(value)
    if isinstance(value, (int, float)):
        return NumberValue(str(value))
    if isinstance(value, str):
        return TextValue(value)
    raise QueryBuildError(
        f"Unsupported bind variable type: {type(value).__name__}",
        details={"value": repr(value)},
    )


def _strip_keyword(keyword: str, clause: str) -> str:
    pattern = r"^\s*" + r"\s+".join(keyword.split()) + r"\s+"
    return re.sub(pattern, "", clause, count=1, flags=re.IGNORECASE).strip()


class StatementBuilder:
    """Fluent builder for PQL statements.

    Clause arguments may include or omit their leading keyword
    (``"WHERE id = 1"`` and ``"id = 1"`` are equivalent).
    """

    SUGGESTED_PAGE_LIMIT = 500

    def __init__(self, utility_registry: Optional[AdsUtilityRegistry] = None) -> None:
        self.utility_registry = utility_registry
        self._select: Optional[str] = None
        self._from: Optional[str] = None
        self._where: Optional[str] = None
        self._order_by: Optional[str] = None
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._values: Dict[str, Value] = {}

    def select(self, columns: str) -> "StatementBuilder":
        self._select = _strip_keyword("SELECT", columns)
        return self

    def from_(self, table: str) -> "StatementBuilder":
        self._from = _strip_keyword("FROM", table)
        return self

    def where(self, conditions: str) -> "StatementBuilder":
        self._where = _strip_keyword("WHERE", conditions)
        return self

    def order_by(self, ordering: str) -> "StatementBuilder":
        self._order_by = _strip_keyword("ORDER BY", ordering)
        return self

    def limit(self, count: Optional[int]) -> "StatementBuilder":
        if count is not None and count < 0:
            raise QueryBuildError("LIMIT must be non-negative", clause="LIMIT")
        self._limit = count
        return self

    def offset(self, count: Optional[int]) -> "StatementBuilder":
        if count is not None and count < 0:
            raise QueryBuildError("OFFSET must be non-negative", clause="OFFSET")
        self._offset = count
        return self

    def increase_offset_by(self, amount: int) -> "StatementBuilder":
        """Advance the offset, typically by the page size, when paging."""
        return self.offset((self._offset or 0) + amount)

    def remove_limit_and_offset(self) -> "StatementBuilder":
        """Drop paging, e.g. before passing the filter to an action call."""
        self._limit = None
        self._offset = None
        return self

    def with_bind_variable(self, key: str, value: Any) -> "StatementBuilder":
        self._values[key] = to_value(value)
        return self

    @property
    def offset_value(self) -> Optional[int]:
        return self._offset

    def build_query(self) -> str:
        """Assemble the query string.

        Raises:
            QueryBuildError: If the clauses are inconsistent
        """
        if self._select and not self._from:
            raise QueryBuildError("FROM clause is required with SELECT", clause="FROM")
        if self._from and not self._select:
            raise QueryBuildError("SELECT clause is required with FROM", clause="SELECT")
        if self._offset is not None and self._limit is None:
            raise QueryBuildError("OFFSET cannot be set if LIMIT is not set", clause="OFFSET")

        parts = []
        if self._select:
            parts.append(f"SELECT {self._select} FROM {self._from}")
        if self._where:
            parts.append(f"WHERE {self._where}")
        if self._order_by:
            parts.append(f"ORDER BY {self._order_by}")
        if self._limit is not None:
            parts.append(f"LIMIT {self._limit}")
        if self._offset is not None:
            parts.append(f"OFFSET {self._offset}")
        return " ".join(parts)

    @uses_utility(AdsUtility.STATEMENT_BUILDER)
    def to_statement(self) -> Statement:
        """Build the statement.

        Returns:
            Statement with the query and bind variables in insertion order

        Raises:
            QueryBuildError: If the clauses are inconsistent
        """
        query = self.build_query()
        logger.debug(f"Built PQL statement: {query}")
        return Statement(
            query=query,
            values=[BindVariable(key, value) for key, value in self._values.items()],
        )
