"""Selector builder for service ``get`` calls and report definitions."""

from typing import Any, Dict, Iterable, List, Optional

from loguru import logger

from ads_lib.core.constants import AdsUtility
from ads_lib.core.exceptions import QueryBuildError
from ads_lib.utils.decorators import uses_utility
from ads_lib.utils.registry import AdsUtilityRegistry


class SelectorBuilder:
    """Fluent builder for selectors.

    Example:
        ```python
        selector = (
            SelectorBuilder(session.utility_registry)
            .fields("Id", "Name", "Status")
            .equals("Status", "ENABLED")
            .order_asc_by("Name")
            .limit(100)
            .build()
        )
        ```
    """

    def __init__(self, utility_registry: Optional[AdsUtilityRegistry] = None) -> None:
        self.utility_registry = utility_registry
        self._fields: List[str] = []
        self._predicates: List[Dict[str, Any]] = []
        self._ordering: List[Dict[str, str]] = []
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None

    def fields(self, *fields: str) -> "SelectorBuilder":
        for name in fields:
            if name not in self._fields:
                self._fields.append(name)
        return self

    def remove_fields(self, *fields: str) -> "SelectorBuilder":
        self._fields = [name for name in self._fields if name not in fields]
        return self

    def _predicate(self, field: str, operator: str, values: Iterable[Any]) -> "SelectorBuilder":
        self._predicates.append(
            {"field": field, "operator": operator, "values": [str(v) for v in values]}
        )
        return self

    def equals(self, field: str, value: Any) -> "SelectorBuilder":
        return self._predicate(field, "EQUALS", [value])

    def not_equals(self, field: str, value: Any) -> "SelectorBuilder":
        return self._predicate(field, "NOT_EQUALS", [value])

    def in_(self, field: str, *values: Any) -> "SelectorBuilder":
        return self._predicate(field, "IN", values)

    def not_in(self, field: str, *values: Any) -> "SelectorBuilder":
        return self._predicate(field, "NOT_IN", values)

    def greater_than(self, field: str, value: Any) -> "SelectorBuilder":
        return self._predicate(field, "GREATER_THAN", [value])

    def less_than(self, field: str, value: Any) -> "SelectorBuilder":
        return self._predicate(field, "LESS_THAN", [value])

    def contains(self, field: str, value: Any) -> "SelectorBuilder":
        return self._predicate(field, "CONTAINS", [value])

    def order_asc_by(self, field: str) -> "SelectorBuilder":
        self._ordering.append({"field": field, "sortOrder": "ASCENDING"})
        return self

    def order_desc_by(self, field: str) -> "SelectorBuilder":
        self._ordering.append({"field": field, "sortOrder": "DESCENDING"})
        return self

    def limit(self, count: int) -> "SelectorBuilder":
        if count < 0:
            raise QueryBuildError("Limit must be non-negative", clause="paging")
        self._limit = count
        return self

    def offset(self, start_index: int) -> "SelectorBuilder":
        if start_index < 0:
            raise QueryBuildError("Offset must be non-negative", clause="paging")
        self._offset = start_index
        return self

    def increase_offset_by(self, amount: int) -> "SelectorBuilder":
        return self.offset((self._offset or 0) + amount)

    @uses_utility(AdsUtility.SELECTOR_BUILDER)
    def build(self) -> Dict[str, Any]:
        """Build the selector mapping.

        Returns:
            Dict with ``fields``, ``predicates``, ``ordering`` and, when a
            limit or offset was set, ``paging``

        Raises:
            QueryBuildError: If no fields were selected
        """
        if not self._fields:
            raise QueryBuildError("Selector requires at least one field", clause="fields")

        selector: Dict[str, Any] = {
            "fields": list(self._fields),
            "predicates": [dict(p, values=list(p["values"])) for p in self._predicates],
            "ordering": [dict(o) for o in self._ordering],
        }
        if self._limit is not None or self._offset is not None:
            paging: Dict[str, int] = {"startIndex": self._offset or 0}
            if self._limit is not None:
                paging["numberResults"] = self._limit
            selector["paging"] = paging

        logger.debug(f"Built selector with {len(self._fields)} field(s)")
        return selector
