"""
Value Objects for Search and Filtering Operations
Each criteria object carries optional filters plus sort and pagination input
for one entity family. They are created per request and never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import date
from decimal import Decimal
from typing import Any
from uuid import UUID

from store_api.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE

_CONTROL_FIELDS = frozenset({"sort_field", "sorting_direction", "page_actual", "page_size"})


def is_present(value: Any) -> bool:
    """A filter value counts only when it is not None and not an empty string or collection."""
    if value is None:
        return False
    if isinstance(value, (str, list, tuple, set, frozenset)):
        return len(value) > 0
    return True


@dataclass(frozen=True)
class SearchCriteria:
    """
    Sort and pagination input shared by every entity family.

    Pagination values are not validated here; the paginator rejects
    out-of-range values when the query is built.
    """
    sort_field: str | None = None
    sorting_direction: str | None = None
    page_actual: int | None = DEFAULT_PAGE
    page_size: int | None = DEFAULT_PAGE_SIZE

    def present_filters(self) -> dict[str, Any]:
        """Return the filter fields that carry a value."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name not in _CONTROL_FIELDS and is_present(getattr(self, f.name))
        }


@dataclass(frozen=True)
class CustomerSearchCriteria(SearchCriteria):
    """Value object for customer search parameters."""
    id: UUID | None = None
    name: str | None = None
    last_name: str | None = None
    dni: str | None = None
    creation_date: date | None = None


@dataclass(frozen=True)
class ProductSearchCriteria(SearchCriteria):
    """Value object for product search parameters."""
    id: UUID | None = None
    name: str | None = None
    trade_mark: str | None = None
    price: Decimal | None = None
    stock: int | None = None
    creation_date: date | None = None


@dataclass(frozen=True)
class SaleSearchCriteria(SearchCriteria):
    """
    Value object for sale search parameters.

    customer_name matches as a case-insensitive substring; product_ids
    matches sales containing any of the listed products.
    """
    id: UUID | None = None
    creation_date: date | None = None
    customer_id: UUID | None = None
    customer_name: str | None = None
    product_ids: tuple[UUID, ...] = field(default_factory=tuple)
