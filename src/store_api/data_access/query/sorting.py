"""
Sort resolution against an explicit allow-list of sortable fields per entity.

Field names are accepted in snake_case or camelCase ("creationDate").
Anything outside the allow-list is rejected before a query is built.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlmodel import SQLModel

from store_api.core.constants import DESCENDING_TOKEN
from store_api.core.exceptions import FieldNotFoundException
from store_api.data_access.models import Customer, Product, Sale

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def from_token(cls, token: str | None) -> SortDirection:
        """Only a case-insensitive "desc" sorts descending."""
        if token is not None and token.lower() == DESCENDING_TOKEN:
            return cls.DESC
        return cls.ASC


class CustomerSortField(str, Enum):
    ID = "id"
    NAME = "name"
    LAST_NAME = "last_name"
    DNI = "dni"
    CREATION_DATE = "creation_date"


class ProductSortField(str, Enum):
    ID = "id"
    NAME = "name"
    TRADE_MARK = "trade_mark"
    PRICE = "price"
    DESCRIPTION = "description"
    STOCK = "stock"
    CREATION_DATE = "creation_date"


class SaleSortField(str, Enum):
    ID = "id"
    CREATION_DATE = "creation_date"
    TOTAL_AMOUNT = "total_amount"


SORTABLE_COLUMNS: dict[type[SQLModel], dict[Enum, Any]] = {
    Customer: {
        CustomerSortField.ID: Customer.id,
        CustomerSortField.NAME: Customer.name,
        CustomerSortField.LAST_NAME: Customer.last_name,
        CustomerSortField.DNI: Customer.dni,
        CustomerSortField.CREATION_DATE: Customer.creation_date,
    },
    Product: {
        ProductSortField.ID: Product.id,
        ProductSortField.NAME: Product.name,
        ProductSortField.TRADE_MARK: Product.trade_mark,
        ProductSortField.PRICE: Product.price,
        ProductSortField.DESCRIPTION: Product.description,
        ProductSortField.STOCK: Product.stock,
        ProductSortField.CREATION_DATE: Product.creation_date,
    },
    Sale: {
        SaleSortField.ID: Sale.id,
        SaleSortField.CREATION_DATE: Sale.creation_date,
        SaleSortField.TOTAL_AMOUNT: Sale.total_amount,
    },
}


@dataclass(frozen=True)
class SortSpec:
    field: Enum
    column: Any
    direction: SortDirection = SortDirection.ASC

    def clause(self) -> Any:
        """Return the ORDER BY expression."""
        if self.direction is SortDirection.DESC:
            return self.column.desc()
        return self.column.asc()


def normalize_field_name(name: str) -> str:
    """Convert a camelCase field name to snake_case; snake_case passes through."""
    return _CAMEL_BOUNDARY.sub("_", name.strip()).lower()


def resolve_sort(
    model: type[SQLModel],
    sort_field: str | None,
    sorting_direction: str | None = None,
) -> SortSpec | None:
    """
    Map a sort field and direction token onto an ordering.

    Returns None when no sort field is given. Raises FieldNotFoundException
    when the field is not sortable for the model.
    """
    if sort_field is None or not sort_field.strip():
        return None

    columns = SORTABLE_COLUMNS[model]
    wanted = normalize_field_name(sort_field)
    for field_enum, column in columns.items():
        if field_enum.value == wanted:
            return SortSpec(
                field=field_enum,
                column=column,
                direction=SortDirection.from_token(sorting_direction),
            )

    raise FieldNotFoundException(
        model.__name__,
        sort_field,
        allowed=[field_enum.value for field_enum in columns],
    )
