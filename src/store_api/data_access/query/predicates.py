"""
Predicate builders turning criteria objects into specifications.

Only present fields produce predicates. Every field is an equality test,
except the sale customer name, which is a case-insensitive substring test.
"""
from __future__ import annotations

from typing import Any

from sqlalchemy import func

from store_api.data_access.models import Customer, Product, Sale
from store_api.domain.value_objects import (
    CustomerSearchCriteria,
    ProductSearchCriteria,
    SaleSearchCriteria,
    SearchCriteria,
    is_present,
)

from .specification import JoinKey, Specification

# criteria attribute -> mapped column
CUSTOMER_EQUALITY_FILTERS: dict[str, Any] = {
    "id": Customer.id,
    "name": Customer.name,
    "last_name": Customer.last_name,
    "dni": Customer.dni,
    "creation_date": Customer.creation_date,
}

PRODUCT_EQUALITY_FILTERS: dict[str, Any] = {
    "id": Product.id,
    "name": Product.name,
    "trade_mark": Product.trade_mark,
    "price": Product.price,
    "stock": Product.stock,
    "creation_date": Product.creation_date,
}

SALE_EQUALITY_FILTERS: dict[str, Any] = {
    "id": Sale.id,
    "creation_date": Sale.creation_date,
}


def _equality_specification(criteria: SearchCriteria, filters: dict[str, Any]) -> Specification:
    spec = Specification()
    present = criteria.present_filters()
    for attribute, column in filters.items():
        if attribute in present:
            spec.where(column == present[attribute])
    return spec


def customer_specification(criteria: CustomerSearchCriteria) -> Specification:
    return _equality_specification(criteria, CUSTOMER_EQUALITY_FILTERS)


def product_specification(criteria: ProductSearchCriteria) -> Specification:
    return _equality_specification(criteria, PRODUCT_EQUALITY_FILTERS)


def sale_specification(criteria: SaleSearchCriteria) -> Specification:
    """
    Build the sale specification, joining customers and products only when
    a filter reads from them. Customer id and customer name share one join.
    """
    spec = _equality_specification(criteria, SALE_EQUALITY_FILTERS)

    if is_present(criteria.customer_id):
        spec.join(JoinKey.CUSTOMER, Sale.customer, Customer.id == criteria.customer_id)

    if is_present(criteria.customer_name):
        spec.join(
            JoinKey.CUSTOMER,
            Sale.customer,
            func.lower(Customer.name).contains(criteria.customer_name.lower(), autoescape=True),
        )

    if is_present(criteria.product_ids):
        spec.join(
            JoinKey.PRODUCTS,
            Sale.products,
            Product.id.in_(list(criteria.product_ids)),
            collection=True,
        )

    return spec
