"""
Request-scoped dependencies: services bound to the session factory and
criteria objects read from camelCase query parameters.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from fastapi import Depends, Query

from store_api.data_access.db import SessionFactory, get_session_factory
from store_api.data_access.repositories import (
    CustomerRepository,
    ProductRepository,
    SaleRepository,
)
from store_api.domain.services import CustomerService, ProductService, SaleService
from store_api.domain.value_objects import (
    CustomerSearchCriteria,
    ProductSearchCriteria,
    SaleSearchCriteria,
)


def get_customer_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> CustomerService:
    return CustomerService(CustomerRepository(session_factory))


def get_product_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> ProductService:
    return ProductService(ProductRepository(session_factory))


def get_sale_service(
    session_factory: SessionFactory = Depends(get_session_factory),
) -> SaleService:
    return SaleService(
        SaleRepository(session_factory),
        CustomerRepository(session_factory),
        ProductRepository(session_factory),
    )


class PagingParams:
    """Sort and page query parameters shared by every list endpoint."""

    def __init__(
        self,
        sort_field: str | None = Query(None, alias="sortField"),
        sorting_direction: str | None = Query(None, alias="sortingDirection"),
        page_actual: int | None = Query(None, alias="pageActual"),
        page_size: int | None = Query(None, alias="pageSize"),
    ):
        self.sort_field = sort_field
        self.sorting_direction = sorting_direction
        self.page_actual = page_actual
        self.page_size = page_size

    def as_kwargs(self) -> dict:
        return {
            "sort_field": self.sort_field,
            "sorting_direction": self.sorting_direction,
            "page_actual": self.page_actual,
            "page_size": self.page_size,
        }


def customer_criteria(
    id: UUID | None = Query(None),
    name: str | None = Query(None),
    last_name: str | None = Query(None, alias="lastName"),
    dni: str | None = Query(None),
    creation_date: date | None = Query(None, alias="creationDate"),
    paging: PagingParams = Depends(),
) -> CustomerSearchCriteria:
    return CustomerSearchCriteria(
        id=id,
        name=name,
        last_name=last_name,
        dni=dni,
        creation_date=creation_date,
        **paging.as_kwargs(),
    )


def product_criteria(
    id: UUID | None = Query(None),
    name: str | None = Query(None),
    trade_mark: str | None = Query(None, alias="tradeMark"),
    price: Decimal | None = Query(None),
    stock: int | None = Query(None),
    creation_date: date | None = Query(None, alias="creationDate"),
    paging: PagingParams = Depends(),
) -> ProductSearchCriteria:
    return ProductSearchCriteria(
        id=id,
        name=name,
        trade_mark=trade_mark,
        price=price,
        stock=stock,
        creation_date=creation_date,
        **paging.as_kwargs(),
    )


def sale_criteria(
    id: UUID | None = Query(None),
    creation_date: date | None = Query(None, alias="creationDate"),
    customer_id: UUID | None = Query(None, alias="customerId"),
    customer_name: str | None = Query(None, alias="customerName"),
    product_ids: list[UUID] | None = Query(None, alias="productIds"),
    paging: PagingParams = Depends(),
) -> SaleSearchCriteria:
    return SaleSearchCriteria(
        id=id,
        creation_date=creation_date,
        customer_id=customer_id,
        customer_name=customer_name,
        product_ids=tuple(product_ids or ()),
        **paging.as_kwargs(),
    )
