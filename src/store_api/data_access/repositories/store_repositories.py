"""Concrete repositories for customers, products and sales."""
from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from uuid import UUID

from sqlalchemy.orm import selectinload
from sqlmodel import select

from store_api.data_access.models import Customer, Product, Sale
from store_api.data_access.query import (
    Specification,
    customer_specification,
    product_specification,
    sale_specification,
)
from store_api.domain.value_objects import (
    CustomerSearchCriteria,
    ProductSearchCriteria,
    SaleSearchCriteria,
)

from .base_repository import SQLModelRepository


class CustomerRepository(SQLModelRepository[Customer, CustomerSearchCriteria]):
    model_class = Customer

    def build_specification(self, criteria: CustomerSearchCriteria) -> Specification:
        return customer_specification(criteria)


class ProductRepository(SQLModelRepository[Product, ProductSearchCriteria]):
    model_class = Product

    def build_specification(self, criteria: ProductSearchCriteria) -> Specification:
        return product_specification(criteria)


class SaleRepository(SQLModelRepository[Sale, SaleSearchCriteria]):
    """Sales are always returned with their customer and products loaded."""

    model_class = Sale
    load_options = (selectinload(Sale.customer), selectinload(Sale.products))

    def build_specification(self, criteria: SaleSearchCriteria) -> Specification:
        return sale_specification(criteria)

    def create(self, sale: Sale, product_ids: Sequence[UUID]) -> Sale:
        """Insert a sale linked to the listed products."""
        with self._writing() as session:
            sale.products = self._products_in(session, product_ids)
            session.add(sale)
            session.flush()
            return self._reload(session, sale.id)

    def replace(
        self,
        id: UUID,
        customer_id: UUID,
        product_ids: Sequence[UUID],
        total_amount: Decimal,
    ) -> Sale | None:
        """Replace the customer, products and total of a stored sale."""
        with self._writing() as session:
            sale = session.get(Sale, id, options=self.load_options)
            if sale is None:
                return None
            sale.customer_id = customer_id
            sale.total_amount = total_amount
            sale.products = self._products_in(session, product_ids)
            session.flush()
            return self._reload(session, id)

    @staticmethod
    def _products_in(session, product_ids: Sequence[UUID]) -> list[Product]:
        if not product_ids:
            return []
        stmt = select(Product).where(Product.id.in_(list(product_ids)))
        return list(session.exec(stmt).all())
