"""
Sale Domain Service
Business rules for recording sales: the customer and every listed product
must exist, and the sale total is the sum of the product prices.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from decimal import Decimal
from uuid import UUID

from store_api.core.exceptions import NotFoundException, ValidationException
from store_api.core.logging import get_logger
from store_api.data_access.models import Product, Sale
from store_api.data_access.repositories import (
    CustomerRepository,
    ProductRepository,
    SaleRepository,
)
from store_api.domain.value_objects import SaleSearchCriteria

logger = get_logger(__name__)


class SaleService:
    """
    Domain service for sales.

    Uses the customer and product repositories to check references before
    a sale is written.
    """

    def __init__(
        self,
        sale_repository: SaleRepository,
        customer_repository: CustomerRepository,
        product_repository: ProductRepository,
    ):
        self._sale_repository = sale_repository
        self._customer_repository = customer_repository
        self._product_repository = product_repository

    def get_sales(self, criteria: SaleSearchCriteria) -> list[Sale]:
        logger.info(f"Fetching list of sales by criteria: {criteria}")
        sales = self._sale_repository.search(criteria)
        if not sales:
            logger.warning(f"Sales list is empty for criteria: {criteria}")
            return []
        logger.debug(f"Sales fetched successfully with size: {len(sales)}")
        return sales

    def get_by_id(self, sale_id: UUID) -> Sale:
        logger.info(f"Fetching sale by id: {sale_id}")
        sale = self._sale_repository.get(sale_id)
        if sale is None:
            logger.warning(f"Sale with id {sale_id} not found")
            raise _not_found(sale_id)
        return sale

    def save(self, customer_id: UUID, product_ids: Sequence[UUID]) -> Sale:
        """Record a sale for an existing customer over existing products."""
        logger.info(f"Saving sale for customer {customer_id}")
        product_ids = _unique(product_ids)
        self._require_customer(customer_id)
        products = self._require_products(product_ids)

        sale = Sale(
            customer_id=customer_id,
            creation_date=date.today(),
            total_amount=calculate_total(products),
        )
        sale = self._sale_repository.create(sale, product_ids)
        logger.info(f"Sale {sale.id} saved with total {sale.total_amount}")
        return sale

    def update(self, sale_id: UUID, customer_id: UUID, product_ids: Sequence[UUID]) -> Sale:
        """Replace the customer and products of a sale and recompute its total."""
        logger.info(f"Updating sale with id: {sale_id}")
        product_ids = _unique(product_ids)
        if not self._sale_repository.exists(sale_id):
            logger.warning(f"Sale with id {sale_id} not found for update")
            raise _not_found(sale_id)
        self._require_customer(customer_id)
        products = self._require_products(product_ids)

        sale = self._sale_repository.replace(
            sale_id, customer_id, product_ids, calculate_total(products)
        )
        if sale is None:
            raise _not_found(sale_id)
        logger.info(f"Sale with id {sale_id} updated successfully")
        return sale

    def delete_by_id(self, sale_id: UUID) -> Sale:
        """Delete a sale and return it as it was stored."""
        logger.info(f"Deleting sale with id: {sale_id}")
        sale = self._sale_repository.delete(sale_id)
        if sale is None:
            logger.warning(f"Sale with id {sale_id} not found, cannot delete")
            raise _not_found(sale_id)
        logger.debug(f"Sale with id {sale_id} deleted successfully")
        return sale

    def _require_customer(self, customer_id: UUID) -> None:
        if not self._customer_repository.exists(customer_id):
            logger.warning(f"Customer with id {customer_id} not found for sale")
            raise NotFoundException(
                f"Customer {customer_id} not found",
                error_code="CUSTOMER_NOT_FOUND",
                details={"id": str(customer_id)},
            )

    def _require_products(self, product_ids: list[UUID]) -> list[Product]:
        if not product_ids:
            raise ValidationException(
                "A sale needs at least one product", field="product_ids"
            )
        products = self._product_repository.get_many(product_ids)
        missing = set(product_ids) - {product.id for product in products}
        if missing:
            logger.warning(f"Products not found for sale: {sorted(map(str, missing))}")
            raise NotFoundException(
                "Some products of the sale do not exist",
                error_code="PRODUCT_NOT_FOUND",
                details={"ids": sorted(str(product_id) for product_id in missing)},
            )
        return products


def calculate_total(products: Sequence[Product]) -> Decimal:
    """Sum of the product prices."""
    return sum((Decimal(product.price) for product in products), Decimal("0"))


def _unique(product_ids: Sequence[UUID]) -> list[UUID]:
    return list(dict.fromkeys(product_ids))


def _not_found(sale_id: UUID) -> NotFoundException:
    return NotFoundException(
        f"Sale {sale_id} not found",
        error_code="SALE_NOT_FOUND",
        details={"id": str(sale_id)},
    )
