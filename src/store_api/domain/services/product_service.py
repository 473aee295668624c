"""
Product Domain Service
Search and point operations over products.
"""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from uuid import UUID

from store_api.core.exceptions import NotFoundException
from store_api.core.logging import get_logger
from store_api.data_access.models import Product
from store_api.data_access.repositories import ProductRepository
from store_api.domain.value_objects import ProductSearchCriteria

logger = get_logger(__name__)


class ProductService:
    def __init__(self, product_repository: ProductRepository):
        self._product_repository = product_repository

    def get_products(self, criteria: ProductSearchCriteria) -> list[Product]:
        logger.info(f"Fetching list of products by criteria: {criteria}")
        products = self._product_repository.search(criteria)
        if not products:
            logger.warning(f"Products list is empty for criteria: {criteria}")
            return []
        logger.debug(f"Products fetched successfully with size: {len(products)}")
        return products

    def get_by_id(self, product_id: UUID) -> Product:
        logger.info(f"Fetching product by id: {product_id}")
        product = self._product_repository.get(product_id)
        if product is None:
            logger.warning(f"Product with id {product_id} not found")
            raise _not_found(product_id)
        return product

    def save(
        self,
        name: str,
        trade_mark: str,
        price: Decimal,
        description: str,
        stock: int = 0,
    ) -> Product:
        logger.info("Saving new product")
        product = self._product_repository.add(
            Product(
                name=name,
                trade_mark=trade_mark,
                price=price,
                description=description,
                stock=stock,
                creation_date=date.today(),
            )
        )
        logger.info(f"Product {product.id} saved successfully")
        return product

    def update(
        self,
        product_id: UUID,
        name: str,
        trade_mark: str,
        price: Decimal,
        description: str,
    ) -> Product:
        """Stock is left untouched; it has its own movements."""
        logger.info(f"Updating product with id: {product_id}")
        product = self._product_repository.update(
            product_id,
            {
                "name": name,
                "trade_mark": trade_mark,
                "price": price,
                "description": description,
            },
        )
        if product is None:
            logger.warning(f"Product with id {product_id} not found for update")
            raise _not_found(product_id)
        logger.info(f"Product with id {product_id} updated successfully")
        return product

    def delete_by_id(self, product_id: UUID) -> None:
        logger.info(f"Deleting product with id: {product_id}")
        if self._product_repository.delete(product_id) is None:
            logger.warning(f"Product with id {product_id} not found, cannot delete")
            raise _not_found(product_id)
        logger.debug(f"Product with id {product_id} deleted successfully")


def _not_found(product_id: UUID) -> NotFoundException:
    return NotFoundException(
        f"Product {product_id} not found",
        error_code="PRODUCT_NOT_FOUND",
        details={"id": str(product_id)},
    )
