"""
Customer Domain Service
Search and point operations over customers.
"""
from __future__ import annotations

from datetime import date
from uuid import UUID

from store_api.core.exceptions import NotFoundException
from store_api.core.logging import get_logger
from store_api.data_access.models import Customer
from store_api.data_access.repositories import CustomerRepository
from store_api.domain.value_objects import CustomerSearchCriteria

logger = get_logger(__name__)


class CustomerService:
    def __init__(self, customer_repository: CustomerRepository):
        self._customer_repository = customer_repository

    def get_customers(self, criteria: CustomerSearchCriteria) -> list[Customer]:
        logger.info(f"Fetching list of customers by criteria: {criteria}")
        customers = self._customer_repository.search(criteria)
        if not customers:
            logger.warning("Customer search returned an empty list")
            return []
        logger.debug(f"Fetched {len(customers)} customers")
        return customers

    def get_by_id(self, customer_id: UUID) -> Customer:
        logger.info(f"Fetching customer by id: {customer_id}")
        customer = self._customer_repository.get(customer_id)
        if customer is None:
            logger.warning(f"Customer with id {customer_id} does not exist")
            raise _not_found(customer_id)
        return customer

    def save(self, name: str, last_name: str, dni: str) -> Customer:
        logger.info("Saving customer")
        customer = self._customer_repository.add(
            Customer(name=name, last_name=last_name, dni=dni, creation_date=date.today())
        )
        logger.info(f"Customer {customer.id} saved")
        return customer

    def update(self, customer_id: UUID, name: str, last_name: str) -> Customer:
        """Only the names can change; the dni and creation date are fixed."""
        logger.info(f"Updating customer with id: {customer_id}")
        customer = self._customer_repository.update(
            customer_id, {"name": name, "last_name": last_name}
        )
        if customer is None:
            logger.warning(f"Customer with id {customer_id} not found for update")
            raise _not_found(customer_id)
        logger.info(f"Customer with id {customer_id} updated successfully")
        return customer

    def delete_by_id(self, customer_id: UUID) -> None:
        logger.info(f"Deleting customer with id: {customer_id}")
        if self._customer_repository.delete(customer_id) is None:
            logger.warning(f"Customer with id {customer_id} not found, cannot delete")
            raise _not_found(customer_id)
        logger.debug(f"Customer with id {customer_id} deleted successfully")


def _not_found(customer_id: UUID) -> NotFoundException:
    return NotFoundException(
        f"Customer {customer_id} not found",
        error_code="CUSTOMER_NOT_FOUND",
        details={"id": str(customer_id)},
    )
