from .base_repository import SQLModelRepository
from .store_repositories import CustomerRepository, ProductRepository, SaleRepository

__all__ = [
    "SQLModelRepository",
    "CustomerRepository",
    "ProductRepository",
    "SaleRepository",
]
