"""Domain layer containing the search criteria value objects."""

from .value_objects import (
    CustomerSearchCriteria,
    ProductSearchCriteria,
    SaleSearchCriteria,
    SearchCriteria,
)

__all__ = [
    "SearchCriteria",
    "CustomerSearchCriteria",
    "ProductSearchCriteria",
    "SaleSearchCriteria",
]
