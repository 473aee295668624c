from .search_criteria import (
    CustomerSearchCriteria,
    ProductSearchCriteria,
    SaleSearchCriteria,
    SearchCriteria,
    is_present,
)

__all__ = [
    "SearchCriteria",
    "CustomerSearchCriteria",
    "ProductSearchCriteria",
    "SaleSearchCriteria",
    "is_present",
]
