"""
Application constants and enumerations.
Central location for table names and pagination defaults.
"""

from enum import Enum
from typing import Final


class TableNames(str, Enum):
    """Database table names."""

    CUSTOMERS = "customers"
    PRODUCTS = "products"
    SALES = "sales"
    SALE_PRODUCTS = "sale_products"


# Pagination
DEFAULT_PAGE: Final[int] = 0
DEFAULT_PAGE_SIZE: Final[int] = 10

# Column limits
CUSTOMER_NAME_MAX_LENGTH: Final[int] = 50
CUSTOMER_LAST_NAME_MAX_LENGTH: Final[int] = 80
CUSTOMER_DNI_MAX_LENGTH: Final[int] = 12
PRODUCT_NAME_MAX_LENGTH: Final[int] = 50
PRODUCT_TRADE_MARK_MAX_LENGTH: Final[int] = 50
PRODUCT_DESCRIPTION_MAX_LENGTH: Final[int] = 500

# Sorting
DESCENDING_TOKEN: Final[str] = "desc"
