from .customer_service import CustomerService
from .product_service import ProductService
from .sale_service import SaleService, calculate_total

__all__ = ["CustomerService", "ProductService", "SaleService", "calculate_total"]
