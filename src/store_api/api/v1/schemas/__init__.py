from .common import ERROR_RESPONSES, ErrorResponse, HealthResponse
from .customers import CustomerCreate, CustomerResponse, CustomerUpdate
from .products import ProductCreate, ProductResponse, ProductUpdate
from .sales import SaleRequest, SaleResponse

__all__ = [
    "ERROR_RESPONSES",
    "ErrorResponse",
    "HealthResponse",
    "CustomerCreate",
    "CustomerUpdate",
    "CustomerResponse",
    "ProductCreate",
    "ProductUpdate",
    "ProductResponse",
    "SaleRequest",
    "SaleResponse",
]
