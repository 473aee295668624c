from .customers import router as customers_router
from .health import router as health_router
from .products import router as products_router
from .sales import router as sales_router

__all__ = ["customers_router", "health_router", "products_router", "sales_router"]
