from .store import Customer, Product, Sale, SaleProductLink

__all__ = ["Customer", "Product", "Sale", "SaleProductLink"]
