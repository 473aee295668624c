"""
Store API - customer, product and sale management

A small store backend whose search endpoints are served by a criteria-based
query engine: sparse optional filters, allow-listed sorting and offset
pagination translated into a single SQL query per entity.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
