"""Criteria query engine: specifications, sorting, pagination and execution."""

from .executor import QueryExecutor, build_statement
from .pagination import PageSpec, resolve_page
from .predicates import (
    customer_specification,
    product_specification,
    sale_specification,
)
from .sorting import (
    CustomerSortField,
    ProductSortField,
    SaleSortField,
    SortDirection,
    SortSpec,
    resolve_sort,
)
from .specification import JoinClause, JoinKey, Specification

__all__ = [
    "QueryExecutor",
    "build_statement",
    "PageSpec",
    "resolve_page",
    "SortDirection",
    "SortSpec",
    "resolve_sort",
    "CustomerSortField",
    "ProductSortField",
    "SaleSortField",
    "Specification",
    "JoinClause",
    "JoinKey",
    "customer_specification",
    "product_specification",
    "sale_specification",
]
