"""
Unit Tests for Sort Resolution
"""
import pytest

from store_api.core.exceptions import FieldNotFoundException, ValidationException
from store_api.data_access.models import Customer, Product, Sale
from store_api.data_access.query import (
    CustomerSortField,
    ProductSortField,
    SaleSortField,
    SortDirection,
    resolve_sort,
)
from store_api.data_access.query.sorting import normalize_field_name


class TestSortDirection:
    @pytest.mark.parametrize("token", ["desc", "DESC", "Desc"])
    def test_desc_in_any_case_is_descending(self, token):
        assert SortDirection.from_token(token) is SortDirection.DESC

    @pytest.mark.parametrize("token", ["asc", "ascending", "descending", "", "garbage", None])
    def test_everything_else_is_ascending(self, token):
        assert SortDirection.from_token(token) is SortDirection.ASC


class TestResolveSort:
    def test_no_field_means_no_ordering(self):
        assert resolve_sort(Product, None, "desc") is None

    def test_blank_field_means_no_ordering(self):
        assert resolve_sort(Product, "   ", "asc") is None

    def test_field_without_direction_is_ascending(self):
        sort = resolve_sort(Product, "price")

        assert sort.field is ProductSortField.PRICE
        assert sort.direction is SortDirection.ASC

    def test_camel_case_field_is_accepted(self):
        sort = resolve_sort(Customer, "lastName", "DESC")

        assert sort.field is CustomerSortField.LAST_NAME
        assert sort.direction is SortDirection.DESC

    def test_sale_sort_fields(self):
        assert resolve_sort(Sale, "totalAmount", "desc").field is SaleSortField.TOTAL_AMOUNT
        assert resolve_sort(Sale, "creation_date").field is SaleSortField.CREATION_DATE

    def test_unknown_field_is_rejected(self):
        with pytest.raises(FieldNotFoundException) as exc_info:
            resolve_sort(Product, "nonexistentColumn", "asc")

        error = exc_info.value
        assert isinstance(error, ValidationException)
        assert error.details["value"] == "nonexistentColumn"
        assert "price" in error.details["allowed"]

    def test_field_of_another_entity_is_rejected(self):
        """Sales expose no price column even though products do."""
        with pytest.raises(FieldNotFoundException):
            resolve_sort(Sale, "price")

    def test_clause_direction(self):
        ascending = resolve_sort(Product, "name", "asc").clause()
        descending = resolve_sort(Product, "name", "desc").clause()

        assert str(ascending).endswith("ASC")
        assert str(descending).endswith("DESC")


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("creationDate", "creation_date"),
        ("creation_date", "creation_date"),
        ("tradeMark", "trade_mark"),
        ("name", "name"),
        (" price ", "price"),
    ],
)
def test_normalize_field_name(raw, expected):
    assert normalize_field_name(raw) == expected
