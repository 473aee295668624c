"""
Unit Tests for the Specification Pattern
Tests predicate building and join deduplication without touching storage.
"""
from datetime import date
from decimal import Decimal
from uuid import uuid4

from sqlalchemy.sql.elements import True_

from store_api.data_access.models import Customer, Product, Sale
from store_api.data_access.query import (
    JoinKey,
    Specification,
    build_statement,
    customer_specification,
    product_specification,
    sale_specification,
)
from store_api.domain.value_objects import (
    CustomerSearchCriteria,
    ProductSearchCriteria,
    SaleSearchCriteria,
)


def _sql(stmt) -> str:
    return str(stmt.compile())


class TestSpecification:
    def test_empty_specification(self):
        spec = Specification()

        assert spec.is_empty
        assert isinstance(spec.to_sql_condition(), True_)

    def test_single_condition_is_returned_as_is(self):
        condition = Product.name == "Mouse"
        spec = Specification([condition])

        assert spec.to_sql_condition() is condition

    def test_join_is_created_once_per_key(self):
        spec = Specification()
        spec.join(JoinKey.CUSTOMER, Sale.customer, Customer.name == "a")
        spec.join(JoinKey.CUSTOMER, Sale.customer, Customer.last_name == "b")

        assert list(spec.joins) == [JoinKey.CUSTOMER]
        assert len(spec.joins[JoinKey.CUSTOMER].conditions) == 2
        assert len(spec.all_conditions) == 2

    def test_collection_join_requires_distinct(self):
        spec = Specification()
        spec.join(JoinKey.PRODUCTS, Sale.products, Product.id.in_([uuid4()]), collection=True)

        assert spec.requires_distinct


class TestCriteriaSpecifications:
    def test_absent_fields_produce_no_predicates(self):
        assert customer_specification(CustomerSearchCriteria()).is_empty
        assert product_specification(ProductSearchCriteria()).is_empty
        assert sale_specification(SaleSearchCriteria()).is_empty

    def test_empty_strings_count_as_absent(self):
        spec = customer_specification(CustomerSearchCriteria(name="", dni=""))

        assert spec.is_empty

    def test_each_present_field_adds_one_predicate(self):
        spec = product_specification(
            ProductSearchCriteria(name="Mouse", price=Decimal("25.50"), stock=3)
        )

        assert len(spec.conditions) == 3
        assert not spec.joins

    def test_sale_root_filters_need_no_join(self):
        spec = sale_specification(SaleSearchCriteria(creation_date=date(2024, 3, 1)))

        assert len(spec.conditions) == 1
        assert not spec.joins

    def test_customer_id_and_name_share_one_join(self):
        spec = sale_specification(SaleSearchCriteria(customer_id=uuid4(), customer_name="doe"))

        assert list(spec.joins) == [JoinKey.CUSTOMER]
        assert len(spec.joins[JoinKey.CUSTOMER].conditions) == 2

        sql = _sql(build_statement(Sale, spec))
        assert sql.count("JOIN customers") == 1

    def test_product_ids_join_products_distinctly(self):
        spec = sale_specification(SaleSearchCriteria(product_ids=(uuid4(), uuid4())))

        assert spec.requires_distinct
        sql = _sql(build_statement(Sale, spec))
        assert "DISTINCT" in sql
        assert sql.count("JOIN products") == 1

    def test_no_join_without_related_filter(self):
        sql = _sql(build_statement(Sale, sale_specification(SaleSearchCriteria())))

        assert "JOIN" not in sql
