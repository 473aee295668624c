"""
Relational tables for the store: customers, products, sales and the
sale_products link table.
"""
from datetime import date
from decimal import Decimal
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Relationship, SQLModel

from store_api.core.constants import (
    CUSTOMER_DNI_MAX_LENGTH,
    CUSTOMER_LAST_NAME_MAX_LENGTH,
    CUSTOMER_NAME_MAX_LENGTH,
    PRODUCT_DESCRIPTION_MAX_LENGTH,
    PRODUCT_NAME_MAX_LENGTH,
    PRODUCT_TRADE_MARK_MAX_LENGTH,
    TableNames,
)


class SaleProductLink(SQLModel, table=True):
    """Many-to-many link between sales and products."""
    __tablename__ = TableNames.SALE_PRODUCTS.value

    sale_id: UUID | None = Field(default=None, foreign_key="sales.id", primary_key=True)
    product_id: UUID | None = Field(default=None, foreign_key="products.id", primary_key=True)


class Customer(SQLModel, table=True):
    """A store customer. The national ID (dni) is unique."""
    __tablename__ = TableNames.CUSTOMERS.value

    id: UUID | None = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=CUSTOMER_NAME_MAX_LENGTH)
    last_name: str = Field(max_length=CUSTOMER_LAST_NAME_MAX_LENGTH)
    dni: str = Field(max_length=CUSTOMER_DNI_MAX_LENGTH, unique=True, index=True)
    creation_date: date = Field(default_factory=date.today)


class Product(SQLModel, table=True):
    """A product on sale. Names are unique."""
    __tablename__ = TableNames.PRODUCTS.value

    id: UUID | None = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=PRODUCT_NAME_MAX_LENGTH, unique=True, index=True)
    trade_mark: str = Field(max_length=PRODUCT_TRADE_MARK_MAX_LENGTH)
    price: Decimal = Field(max_digits=12, decimal_places=2)
    description: str = Field(max_length=PRODUCT_DESCRIPTION_MAX_LENGTH)
    stock: int = Field(default=0)
    creation_date: date = Field(default_factory=date.today)


class Sale(SQLModel, table=True):
    """A sale owned by exactly one customer, listing its products by price."""
    __tablename__ = TableNames.SALES.value

    id: UUID | None = Field(default_factory=uuid4, primary_key=True)
    creation_date: date = Field(default_factory=date.today)
    total_amount: Decimal = Field(default=Decimal("0"), max_digits=14, decimal_places=2)
    customer_id: UUID = Field(foreign_key="customers.id", index=True)

    customer: Optional[Customer] = Relationship()
    products: list[Product] = Relationship(
        link_model=SaleProductLink,
        sa_relationship_kwargs={"order_by": "Product.price"},
    )
