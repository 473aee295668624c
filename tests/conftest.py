"""
Pytest Configuration and Fixtures
Provides an in-memory store, seeded data and an HTTP client for all tests.
"""
from collections.abc import Generator
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest
from faker import Faker
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

from store_api.api.main import create_app
from store_api.data_access.db import (
    SessionFactory,
    create_all,
    enforce_sqlite_foreign_keys,
    get_session_factory,
    make_session_factory,
)
from store_api.data_access.models import Customer, Product, Sale
from store_api.data_access.repositories import (
    CustomerRepository,
    ProductRepository,
    SaleRepository,
)
from store_api.domain.services import CustomerService, ProductService, SaleService

# name -> price, ten rows with distinct prices
PRODUCT_CATALOG: list[tuple[str, str]] = [
    ("Laptop", "1200.00"),
    ("Mouse", "25.50"),
    ("Keyboard", "45.00"),
    ("Monitor", "310.00"),
    ("Headset", "80.00"),
    ("Webcam", "60.00"),
    ("Microphone", "95.00"),
    ("Speaker", "120.00"),
    ("Dock", "150.00"),
    ("Cable", "9.99"),
]

CUSTOMER_NAMES = ["John", "Johanna", "Maria"]


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "integration: mark test as integration test")


def pytest_collection_modifyitems(config, items):
    """Mark tests automatically by the module they live in."""
    for item in items:
        if "test_api" in item.nodeid or "test_services" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@dataclass
class SeedData:
    customers: list[Customer]
    products: list[Product]
    sales: list[Sale]

    def product(self, name: str) -> Product:
        return next(p for p in self.products if p.name == name)

    def customer(self, name: str) -> Customer:
        return next(c for c in self.customers if c.name == name)


@pytest.fixture
def faker() -> Faker:
    """Seeded Faker so generated values are reproducible."""
    fake = Faker()
    Faker.seed(1234)
    return fake


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine shared across threads, with foreign keys enforced."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enforce_sqlite_foreign_keys(engine)
    create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> SessionFactory:
    return make_session_factory(engine)


@pytest.fixture
def seed(session_factory, faker) -> SeedData:
    """
    Ten products, three customers and three sales:
    John buys Mouse and Keyboard, Johanna buys Mouse, Maria buys Monitor.
    """
    products = [
        Product(
            name=name,
            trade_mark=faker.company()[:50],
            price=Decimal(price),
            description=faker.sentence(),
            stock=index,
            creation_date=date(2024, 1, index + 1),
        )
        for index, (name, price) in enumerate(PRODUCT_CATALOG)
    ]
    customers = [
        Customer(
            name=name,
            last_name=faker.last_name(),
            dni=f"{faker.unique.random_number(digits=8, fix_len=True)}",
            creation_date=date(2024, 2, index + 1),
        )
        for index, name in enumerate(CUSTOMER_NAMES)
    ]
    by_name = {p.name: p for p in products}
    sales = [
        Sale(
            customer_id=customers[0].id,
            creation_date=date(2024, 3, 1),
            total_amount=by_name["Mouse"].price + by_name["Keyboard"].price,
            products=[by_name["Mouse"], by_name["Keyboard"]],
        ),
        Sale(
            customer_id=customers[1].id,
            creation_date=date(2024, 3, 2),
            total_amount=by_name["Mouse"].price,
            products=[by_name["Mouse"]],
        ),
        Sale(
            customer_id=customers[2].id,
            creation_date=date(2024, 3, 3),
            total_amount=by_name["Monitor"].price,
            products=[by_name["Monitor"]],
        ),
    ]
    with session_factory() as session:
        session.add_all(customers + products + sales)
        session.commit()
    return SeedData(customers=customers, products=products, sales=sales)


@pytest.fixture
def customer_repository(session_factory) -> CustomerRepository:
    return CustomerRepository(session_factory)


@pytest.fixture
def product_repository(session_factory) -> ProductRepository:
    return ProductRepository(session_factory)


@pytest.fixture
def sale_repository(session_factory) -> SaleRepository:
    return SaleRepository(session_factory)


@pytest.fixture
def customer_service(customer_repository) -> CustomerService:
    return CustomerService(customer_repository)


@pytest.fixture
def product_service(product_repository) -> ProductService:
    return ProductService(product_repository)


@pytest.fixture
def sale_service(sale_repository, customer_repository, product_repository) -> SaleService:
    return SaleService(sale_repository, customer_repository, product_repository)


@pytest.fixture
def client(session_factory) -> Generator[TestClient, None, None]:
    """HTTP client bound to the in-memory store."""
    app = create_app(create_tables=False)
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
