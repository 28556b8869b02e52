"""
Pytest configuration and fixtures for tests.

Every test gets a fresh in-memory SQLite database and a fake Redis, so the
service layer and the HTTP layer run for real without external services.
"""

import os

# przed importem aplikacji, zeby modul database nie budowal silnika postgresa
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import date
from decimal import Decimal

import fakeredis
import pytest
from fastapi.testclient import TestClient

from ezelectronics.api.deps import get_lock_service
from ezelectronics.data.database import Base, build_engine, get_db
from ezelectronics.data.models import ProductModel, UserModel
from ezelectronics.domain.enums import Category, Role
from ezelectronics.domain.schemas import Principal
from ezelectronics.main import create_app
from ezelectronics.services.cart_service import CartService
from ezelectronics.services.lock_service import LockService
from ezelectronics.services.product_service import ProductService
from ezelectronics.services.review_service import ReviewService
from sqlalchemy.orm import sessionmaker


# ============================================================================
# Database Fixtures
# ============================================================================

@pytest.fixture
def engine():
    """Create test database engine (in-memory SQLite, one shared connection)."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def redis_client():
    return fakeredis.FakeRedis(decode_responses=True)


@pytest.fixture
def lock_service(redis_client):
    return LockService(client=redis_client, ttl=5, wait=0.2)


# ============================================================================
# Domain Fixtures
# ============================================================================

@pytest.fixture
def customer():
    return Principal(username="alice", role=Role.CUSTOMER)


@pytest.fixture
def cart_service(db, lock_service):
    return CartService(db=db, lock_service=lock_service)


@pytest.fixture
def product_service(db):
    return ProductService(db)


@pytest.fixture
def review_service(db):
    return ReviewService(db)


@pytest.fixture
def make_product(db):
    """Insert a product straight into the catalog."""

    def _make(model: str, price: str = "100.00", quantity: int = 5, category: Category = Category.SMARTPHONE):
        product = ProductModel(
            model=model,
            category=category,
            available_quantity=quantity,
            selling_price=Decimal(price),
            details=None,
            arrival_date=date(2024, 1, 15),
        )
        db.add(product)
        db.commit()
        return product

    return _make


@pytest.fixture
def stock_of(db):
    """Read the current available quantity of a product, bypassing the identity map."""

    def _stock(model: str) -> int:
        db.expire_all()
        return db.get(ProductModel, model).available_quantity

    return _stock


# ============================================================================
# HTTP Fixtures
# ============================================================================

@pytest.fixture
def app(session_factory, lock_service):
    app = create_app(create_tables=False)

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def users(db):
    """One user per role; requests authenticate with the X-Username header."""
    for username, role in (
        ("alice", Role.CUSTOMER),
        ("bob", Role.CUSTOMER),
        ("martha", Role.MANAGER),
        ("root", Role.ADMIN),
    ):
        db.add(UserModel(username=username, name=username.title(), surname="Test", role=role))
    db.commit()


