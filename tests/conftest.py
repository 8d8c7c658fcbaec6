"""Shared fixtures: in-memory and SQLite-backed stores, and HTTP clients over each."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from product_catalog.database.database import get_db, init_db
from product_catalog.database.dependencies import get_product_store
from product_catalog.main import app
from product_catalog.services.product import ProductService
from product_catalog.stores.memory import InMemoryProductStore
from product_catalog.stores.sql import SqlProductStore


@pytest.fixture
def memory_store():
    return InMemoryProductStore()


@pytest.fixture
def service(memory_store):
    return ProductService(memory_store)


@pytest.fixture
def sql_engine():
    """A private in-memory SQLite database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(sql_engine):
    session = sessionmaker(autocommit=False, autoflush=False, bind=sql_engine)()
    yield session
    session.close()


@pytest.fixture
def sql_store(db_session):
    return SqlProductStore(db_session)


@pytest.fixture
def client(sql_engine):
    """HTTP client whose requests run against the SQLite test database."""
    testing_session = sessionmaker(autocommit=False, autoflush=False, bind=sql_engine)

    def override_get_db():
        db = testing_session()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def memory_client(memory_store):
    """HTTP client wired to the in-memory store instead of a database."""
    app.dependency_overrides[get_product_store] = lambda: memory_store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed_products():
    return [
        {"name": "Booka", "category": "Categorya", "description": "Descriptiona", "price": 20},
        {"name": "Bookb", "category": "Categoryrb", "description": "Descriptionb", "price": 21},
    ]
