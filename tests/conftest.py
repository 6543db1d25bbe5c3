"""
Shared fixtures: a fresh SQLite file database per test with foreign keys
enabled, a session bound to it, and a TestClient whose ``get_db`` yields
sessions on the same database.
"""
import os

os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.database import Base, create_db_engine, get_db
from app.main import app
from app.models.categories import Category
from app.models.products import Product


@pytest.fixture
def engine(tmp_path):
    engine = create_db_engine(
        f"sqlite:///{tmp_path / 'cashier_test.db'}",
        connect_args={"timeout": 30},
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, autocommit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def client(session_factory):
    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_product(db):
    def _make(name="Widget", price="100.00", stock=10, category_id=None):
        product = Product(
            name=name,
            price=Decimal(price),
            stock=stock,
            category_id=category_id,
        )
        db.add(product)
        db.commit()
        return product.id

    return _make


@pytest.fixture
def make_category(db):
    def _make(name="Electronics", description=None):
        category = Category(name=name, description=description)
        db.add(category)
        db.commit()
        return category.id

    return _make


@pytest.fixture
def stock_of(db):
    def _stock(product_id):
        db.expire_all()
        return db.get(Product, product_id).stock

    return _stock
