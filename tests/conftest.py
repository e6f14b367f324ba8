"""Pytest fixtures for loyalty tests."""

import os

# Must be set before coffee_loyalty.db builds its engine.
os.environ["DATABASE_URL"] = "sqlite://"

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from coffee_loyalty.db import Base, SessionLocal, engine
from coffee_loyalty.main import app
from coffee_loyalty.models.club_category import ClubCategory
from coffee_loyalty.models.member import Member
from coffee_loyalty.models.product import Product
from coffee_loyalty.utils import utcnow


@pytest.fixture(autouse=True)
def tables():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def category_gold(db):
    """Create the Gold club category."""
    category = ClubCategory(name="Gold", description="Frequent guests")
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def member(db):
    """Create a valid member with 20 points."""
    m = Member(
        name="Ayu Lestari",
        phone="081200000001",
        valid_until=utcnow() + timedelta(days=30),
        points=20,
    )
    db.add(m)
    db.commit()
    db.refresh(m)
    return m


@pytest.fixture
def expired_member(db):
    """Create a member whose membership ended yesterday."""
    m = Member(
        name="Budi Santoso",
        phone="081200000002",
        valid_until=utcnow() - timedelta(days=1),
        points=50,
    )
    db.add(m)
    db.commit()
    db.refresh(m)
    return m


@pytest.fixture
def product(db):
    """Create a product priced 10 that earns 2 points per unit."""
    p = Product(name="Kopi Susu", price=10, point_value=2)
    db.add(p)
    db.commit()
    db.refresh(p)
    return p
