"""
Pytest configuration and fixtures for backend tests.

The app engine is pointed at in-memory SQLite (StaticPool) before anything
imports the settings, so the lifespan's create_all never touches PostgreSQL.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "development")

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from shared.config.constants import StaffRole, StaffType
from shared.infrastructure.cache import CachedListing
from shared.infrastructure.db import SessionLocal, engine, get_db
from shared.infrastructure.redis import CACHE_KEY_DISH_LIST
from tiechef_api.main import app
from tiechef_api.models import Base, DiningTable, Dish, Receipt, Staff
from tiechef_api.repositories import InMemoryStore, get_table_view_store
from tiechef_api.services.domain import get_dish_cache


class FakeRedis:
    """Dict-backed stand-in for the few redis.Redis calls the cache makes."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.expiry: dict[str, int] = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value, ex=None):
        self.data[key] = value
        self.expiry[key] = ex
        return True

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
            self.expiry.pop(key, None)
        return removed

    def ping(self):
        return True


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Tables are created before and dropped after every test.
    """
    Base.metadata.create_all(bind=engine)

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def fake_redis():
    return FakeRedis()


@pytest.fixture
def dish_cache(fake_redis):
    """Dish listing cache backed by FakeRedis."""
    return CachedListing(fake_redis, CACHE_KEY_DISH_LIST, ttl_seconds=600)


@pytest.fixture
def table_view_store():
    """Empty TableView store, isolated per test."""
    return InMemoryStore("table_id")


@pytest.fixture(scope="function")
def client(db_session, dish_cache, table_view_store):
    """
    Create a test client with database session, dish cache and
    TableView store overrides.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_dish_cache] = lambda: dish_cache
    app.dependency_overrides[get_table_view_store] = lambda: table_view_store

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# Seed fixtures
# =============================================================================


@pytest.fixture
def seed_staff(db_session):
    """Create one waiter."""
    staff = Staff(
        type=StaffType.WAITER,
        role=StaffRole.WAITER,
        full_name="Maria Sidorova",
        phone_number=987654321,
        email="maria.sidorova@tiechef.com",
        start_work_date=datetime(2024, 3, 1, tzinfo=timezone.utc),
        schedule_id=2,
        salary=Decimal("35000.00"),
        kpi="88%",
    )
    db_session.add(staff)
    db_session.commit()
    db_session.refresh(staff)
    return staff


@pytest.fixture
def seed_dish(db_session):
    dish = Dish(name="Borscht", description="Beetroot soup", price=Decimal("7.50"))
    db_session.add(dish)
    db_session.commit()
    db_session.refresh(dish)
    return dish


@pytest.fixture
def seed_receipt(db_session):
    """Unpaid receipt for table 1 with dishes 1 and 2."""
    receipt = Receipt(table_id=1, staff_id=1, check_id=101, was_paid=False, dish_ids=[1, 2])
    db_session.add(receipt)
    db_session.commit()
    db_session.refresh(receipt)
    return receipt


@pytest.fixture
def seed_dining_tables(db_session):
    """Two placed tables and one that is not on the layout yet."""
    tables = [
        DiningTable(table_number=1, seats=2, x=10, y=20, width=80, height=80, staff_id=2),
        DiningTable(table_number=2, seats=4, x=150, y=None, staff_id=2),
        DiningTable(table_number=3, seats=6),
    ]
    db_session.add_all(tables)
    db_session.commit()
    for table in tables:
        db_session.refresh(table)
    return tables


@pytest.fixture
def staff_payload():
    """Factory for a valid camelCase Staff body."""

    def build(**overrides):
        payload = {
            "type": "Chef",
            "role": "Chef",
            "fullName": "Alexey Kozlov",
            "phoneNumber": 555555555,
            "email": "alexey.kozlov@tiechef.com",
            "startWorkDate": "2024-06-01T09:00:00Z",
            "scheduleId": 3,
            "salary": 40000,
            "kpi": "92%",
        }
        payload.update(overrides)
        return payload

    return build
