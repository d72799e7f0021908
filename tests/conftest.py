"""
Pytest configuration and fixtures.

Provides:
- an in-memory SQLite database with the restaurant tables
- "The Golden Fork" with a week of opening hours and two reservations
- an in-memory fake store that records every call it receives
- HTTP clients wired to either the real SQL store or the fake
"""
from __future__ import annotations

import os
from datetime import datetime, time
from typing import Any, AsyncGenerator, Dict, List, Optional, Tuple

# Keep the application engine off PostgreSQL while tests import the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from restaurant_api.api.restaurants import get_restaurant_store
from restaurant_api.database import Base, get_session
from restaurant_api.main import app
from restaurant_api.models import OperatingHours, Reservation, Restaurant
from restaurant_api.services.results import Result, ResultKind
from restaurant_api.services.store import RestaurantStore


# Use SQLite for testing (in-memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_engine():
    """Create a test database engine."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def sample_restaurant(db_session: AsyncSession) -> Restaurant:
    """
    "The Golden Fork": open every day, with two reservations on the books.
    """
    restaurant = Restaurant(name="The Golden Fork")
    db_session.add(restaurant)
    await db_session.flush()

    for day in range(7):
        db_session.add(
            OperatingHours(
                restaurant_id=restaurant.id,
                day_of_week=day,
                open_time=time(11, 0),
                close_time=time(22, 0) if day < 5 else time(23, 30),
            )
        )

    db_session.add_all(
        [
            Reservation(
                restaurant_id=restaurant.id,
                customer_name="Johnson",
                party_size=4,
                reservation_time=datetime(2026, 10, 20, 19, 0),
            ),
            Reservation(
                restaurant_id=restaurant.id,
                customer_name="Garcia",
                party_size=6,
                reservation_time=datetime(2026, 10, 21, 20, 30),
            ),
        ]
    )
    await db_session.commit()
    await db_session.refresh(restaurant)
    return restaurant


@pytest_asyncio.fixture
async def other_restaurant(db_session: AsyncSession) -> Restaurant:
    """A second restaurant with a single reservation."""
    restaurant = Restaurant(name="Mimosas")
    db_session.add(restaurant)
    await db_session.flush()
    db_session.add(
        Reservation(
            restaurant_id=restaurant.id,
            customer_name="Smith",
            party_size=2,
            reservation_time=datetime(2026, 10, 20, 12, 0),
        )
    )
    await db_session.commit()
    await db_session.refresh(restaurant)
    return restaurant


class FakeRestaurantStore(RestaurantStore):
    """
    In-memory RestaurantStore.

    Every call is appended to ``calls`` so tests can assert that rejected
    requests never reached storage. Setting ``fail_with`` makes every
    operation return that storage failure instead.
    """

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.restaurants: Dict[int, Restaurant] = {}
        self.hours: List[OperatingHours] = []
        self.reservations: List[Reservation] = []
        self.fail_with: Optional[Dict[str, Any]] = None
        self._next_id = 1

    def add_restaurant(self, name: str) -> Restaurant:
        restaurant = Restaurant(id=self._next_id, name=name)
        self.restaurants[restaurant.id] = restaurant
        self._next_id += 1
        return restaurant

    def _record(self, operation: str, *args: Any) -> Optional[Result]:
        self.calls.append((operation, args))
        if self.fail_with is not None:
            return Result.failure(ResultKind.STORAGE_FAILURE, self.fail_with)
        return None

    async def fetch_restaurant(self, restaurant_id: int) -> Result:
        failed = self._record("fetch_restaurant", restaurant_id)
        if failed is not None:
            return failed
        row = self.restaurants.get(restaurant_id)
        return Result.success([row] if row else [])

    async def fetch_hours(self, restaurant_id: int) -> Result:
        failed = self._record("fetch_hours", restaurant_id)
        if failed is not None:
            return failed
        return Result.success([h for h in self.hours if h.restaurant_id == restaurant_id])

    async def fetch_all_restaurants(self) -> Result:
        failed = self._record("fetch_all_restaurants")
        if failed is not None:
            return failed
        return Result.success(list(self.restaurants.values()))

    async def create_restaurant(self, name: str) -> Result:
        failed = self._record("create_restaurant", name)
        if failed is not None:
            return failed
        self.add_restaurant(name)
        return Result.success()

    async def delete_restaurant(self, restaurant_id: int) -> Result:
        failed = self._record("delete_restaurant", restaurant_id)
        if failed is not None:
            return failed
        self.restaurants.pop(restaurant_id, None)
        return Result.success()

    async def fetch_reservations(self, restaurant_id: int) -> Result:
        failed = self._record("fetch_reservations", restaurant_id)
        if failed is not None:
            return failed
        return Result.success(
            [r for r in self.reservations if r.restaurant_id == restaurant_id]
        )


@pytest.fixture
def fake_store() -> FakeRestaurantStore:
    return FakeRestaurantStore()


@pytest_asyncio.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests run against the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_session] = override_get_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def fake_client(fake_store: FakeRestaurantStore) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client whose requests hit the in-memory fake store."""
    app.dependency_overrides[get_restaurant_store] = lambda: fake_store
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
