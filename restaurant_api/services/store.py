"""Store adapter: one parameterized statement per operation."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from restaurant_api.models.reservation import Reservation
from restaurant_api.models.restaurant import OperatingHours, Restaurant
from restaurant_api.services.results import Result, ResultKind

logger = logging.getLogger(__name__)


def storage_error_detail(exc: SQLAlchemyError) -> Dict[str, Any]:
    """Raw driver error (or the SQLAlchemy wrapper when there is none)."""
    source = exc.orig if getattr(exc, "orig", None) is not None else exc
    return {"type": type(source).__name__, "message": str(source)}


class RestaurantStore(ABC):
    """
    Storage operations for restaurants, their hours and reservations.

    Implementations never raise for storage problems; they return a
    STORAGE_FAILURE result instead.
    """

    @abstractmethod
    async def fetch_restaurant(self, restaurant_id: int) -> Result:
        ...

    @abstractmethod
    async def fetch_hours(self, restaurant_id: int) -> Result:
        ...

    @abstractmethod
    async def fetch_all_restaurants(self) -> Result:
        ...

    @abstractmethod
    async def create_restaurant(self, name: str) -> Result:
        ...

    @abstractmethod
    async def delete_restaurant(self, restaurant_id: int) -> Result:
        ...

    @abstractmethod
    async def fetch_reservations(self, restaurant_id: int) -> Result:
        ...


class SqlRestaurantStore(RestaurantStore):
    """RestaurantStore backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def fetch_restaurant(self, restaurant_id: int) -> Result:
        return await self._fetch(
            "fetch_restaurant",
            select(Restaurant).where(Restaurant.id == restaurant_id),
        )

    async def fetch_hours(self, restaurant_id: int) -> Result:
        return await self._fetch(
            "fetch_hours",
            select(OperatingHours)
            .where(OperatingHours.restaurant_id == restaurant_id)
            .order_by(OperatingHours.id),
        )

    async def fetch_all_restaurants(self) -> Result:
        return await self._fetch(
            "fetch_all_restaurants",
            select(Restaurant).order_by(Restaurant.id),
        )

    async def create_restaurant(self, name: str) -> Result:
        return await self._write(
            "create_restaurant",
            insert(Restaurant).values(name=name),
        )

    async def delete_restaurant(self, restaurant_id: int) -> Result:
        # Zero affected rows is still a success
        return await self._write(
            "delete_restaurant",
            delete(Restaurant).where(Restaurant.id == restaurant_id),
        )

    async def fetch_reservations(self, restaurant_id: int) -> Result:
        return await self._fetch(
            "fetch_reservations",
            select(Reservation)
            .where(Reservation.restaurant_id == restaurant_id)
            .order_by(Reservation.id),
        )

    async def _fetch(self, operation: str, stmt: Executable) -> Result:
        try:
            result = await self.session.execute(stmt)
            rows = list(result.scalars().all())
        except SQLAlchemyError as exc:
            return await self._failure(operation, exc)
        return Result.success(rows)

    async def _write(self, operation: str, stmt: Executable) -> Result:
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except SQLAlchemyError as exc:
            return await self._failure(operation, exc)
        return Result.success()

    async def _failure(self, operation: str, exc: SQLAlchemyError) -> Result:
        detail = storage_error_detail(exc)
        logger.warning("Storage failure in %s: %s", operation, detail["message"])
        try:
            await self.session.rollback()
        except SQLAlchemyError as rollback_exc:
            logger.warning("Rollback after %s failed: %s", operation, rollback_exc)
        return Result.failure(ResultKind.STORAGE_FAILURE, detail)
