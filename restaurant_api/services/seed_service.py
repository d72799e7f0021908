"""Service for seeding default data to handle cold start scenarios."""
from __future__ import annotations

import logging
from datetime import time
from typing import List

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.models.restaurant import OperatingHours, Restaurant

logger = logging.getLogger(__name__)


DEFAULT_RESTAURANT_NAME = "The Golden Fork"

# (day_of_week, open, close); 0=Monday
DEFAULT_HOURS = [
    (0, time(11, 0), time(21, 0)),
    (1, time(11, 0), time(21, 0)),
    (2, time(11, 0), time(21, 0)),
    (3, time(11, 0), time(22, 0)),
    (4, time(11, 0), time(23, 0)),
    (5, time(10, 0), time(23, 0)),
    (6, time(10, 0), time(20, 0)),
]


class SeedService:
    """
    Service for seeding default data.

    Creates a sample restaurant with a week of opening hours when the
    database is empty.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def ensure_default_data(self) -> dict:
        """
        Ensure default data exists for cold start.

        Returns:
            Dict with created counts
        """
        result = {
            "restaurants_created": 0,
            "hours_created": 0,
            "already_seeded": False,
        }

        restaurant_count = await self._count_restaurants()
        if restaurant_count > 0:
            result["already_seeded"] = True
            logger.info("Database already has data, skipping seed")
            return result

        logger.info("Cold start detected, seeding default data...")

        restaurant = await self._create_default_restaurant()
        result["restaurants_created"] = 1

        hours = await self._create_default_hours(restaurant.id)
        result["hours_created"] = len(hours)

        await self.session.commit()

        logger.info(
            "Seed complete: %d restaurants, %d opening hour rows",
            result["restaurants_created"],
            result["hours_created"],
        )
        return result

    async def _count_restaurants(self) -> int:
        """Count total restaurants."""
        stmt = select(func.count(Restaurant.id))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _create_default_restaurant(self) -> Restaurant:
        restaurant = Restaurant(name=DEFAULT_RESTAURANT_NAME)
        self.session.add(restaurant)
        await self.session.flush()
        return restaurant

    async def _create_default_hours(self, restaurant_id: int) -> List[OperatingHours]:
        hours = []
        for day, open_time, close_time in DEFAULT_HOURS:
            row = OperatingHours(
                restaurant_id=restaurant_id,
                day_of_week=day,
                open_time=open_time,
                close_time=close_time,
            )
            self.session.add(row)
            hours.append(row)

        await self.session.flush()
        return hours
