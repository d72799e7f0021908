"""Service for restaurant, opening hours and reservation lookups."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from restaurant_api.services.results import Result
from restaurant_api.services.store import RestaurantStore
from restaurant_api.services.validation import (
    require_field,
    require_identifier,
    require_no_parameters,
)

logger = logging.getLogger(__name__)

RESTAURANT_ID_PARAM = "restaurantID"
NAME_FIELD = "name"

FETCH_RESTAURANT_MESSAGE = "/restaurant GET endpoint needs a restaurantID query param"
FETCH_HOURS_MESSAGE = "/restaurant/openhours GET endpoint needs a restaurantID query param"
FETCH_ALL_MESSAGE = "/restaurant/getall GET endpoint needs no query param"
CREATE_MESSAGE = "/restaurant POST endpoint needs name body param"
DELETE_MESSAGE = "/restaurant DELETE endpoint needs a restaurantID"


class RestaurantService:
    """
    Validate-then-query orchestration for the restaurant endpoints.

    Holds no state besides the injected store. Restaurant existence is never
    checked: an unknown ID reads as no rows and deletes as a no-op.
    """

    def __init__(self, store: RestaurantStore):
        self.store = store

    async def fetch_restaurant(self, params: Mapping[str, Any]) -> Result:
        """Fetch zero or one restaurant by ``restaurantID``."""
        check = require_identifier(params, RESTAURANT_ID_PARAM, FETCH_RESTAURANT_MESSAGE)
        if not check.ok:
            return self._rejected("fetch_restaurant", check)
        return await self.store.fetch_restaurant(check.value)

    async def fetch_hours(self, params: Mapping[str, Any]) -> Result:
        """Fetch opening hours for ``restaurantID``."""
        check = require_identifier(params, RESTAURANT_ID_PARAM, FETCH_HOURS_MESSAGE)
        if not check.ok:
            return self._rejected("fetch_hours", check)
        return await self.store.fetch_hours(check.value)

    async def fetch_all_restaurants(self, params: Mapping[str, Any]) -> Result:
        """Fetch every restaurant; accepts no parameters."""
        check = require_no_parameters(params, FETCH_ALL_MESSAGE)
        if not check.ok:
            return self._rejected("fetch_all_restaurants", check)
        return await self.store.fetch_all_restaurants()

    async def create_restaurant(self, body: Mapping[str, Any]) -> Result:
        """Create a restaurant from the ``name`` body field."""
        check = require_field(body, NAME_FIELD, CREATE_MESSAGE)
        if not check.ok:
            return self._rejected("create_restaurant", check)
        return await self.store.create_restaurant(check.value)

    async def delete_restaurant(self, params: Mapping[str, Any]) -> Result:
        """Delete the restaurant with ``restaurantID``."""
        check = require_identifier(params, RESTAURANT_ID_PARAM, DELETE_MESSAGE)
        if not check.ok:
            return self._rejected("delete_restaurant", check)
        return await self.store.delete_restaurant(check.value)

    async def fetch_reservations(self, path_params: Mapping[str, Any]) -> Result:
        """Fetch all reservations for the ``restaurantID`` path parameter."""
        raw = path_params.get(RESTAURANT_ID_PARAM)
        check = require_identifier(
            path_params, RESTAURANT_ID_PARAM, f"path param: {raw} malformed"
        )
        if not check.ok:
            return self._rejected("fetch_reservations", check)
        return await self.store.fetch_reservations(check.value)

    def _rejected(self, operation: str, check: Result) -> Result:
        logger.debug("Rejected %s: %s", operation, check.error)
        return check
