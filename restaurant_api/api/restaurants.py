"""
REST API endpoints for restaurants, opening hours and reservations.

Handlers read raw query, form and path input and leave all checking to
RestaurantService, so missing or malformed input comes back as 400 with an
``error`` field instead of FastAPI's 422.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from restaurant_api.database import get_session
from restaurant_api.schemas.restaurant import (
    OperatingHoursRead,
    ReservationRead,
    RestaurantRead,
)
from restaurant_api.services.responses import ADDED, DELETED, to_response
from restaurant_api.services.restaurant_service import RestaurantService
from restaurant_api.services.store import RestaurantStore, SqlRestaurantStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/restaurant", tags=["restaurants"])


def _restaurant_id_param(location: str) -> Dict[str, Any]:
    return {
        "name": "restaurantID",
        "in": location,
        "required": True,
        "description": "Primary key of the restaurant",
        "schema": {"type": "integer"},
    }


RESTAURANT_ID_QUERY = {"parameters": [_restaurant_id_param("query")]}
RESTAURANT_ID_PATH = {"parameters": [_restaurant_id_param("path")]}

NAME_FORM = {
    "requestBody": {
        "required": True,
        "content": {
            "application/x-www-form-urlencoded": {
                "schema": {
                    "type": "object",
                    "properties": {"name": {"type": "string", "description": "Name of restaurant"}},
                    "required": ["name"],
                }
            }
        },
    }
}


def get_restaurant_store(session: AsyncSession = Depends(get_session)) -> RestaurantStore:
    """Dependency building the SQL store around the request session."""
    return SqlRestaurantStore(session)


def get_restaurant_service(
    store: RestaurantStore = Depends(get_restaurant_store),
) -> RestaurantService:
    return RestaurantService(store)


async def _read_body(request: Request) -> Dict[str, Any]:
    """Form fields, or a JSON object body when sent as JSON."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError as exc:
            logger.debug("Unparseable JSON body on %s: %s", request.url.path, exc)
            return {}
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return dict(form)


@router.get("", openapi_extra=RESTAURANT_ID_QUERY)
async def get_restaurant(
    request: Request,
    service: RestaurantService = Depends(get_restaurant_service),
) -> JSONResponse:
    """Fetch a restaurant by ID. Returns a list with zero or one row."""
    result = await service.fetch_restaurant(request.query_params)
    return to_response(result, schema=RestaurantRead)


@router.get("/openhours", openapi_extra=RESTAURANT_ID_QUERY)
async def get_opening_hours(
    request: Request,
    service: RestaurantService = Depends(get_restaurant_service),
) -> JSONResponse:
    """Fetch a restaurant's opening hours as DayOfWeek/OpenTime/CloseTime rows."""
    result = await service.fetch_hours(request.query_params)
    return to_response(result, schema=OperatingHoursRead)


@router.get("/getall")
async def get_all_restaurants(
    request: Request,
    service: RestaurantService = Depends(get_restaurant_service),
) -> JSONResponse:
    """Fetch every restaurant. Takes no query parameters."""
    result = await service.fetch_all_restaurants(request.query_params)
    return to_response(result, schema=RestaurantRead)


@router.post("", openapi_extra=NAME_FORM)
async def create_restaurant(
    request: Request,
    service: RestaurantService = Depends(get_restaurant_service),
) -> JSONResponse:
    """Add a restaurant. Responds with "added"; the new ID is not returned."""
    body = await _read_body(request)
    result = await service.create_restaurant(body)
    return to_response(result, confirmation=ADDED)


@router.delete("", openapi_extra=RESTAURANT_ID_QUERY)
async def delete_restaurant(
    request: Request,
    service: RestaurantService = Depends(get_restaurant_service),
) -> JSONResponse:
    """Delete a restaurant by ID. Responds with "deleted" even if nothing matched."""
    result = await service.delete_restaurant(request.query_params)
    return to_response(result, confirmation=DELETED)


@router.get("/{restaurantID}/reservations", openapi_extra=RESTAURANT_ID_PATH)
async def get_reservations(
    request: Request,
    service: RestaurantService = Depends(get_restaurant_service),
) -> JSONResponse:
    """Fetch all reservations for a restaurant."""
    result = await service.fetch_reservations(request.path_params)
    return to_response(result, schema=ReservationRead)
