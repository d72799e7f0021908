# API routes
from restaurant_api.api.restaurants import router as restaurants_router

__all__ = [
    "restaurants_router",
]
