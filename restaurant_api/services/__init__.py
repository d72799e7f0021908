# Restaurant data access services
from restaurant_api.services.restaurant_service import RestaurantService
from restaurant_api.services.results import Result, ResultKind
from restaurant_api.services.store import RestaurantStore, SqlRestaurantStore

__all__ = [
    "RestaurantService",
    "RestaurantStore",
    "SqlRestaurantStore",
    "Result",
    "ResultKind",
]
