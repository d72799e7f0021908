from restaurant_api.models.restaurant import OperatingHours, Restaurant
from restaurant_api.models.reservation import Reservation

__all__ = [
    "Restaurant",
    "OperatingHours",
    "Reservation",
]
