from restaurant_api.schemas.restaurant import (
    OperatingHoursRead,
    ReservationRead,
    RestaurantRead,
)

__all__ = [
    "RestaurantRead",
    "OperatingHoursRead",
    "ReservationRead",
]
