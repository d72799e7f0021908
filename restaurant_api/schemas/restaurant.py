from __future__ import annotations

from datetime import datetime, time
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RestaurantRead(BaseModel):
    """Restaurant row as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., serialization_alias="ID")
    name: str = Field(..., serialization_alias="Name")


class OperatingHoursRead(BaseModel):
    """Opening window for one day of the week."""

    model_config = ConfigDict(from_attributes=True)

    day_of_week: int = Field(..., serialization_alias="DayOfWeek")  # 0=Monday, 6=Sunday
    open_time: time = Field(..., serialization_alias="OpenTime")
    close_time: time = Field(..., serialization_alias="CloseTime")


class ReservationRead(BaseModel):
    """Reservation row as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., serialization_alias="ID")
    restaurant_id: int = Field(..., serialization_alias="RestaurantID")
    customer_name: Optional[str] = Field(None, serialization_alias="CustomerName")
    party_size: Optional[int] = Field(None, serialization_alias="PartySize")
    reservation_time: Optional[datetime] = Field(None, serialization_alias="ReservationTime")
    created_at: Optional[datetime] = Field(None, serialization_alias="CreatedAt")
