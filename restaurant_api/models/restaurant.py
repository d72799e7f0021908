from __future__ import annotations

from datetime import time
from typing import TYPE_CHECKING, List

from sqlalchemy import ForeignKey, Integer, SmallInteger, String, Time
from sqlalchemy.orm import Mapped, mapped_column, relationship

from restaurant_api.database import Base

if TYPE_CHECKING:
    from restaurant_api.models.reservation import Reservation


class Restaurant(Base):
    """A named restaurant; root of the hours and reservation relations."""

    __tablename__ = "restaurants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # Relationships
    hours: Mapped[List["OperatingHours"]] = relationship(
        "OperatingHours", back_populates="restaurant"
    )
    reservations: Mapped[List["Reservation"]] = relationship(
        "Reservation", back_populates="restaurant"
    )

    def __repr__(self) -> str:
        return f"<Restaurant(id={self.id}, name={self.name})>"


class OperatingHours(Base):
    """Per-day open/close window for a restaurant."""

    __tablename__ = "restaurant_hours"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurants.id"), nullable=False, index=True
    )
    day_of_week: Mapped[int] = mapped_column(SmallInteger, nullable=False)  # 0=Monday, 6=Sunday
    open_time: Mapped[time] = mapped_column(Time, nullable=False)
    close_time: Mapped[time] = mapped_column(Time, nullable=False)

    restaurant: Mapped["Restaurant"] = relationship("Restaurant", back_populates="hours")

    def __repr__(self) -> str:
        return (
            f"<OperatingHours(restaurant_id={self.restaurant_id}, day={self.day_of_week}, "
            f"{self.open_time}-{self.close_time})>"
        )
