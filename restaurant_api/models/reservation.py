from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from restaurant_api.database import Base

if TYPE_CHECKING:
    from restaurant_api.models.restaurant import Restaurant


class Reservation(Base):
    """Booking record for a restaurant."""

    __tablename__ = "reservations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    restaurant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("restaurants.id"), nullable=False, index=True
    )
    customer_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    party_size: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    reservation_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow)

    restaurant: Mapped["Restaurant"] = relationship("Restaurant", back_populates="reservations")

    def __repr__(self) -> str:
        return f"<Reservation(id={self.id}, restaurant_id={self.restaurant_id})>"
