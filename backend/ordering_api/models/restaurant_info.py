"""RestaurantInfo ORM — display metadata plus the opening-hours schedule.

Invariants:
    - opening_hours is ONE JSON column holding OpeningHours.to_dict()
    - Reads always use the most recently updated row
    - Writes update the current row in place (id and created_at preserved)

Design Decisions:
    - TypeDecorator over a raw JSON column: callers only ever see the
      OpeningHours value type, and decoding is tolerant (never raises on
      historical data)
"""

from sqlalchemy import JSON, Integer, String, Text
from sqlalchemy.types import TypeDecorator
from sqlalchemy.orm import Mapped, mapped_column

from ordering_api.core.opening_hours import OpeningHours
from ordering_api.db.base import Base, TimestampMixin


class OpeningHoursType(TypeDecorator):
    """Stores OpeningHours as its persisted JSON document."""
    impl = JSON
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if isinstance(value, OpeningHours):
            return value.to_dict()
        return OpeningHours.from_dict(value).to_dict()

    def process_result_value(self, value, dialect):
        return OpeningHours.from_dict(value)


class RestaurantInfo(TimestampMixin, Base):
    """Restaurant profile. Logically a singleton: the newest row is current."""
    __tablename__ = "restaurant_info"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    address: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    phone: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    logo_url: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    banner_url: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    opening_hours: Mapped[OpeningHours] = mapped_column(
        OpeningHoursType, nullable=False, default=lambda: OpeningHours(),
    )
