"""SQLAlchemy model for flight bookings."""

from __future__ import annotations

from sqlalchemy import BigInteger, Column, DateTime, Integer, Numeric, String, Text
from sqlalchemy import Enum as SqlEnum

from booking_service.domain.models import BookingStatus, utcnow
from booking_service.models.base import Base


class Booking(Base):
    __tablename__ = "bookings"

    # SQLite only autoincrements an INTEGER primary key.
    id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        index=True,
        autoincrement=True,
    )
    customer_id = Column(BigInteger, nullable=False, index=True)
    flight_id = Column(BigInteger, nullable=False, index=True)
    number_of_passengers = Column(Integer, nullable=False)
    status = Column(
        SqlEnum(BookingStatus, name="booking_status", native_enum=False, length=16),
        nullable=False,
        default=BookingStatus.PENDING,
        index=True,
    )
    total_price = Column(Numeric(12, 2), nullable=False)
    booking_date = Column(DateTime, nullable=False, default=utcnow)
    departure_date = Column(DateTime, nullable=True)
    seat_numbers = Column(String(255), nullable=True)
    payment_id = Column(String(255), nullable=True, index=True)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    updated_at = Column(DateTime, nullable=False, default=utcnow)


__all__ = ["Booking"]
