from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"


class Booking(BaseModel):
    """Domain model for Booking entity"""
    id: Optional[int] = None
    customer_id: int
    flight_id: int
    number_of_passengers: int
    status: BookingStatus = BookingStatus.PENDING
    total_price: Decimal
    booking_date: Optional[datetime] = None
    departure_date: Optional[datetime] = None
    seat_numbers: Optional[str] = None
    payment_id: Optional[str] = None
    notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)
