"""Pydantic schemas mapping bookings to and from their JSON representation."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    field_validator,
)

from booking_service.domain.models import Booking, BookingStatus

BIGINT_MIN = -(2**63)
BIGINT_MAX = 2**63 - 1
INT_MAX = 2**31 - 1

# Prices travel as JSON numbers rather than pydantic's default decimal strings.
Price = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Return a naive UTC datetime for persistence."""

    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


class BookingCreateRequest(BaseModel):
    """Request model for creating a booking."""

    customerId: int = Field(
        ...,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        validation_alias=AliasChoices("customerId", "customer_id"),
    )
    flightId: int = Field(
        ...,
        ge=BIGINT_MIN,
        le=BIGINT_MAX,
        validation_alias=AliasChoices("flightId", "flight_id"),
    )
    numberOfPassengers: int = Field(
        ...,
        ge=1,
        le=INT_MAX,
        validation_alias=AliasChoices("numberOfPassengers", "number_of_passengers"),
    )
    totalPrice: Decimal = Field(
        ...,
        ge=0,
        max_digits=12,
        decimal_places=2,
        validation_alias=AliasChoices("totalPrice", "total_price"),
    )
    departureDate: Optional[datetime] = Field(
        None,
        validation_alias=AliasChoices("departureDate", "departure_date"),
    )
    seatNumbers: Optional[str] = Field(
        None,
        max_length=255,
        validation_alias=AliasChoices("seatNumbers", "seat_numbers"),
    )
    notes: Optional[str] = None

    @field_validator("departureDate")
    @classmethod
    def normalise_departure(cls, value: Optional[datetime]) -> Optional[datetime]:
        return _to_naive_utc(value)


class BookingStatusUpdateRequest(BaseModel):
    """Request model for overwriting a booking's status."""

    status: BookingStatus


class BookingConfirmRequest(BaseModel):
    """Request model for confirming a booking with a payment reference."""

    paymentId: Optional[str] = Field(
        None,
        max_length=255,
        validation_alias=AliasChoices("paymentId", "payment_id"),
    )


class BookingResponse(BaseModel):
    """Booking as returned by every endpoint; echoes each stored attribute."""

    id: int
    customerId: int
    flightId: int
    numberOfPassengers: int
    status: BookingStatus
    totalPrice: Price
    bookingDate: datetime
    departureDate: Optional[datetime] = None
    seatNumbers: Optional[str] = None
    paymentId: Optional[str] = None
    notes: Optional[str] = None
    createdAt: datetime
    updatedAt: datetime

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, booking: Booking) -> "BookingResponse":
        return cls(
            id=booking.id,
            customerId=booking.customer_id,
            flightId=booking.flight_id,
            numberOfPassengers=booking.number_of_passengers,
            status=booking.status,
            totalPrice=booking.total_price,
            bookingDate=booking.booking_date,
            departureDate=booking.departure_date,
            seatNumbers=booking.seat_numbers,
            paymentId=booking.payment_id,
            notes=booking.notes,
            createdAt=booking.created_at,
            updatedAt=booking.updated_at,
        )


class SeatAvailabilityResponse(BaseModel):
    """Whether a seat assignment is already held on a flight."""

    flightId: int
    seatNumbers: str
    taken: bool
