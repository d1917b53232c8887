"""Pydantic schemas used as views."""

from .bookings import (
    BIGINT_MAX,
    BIGINT_MIN,
    BookingConfirmRequest,
    BookingCreateRequest,
    BookingResponse,
    BookingStatusUpdateRequest,
    SeatAvailabilityResponse,
)
from .common import ErrorResponse, FieldError, ValidationErrorResponse

__all__ = [
    "BIGINT_MAX",
    "BIGINT_MIN",
    "BookingCreateRequest",
    "BookingStatusUpdateRequest",
    "BookingConfirmRequest",
    "BookingResponse",
    "SeatAvailabilityResponse",
    "ErrorResponse",
    "FieldError",
    "ValidationErrorResponse",
]
