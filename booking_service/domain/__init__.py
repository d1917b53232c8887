"""Booking domain: entity, lifecycle rules and errors."""

from .exceptions import (
    BookingAlreadyCancelledError,
    BookingError,
    BookingNotFoundError,
    SeatConflictError,
)
from .models import Booking, BookingStatus
from .services import BookingDomainService

__all__ = [
    "Booking",
    "BookingStatus",
    "BookingDomainService",
    "BookingError",
    "BookingNotFoundError",
    "BookingAlreadyCancelledError",
    "SeatConflictError",
]
