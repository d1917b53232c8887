"""Errors raised by booking operations."""


class BookingError(Exception):
    """Base class for booking domain errors."""


class BookingNotFoundError(BookingError):
    """The referenced booking does not exist."""

    def __init__(self, value, field: str = "id"):
        self.value = value
        self.field = field
        super().__init__(f"Booking not found with {field}: {value}")


class BookingAlreadyCancelledError(BookingError):
    """Cancel was requested for a booking that is already cancelled."""

    def __init__(self, booking_id: int):
        self.booking_id = booking_id
        super().__init__("Booking is already cancelled")


class SeatConflictError(BookingError):
    """The requested seats on the flight are already held by another booking."""

    def __init__(self, flight_id: int, seat_numbers: str):
        self.flight_id = flight_id
        self.seat_numbers = seat_numbers
        super().__init__(
            f"Seats {seat_numbers} are already booked on flight {flight_id}"
        )
