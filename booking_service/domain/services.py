from .models import Booking, BookingStatus


class BookingDomainService:
    """Domain service for Booking lifecycle rules"""

    @staticmethod
    def can_cancel(booking: Booking) -> bool:
        """Only a booking that is not already cancelled can be cancelled.

        This is the single guarded transition: status updates and
        confirmations overwrite the status whatever it currently is.
        """
        return booking.status != BookingStatus.CANCELLED

    @staticmethod
    def seats_requested(seat_numbers) -> bool:
        """Whether a create request names any seats worth checking."""
        return bool(seat_numbers and seat_numbers.strip())
