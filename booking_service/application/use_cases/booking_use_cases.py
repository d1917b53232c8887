import logging
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from booking_service.application.interfaces import BookingRepositoryInterface
from booking_service.domain.exceptions import (
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    SeatConflictError,
)
from booking_service.domain.models import Booking, BookingStatus, utcnow
from booking_service.domain.services import BookingDomainService

logger = logging.getLogger(__name__)


async def _load_or_raise(
    repository: BookingRepositoryInterface, booking_id: int
) -> Booking:
    booking = await repository.get_by_id(booking_id)
    if booking is None:
        logger.warning("Booking %s not found", booking_id)
        raise BookingNotFoundError(booking_id)
    return booking


class CreateBookingUseCase:
    """Use case for creating a new booking"""

    def __init__(self, booking_repository: BookingRepositoryInterface,
                 enforce_seat_conflicts: bool = False):
        self.booking_repository = booking_repository
        self.enforce_seat_conflicts = enforce_seat_conflicts

    async def execute(self, customer_id: int, flight_id: int,
                      number_of_passengers: int, total_price: Decimal,
                      departure_date: Optional[datetime] = None,
                      seat_numbers: Optional[str] = None,
                      notes: Optional[str] = None) -> Booking:
        """Create a booking in PENDING status"""
        logger.info(
            "Creating booking for customer %s and flight %s", customer_id, flight_id
        )

        if self.enforce_seat_conflicts and BookingDomainService.seats_requested(seat_numbers):
            taken = await self.booking_repository.exists_by_flight_id_and_seat_numbers(
                flight_id, seat_numbers
            )
            if taken:
                logger.warning(
                    "Seats %s already booked on flight %s", seat_numbers, flight_id
                )
                raise SeatConflictError(flight_id, seat_numbers)

        now = utcnow()
        booking = Booking(
            customer_id=customer_id,
            flight_id=flight_id,
            number_of_passengers=number_of_passengers,
            total_price=total_price,
            departure_date=departure_date,
            seat_numbers=seat_numbers,
            notes=notes,
            status=BookingStatus.PENDING,
            booking_date=now,
            created_at=now,
            updated_at=now,
        )

        saved = await self.booking_repository.save(booking)
        logger.info("Booking created with ID: %s", saved.id)
        return saved


class GetBookingUseCase:
    """Use case for retrieving a booking"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, booking_id: int) -> Booking:
        """Get booking by ID"""
        logger.info("Fetching booking with ID: %s", booking_id)
        return await _load_or_raise(self.booking_repository, booking_id)


class GetBookingByPaymentUseCase:
    """Use case for retrieving the booking a payment was recorded against"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, payment_id: str) -> Booking:
        logger.info("Fetching booking with payment ID: %s", payment_id)
        booking = await self.booking_repository.get_by_payment_id(payment_id)
        if booking is None:
            raise BookingNotFoundError(payment_id, field="payment id")
        return booking


class ListBookingsUseCase:
    """Use case for listing all bookings"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, status: Optional[BookingStatus] = None) -> List[Booking]:
        """List all bookings, optionally only those in one status"""
        if status is None:
            logger.info("Fetching all bookings")
            return await self.booking_repository.list_all()
        logger.info("Fetching bookings with status: %s", status.value)
        return await self.booking_repository.get_by_status(status)


class ListCustomerBookingsUseCase:
    """Use case for listing the bookings of one customer"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, customer_id: int,
                      status: Optional[BookingStatus] = None) -> List[Booking]:
        logger.info("Fetching bookings for customer: %s", customer_id)
        if status is None:
            return await self.booking_repository.get_by_customer_id(customer_id)
        return await self.booking_repository.get_by_customer_id_and_status(
            customer_id, status
        )


class ListFlightBookingsUseCase:
    """Use case for listing the bookings on one flight"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, flight_id: int) -> List[Booking]:
        logger.info("Fetching bookings for flight: %s", flight_id)
        return await self.booking_repository.get_by_flight_id(flight_id)


class UpdateBookingStatusUseCase:
    """Use case for updating booking status"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, booking_id: int, new_status: BookingStatus) -> Booking:
        """Overwrite the status; any status may move to any other"""
        logger.info("Updating booking %s status to %s", booking_id, new_status.value)
        booking = await _load_or_raise(self.booking_repository, booking_id)

        booking.status = new_status
        updated = await self.booking_repository.save(booking)
        logger.info("Booking %s status updated to %s", booking_id, new_status.value)
        return updated


class ConfirmBookingUseCase:
    """Use case for confirming a booking against a payment"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, booking_id: int, payment_id: Optional[str]) -> Booking:
        """Mark the booking CONFIRMED and record the payment reference.

        The current status is not checked, so a cancelled or completed
        booking is confirmed again.
        """
        logger.info("Confirming booking %s with payment ID: %s", booking_id, payment_id)
        booking = await _load_or_raise(self.booking_repository, booking_id)

        booking.status = BookingStatus.CONFIRMED
        booking.payment_id = payment_id
        confirmed = await self.booking_repository.save(booking)
        logger.info("Booking %s confirmed", booking_id)
        return confirmed


class CancelBookingUseCase:
    """Use case for cancelling a booking"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, booking_id: int) -> Booking:
        logger.info("Cancelling booking: %s", booking_id)
        booking = await _load_or_raise(self.booking_repository, booking_id)

        if not BookingDomainService.can_cancel(booking):
            logger.warning("Booking %s is already cancelled", booking_id)
            raise BookingAlreadyCancelledError(booking_id)

        booking.status = BookingStatus.CANCELLED
        cancelled = await self.booking_repository.save(booking)
        logger.info("Booking %s cancelled", booking_id)
        return cancelled


class DeleteBookingUseCase:
    """Use case for permanently removing a booking"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, booking_id: int) -> None:
        logger.info("Deleting booking: %s", booking_id)
        if not await self.booking_repository.exists_by_id(booking_id):
            logger.warning("Booking %s not found", booking_id)
            raise BookingNotFoundError(booking_id)

        await self.booking_repository.delete_by_id(booking_id)
        logger.info("Booking %s deleted", booking_id)


class CheckSeatsUseCase:
    """Use case for checking whether seats on a flight are already booked"""

    def __init__(self, booking_repository: BookingRepositoryInterface):
        self.booking_repository = booking_repository

    async def execute(self, flight_id: int, seat_numbers: str) -> bool:
        return await self.booking_repository.exists_by_flight_id_and_seat_numbers(
            flight_id, seat_numbers
        )
