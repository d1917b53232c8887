from abc import ABC, abstractmethod
from typing import List, Optional

from booking_service.domain.models import Booking, BookingStatus


class BookingRepositoryInterface(ABC):
    """Persistence contract for booking entities.

    Lookups return ``None`` or an empty list when nothing matches; turning
    a miss into a not-found failure is the caller's job.
    """

    @abstractmethod
    async def get_by_id(self, booking_id: int) -> Optional[Booking]:
        ...

    @abstractmethod
    async def list_all(self) -> List[Booking]:
        ...

    @abstractmethod
    async def get_by_customer_id(self, customer_id: int) -> List[Booking]:
        ...

    @abstractmethod
    async def get_by_flight_id(self, flight_id: int) -> List[Booking]:
        ...

    @abstractmethod
    async def get_by_status(self, status: BookingStatus) -> List[Booking]:
        ...

    @abstractmethod
    async def get_by_payment_id(self, payment_id: str) -> Optional[Booking]:
        ...

    @abstractmethod
    async def get_by_customer_id_and_status(
        self, customer_id: int, status: BookingStatus
    ) -> List[Booking]:
        ...

    @abstractmethod
    async def exists_by_flight_id_and_seat_numbers(
        self, flight_id: int, seat_numbers: str
    ) -> bool:
        ...

    @abstractmethod
    async def save(self, booking: Booking) -> Booking:
        """Insert a new booking, or overwrite the stored one with the same id."""

    @abstractmethod
    async def delete_by_id(self, booking_id: int) -> None:
        ...

    @abstractmethod
    async def exists_by_id(self, booking_id: int) -> bool:
        ...
