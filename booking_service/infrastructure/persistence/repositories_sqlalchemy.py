from typing import List, Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from booking_service.application.interfaces import BookingRepositoryInterface
from booking_service.domain.models import Booking, BookingStatus, utcnow
from booking_service.models.booking import Booking as BookingEntity


class SQLAlchemyBookingRepository(BookingRepositoryInterface):
    """SQLAlchemy implementation of Booking repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _fetch_all(self, statement) -> List[Booking]:
        result = await self.session.execute(statement)
        return [Booking.model_validate(row) for row in result.scalars().all()]

    async def get_by_id(self, booking_id: int) -> Optional[Booking]:
        db_booking = await self.session.get(BookingEntity, booking_id)
        return Booking.model_validate(db_booking) if db_booking else None

    async def list_all(self) -> List[Booking]:
        return await self._fetch_all(select(BookingEntity))

    async def get_by_customer_id(self, customer_id: int) -> List[Booking]:
        return await self._fetch_all(
            select(BookingEntity).where(BookingEntity.customer_id == customer_id)
        )

    async def get_by_flight_id(self, flight_id: int) -> List[Booking]:
        return await self._fetch_all(
            select(BookingEntity).where(BookingEntity.flight_id == flight_id)
        )

    async def get_by_status(self, status: BookingStatus) -> List[Booking]:
        return await self._fetch_all(
            select(BookingEntity).where(BookingEntity.status == status)
        )

    async def get_by_payment_id(self, payment_id: str) -> Optional[Booking]:
        result = await self.session.execute(
            select(BookingEntity)
            .where(BookingEntity.payment_id == payment_id)
            .limit(1)
        )
        db_booking = result.scalars().first()
        return Booking.model_validate(db_booking) if db_booking else None

    async def get_by_customer_id_and_status(
        self, customer_id: int, status: BookingStatus
    ) -> List[Booking]:
        return await self._fetch_all(
            select(BookingEntity).where(
                BookingEntity.customer_id == customer_id,
                BookingEntity.status == status,
            )
        )

    async def exists_by_flight_id_and_seat_numbers(
        self, flight_id: int, seat_numbers: str
    ) -> bool:
        result = await self.session.execute(
            select(
                exists().where(
                    BookingEntity.flight_id == flight_id,
                    BookingEntity.seat_numbers == seat_numbers,
                )
            )
        )
        return bool(result.scalar())

    async def save(self, booking: Booking) -> Booking:
        db_booking = None
        if booking.id is not None:
            db_booking = await self.session.get(BookingEntity, booking.id)

        if db_booking is None:
            now = utcnow()
            db_booking = BookingEntity(
                id=booking.id,
                created_at=booking.created_at or now,
                updated_at=booking.updated_at or now,
                booking_date=booking.booking_date or now,
            )
            self.session.add(db_booking)
        else:
            db_booking.booking_date = booking.booking_date or db_booking.booking_date
            db_booking.updated_at = utcnow()

        db_booking.customer_id = booking.customer_id
        db_booking.flight_id = booking.flight_id
        db_booking.number_of_passengers = booking.number_of_passengers
        db_booking.status = booking.status
        db_booking.total_price = booking.total_price
        db_booking.departure_date = booking.departure_date
        db_booking.seat_numbers = booking.seat_numbers
        db_booking.payment_id = booking.payment_id
        db_booking.notes = booking.notes

        await self.session.commit()
        await self.session.refresh(db_booking)
        return Booking.model_validate(db_booking)

    async def delete_by_id(self, booking_id: int) -> None:
        await self.session.execute(
            delete(BookingEntity).where(BookingEntity.id == booking_id)
        )
        await self.session.commit()

    async def exists_by_id(self, booking_id: int) -> bool:
        result = await self.session.execute(
            select(exists().where(BookingEntity.id == booking_id))
        )
        return bool(result.scalar())
