"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from booking_service.application.interfaces import BookingRepositoryInterface
from booking_service.database import get_session
from booking_service.infrastructure.persistence import SQLAlchemyBookingRepository

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_booking_repository(session: SessionDep) -> BookingRepositoryInterface:
    """Bind a booking repository to the request's session."""

    return SQLAlchemyBookingRepository(session)


BookingRepositoryDep = Annotated[
    BookingRepositoryInterface, Depends(get_booking_repository)
]


__all__ = ["get_booking_repository", "SessionDep", "BookingRepositoryDep"]
