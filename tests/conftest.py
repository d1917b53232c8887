"""Shared fixtures: an isolated SQLite database per test and an in-memory repository."""

from __future__ import annotations

import asyncio
import os
import sys
import tempfile
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# The app builds its engine and log handlers at import time.
_SCRATCH = Path(tempfile.mkdtemp(prefix="booking-service-tests-"))
os.environ.setdefault("DB_URL", f"sqlite+aiosqlite:///{_SCRATCH / 'default.db'}")
os.environ.setdefault("LOG_FILE", str(_SCRATCH / "booking_service.log"))

from booking_service.application.interfaces import BookingRepositoryInterface  # noqa: E402
from booking_service.database import get_session, init_models  # noqa: E402
from booking_service.domain.models import Booking, BookingStatus, utcnow  # noqa: E402
from booking_service.main import app  # noqa: E402


def sqlite_url(directory: Path) -> str:
    return f"sqlite+aiosqlite:///{directory / 'bookings.db'}"


@pytest.fixture
def engine(tmp_path: Path):
    """Engine over a fresh SQLite file with the bookings table created."""

    test_engine = create_async_engine(sqlite_url(tmp_path), poolclass=NullPool)
    asyncio.run(init_models(test_engine))
    yield test_engine
    asyncio.run(test_engine.dispose())


@pytest.fixture
def client(engine) -> TestClient:
    """Test client whose requests hit the per-test database."""

    factory = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    async def override_get_session():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield TestClient(app)
    app.dependency_overrides.clear()


class InMemoryBookingRepository(BookingRepositoryInterface):
    """Dictionary-backed repository honouring the storage contract."""

    def __init__(self) -> None:
        self._rows: Dict[int, Booking] = {}
        self._next_id = 1
        self.seat_lookups = 0

    def _copy_all(self, predicate) -> List[Booking]:
        return [row.model_copy() for row in self._rows.values() if predicate(row)]

    async def get_by_id(self, booking_id: int) -> Optional[Booking]:
        row = self._rows.get(booking_id)
        return row.model_copy() if row else None

    async def list_all(self) -> List[Booking]:
        return self._copy_all(lambda row: True)

    async def get_by_customer_id(self, customer_id: int) -> List[Booking]:
        return self._copy_all(lambda row: row.customer_id == customer_id)

    async def get_by_flight_id(self, flight_id: int) -> List[Booking]:
        return self._copy_all(lambda row: row.flight_id == flight_id)

    async def get_by_status(self, status: BookingStatus) -> List[Booking]:
        return self._copy_all(lambda row: row.status == status)

    async def get_by_payment_id(self, payment_id: str) -> Optional[Booking]:
        matches = self._copy_all(lambda row: row.payment_id == payment_id)
        return matches[0] if matches else None

    async def get_by_customer_id_and_status(
        self, customer_id: int, status: BookingStatus
    ) -> List[Booking]:
        return self._copy_all(
            lambda row: row.customer_id == customer_id and row.status == status
        )

    async def exists_by_flight_id_and_seat_numbers(
        self, flight_id: int, seat_numbers: str
    ) -> bool:
        self.seat_lookups += 1
        return any(
            row.flight_id == flight_id and row.seat_numbers == seat_numbers
            for row in self._rows.values()
        )

    async def save(self, booking: Booking) -> Booking:
        stored = booking.model_copy()
        previous = self._rows.get(stored.id) if stored.id is not None else None
        if stored.id is None:
            stored.id = self._next_id
        self._next_id = max(self._next_id, stored.id + 1)

        if previous is not None:
            stored.created_at = previous.created_at
            stored.updated_at = utcnow()
        self._rows[stored.id] = stored
        return stored.model_copy()

    async def delete_by_id(self, booking_id: int) -> None:
        self._rows.pop(booking_id, None)

    async def exists_by_id(self, booking_id: int) -> bool:
        return booking_id in self._rows


@pytest.fixture
def repository() -> InMemoryBookingRepository:
    return InMemoryBookingRepository()


@pytest.fixture
def booking_payload() -> dict:
    return {
        "customerId": 1,
        "flightId": 100,
        "numberOfPassengers": 2,
        "totalPrice": 500.00,
        "departureDate": "2026-11-26T09:30:00",
        "seatNumbers": "A1,A2",
    }
