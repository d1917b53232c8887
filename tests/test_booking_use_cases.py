"""Booking lifecycle rules exercised against the in-memory repository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from booking_service.application.use_cases import (
    CancelBookingUseCase,
    CheckSeatsUseCase,
    ConfirmBookingUseCase,
    CreateBookingUseCase,
    DeleteBookingUseCase,
    GetBookingByPaymentUseCase,
    GetBookingUseCase,
    ListBookingsUseCase,
    ListCustomerBookingsUseCase,
    ListFlightBookingsUseCase,
    UpdateBookingStatusUseCase,
)
from booking_service.domain.exceptions import (
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    SeatConflictError,
)
from booking_service.domain.models import BookingStatus

pytestmark = pytest.mark.asyncio


async def _create(repository, customer_id=1, flight_id=100, seats=None, **kwargs):
    return await CreateBookingUseCase(repository, **kwargs).execute(
        customer_id=customer_id,
        flight_id=flight_id,
        number_of_passengers=2,
        total_price=Decimal("500.00"),
        seat_numbers=seats,
    )


async def test_create_forces_pending_and_stamps_dates(repository):
    booking = await _create(repository)

    assert booking.id is not None
    assert booking.status == BookingStatus.PENDING
    assert booking.number_of_passengers == 2
    assert booking.total_price == Decimal("500.00")
    assert booking.booking_date is not None
    assert booking.created_at == booking.updated_at
    assert booking.payment_id is None


async def test_create_does_not_consult_seats_by_default(repository):
    await _create(repository, seats="A1")
    second = await _create(repository, seats="A1")

    assert second.id == 2
    assert repository.seat_lookups == 0


async def test_create_rejects_taken_seats_when_enforced(repository):
    await _create(repository, seats="A1,A2")

    with pytest.raises(SeatConflictError):
        await _create(repository, seats="A1,A2", enforce_seat_conflicts=True)

    other_flight = await _create(
        repository, flight_id=200, seats="A1,A2", enforce_seat_conflicts=True
    )
    assert other_flight.flight_id == 200


async def test_get_missing_booking_raises_not_found(repository):
    with pytest.raises(BookingNotFoundError) as excinfo:
        await GetBookingUseCase(repository).execute(42)

    assert excinfo.value.value == 42
    assert str(excinfo.value) == "Booking not found with id: 42"


async def test_get_returns_what_create_returned(repository):
    created = await _create(repository)

    fetched = await GetBookingUseCase(repository).execute(created.id)

    assert fetched == created


@pytest.mark.parametrize("target", list(BookingStatus))
async def test_update_status_accepts_any_transition(repository, target):
    booking = await _create(repository)
    await CancelBookingUseCase(repository).execute(booking.id)

    updated = await UpdateBookingStatusUseCase(repository).execute(booking.id, target)

    assert updated.status == target
    assert (await GetBookingUseCase(repository).execute(booking.id)).status == target


async def test_update_status_moves_confirmed_back_to_pending(repository):
    booking = await _create(repository)
    await ConfirmBookingUseCase(repository).execute(booking.id, "PAY-1")

    updated = await UpdateBookingStatusUseCase(repository).execute(
        booking.id, BookingStatus.PENDING
    )

    assert updated.status == BookingStatus.PENDING
    assert updated.payment_id == "PAY-1"


async def test_update_status_missing_booking(repository):
    with pytest.raises(BookingNotFoundError):
        await UpdateBookingStatusUseCase(repository).execute(9, BookingStatus.COMPLETED)


@pytest.mark.parametrize(
    "prior", [BookingStatus.PENDING, BookingStatus.CANCELLED, BookingStatus.COMPLETED]
)
async def test_confirm_ignores_prior_status(repository, prior):
    booking = await _create(repository)
    await UpdateBookingStatusUseCase(repository).execute(booking.id, prior)

    confirmed = await ConfirmBookingUseCase(repository).execute(booking.id, "PAY-X")

    assert confirmed.status == BookingStatus.CONFIRMED
    assert confirmed.payment_id == "PAY-X"


async def test_confirm_missing_booking(repository):
    with pytest.raises(BookingNotFoundError):
        await ConfirmBookingUseCase(repository).execute(5, "PAY-X")


@pytest.mark.parametrize("prior", [BookingStatus.PENDING, BookingStatus.CONFIRMED])
async def test_cancel_succeeds_from_active_states(repository, prior):
    booking = await _create(repository)
    await UpdateBookingStatusUseCase(repository).execute(booking.id, prior)

    cancelled = await CancelBookingUseCase(repository).execute(booking.id)

    assert cancelled.status == BookingStatus.CANCELLED


async def test_cancel_twice_conflicts_and_keeps_status(repository):
    booking = await _create(repository)
    use_case = CancelBookingUseCase(repository)
    await use_case.execute(booking.id)

    with pytest.raises(BookingAlreadyCancelledError):
        await use_case.execute(booking.id)

    fetched = await GetBookingUseCase(repository).execute(booking.id)
    assert fetched.status == BookingStatus.CANCELLED


async def test_cancel_missing_booking(repository):
    with pytest.raises(BookingNotFoundError):
        await CancelBookingUseCase(repository).execute(3)


async def test_mutations_refresh_updated_at_only(repository):
    booking = await _create(repository)

    confirmed = await ConfirmBookingUseCase(repository).execute(booking.id, "PAY-9")

    assert confirmed.created_at == booking.created_at
    assert confirmed.updated_at >= booking.updated_at
    assert isinstance(confirmed.updated_at, datetime)


async def test_delete_removes_booking(repository):
    booking = await _create(repository)

    await DeleteBookingUseCase(repository).execute(booking.id)

    with pytest.raises(BookingNotFoundError):
        await GetBookingUseCase(repository).execute(booking.id)


async def test_delete_missing_booking(repository):
    with pytest.raises(BookingNotFoundError):
        await DeleteBookingUseCase(repository).execute(77)


async def test_listings_filter_by_customer_flight_and_status(repository):
    first = await _create(repository, customer_id=1, flight_id=100)
    await _create(repository, customer_id=1, flight_id=200)
    await _create(repository, customer_id=2, flight_id=100)
    await CancelBookingUseCase(repository).execute(first.id)

    assert len(await ListBookingsUseCase(repository).execute()) == 3

    cancelled = await ListBookingsUseCase(repository).execute(BookingStatus.CANCELLED)
    assert [b.id for b in cancelled] == [first.id]

    customer_one = await ListCustomerBookingsUseCase(repository).execute(1)
    assert {b.customer_id for b in customer_one} == {1}
    assert len(customer_one) == 2

    pending_for_one = await ListCustomerBookingsUseCase(repository).execute(
        1, BookingStatus.PENDING
    )
    assert len(pending_for_one) == 1

    flight_100 = await ListFlightBookingsUseCase(repository).execute(100)
    assert {b.customer_id for b in flight_100} == {1, 2}

    assert await ListCustomerBookingsUseCase(repository).execute(99) == []


async def test_lookup_by_payment(repository):
    booking = await _create(repository)
    await ConfirmBookingUseCase(repository).execute(booking.id, "PAY-12345")

    found = await GetBookingByPaymentUseCase(repository).execute("PAY-12345")
    assert found.id == booking.id

    with pytest.raises(BookingNotFoundError) as excinfo:
        await GetBookingByPaymentUseCase(repository).execute("PAY-404")
    assert excinfo.value.field == "payment id"
    assert str(excinfo.value) == "Booking not found with payment id: PAY-404"


async def test_seat_check_uses_exact_string_match(repository):
    await _create(repository, flight_id=100, seats="A1,A2")
    check = CheckSeatsUseCase(repository)

    assert await check.execute(100, "A1,A2") is True
    assert await check.execute(100, "A2,A1") is False
    assert await check.execute(100, "A1, A2") is False
    assert await check.execute(101, "A1,A2") is False
