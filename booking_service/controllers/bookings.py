"""Booking controller exposing the booking lifecycle over REST."""

from __future__ import annotations

from typing import Annotated, List, Optional

from fastapi import APIRouter, HTTPException, Path, Query, Response, status

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
from booking_service.config.settings import settings
from booking_service.controllers.dependencies import BookingRepositoryDep
from booking_service.domain.exceptions import (
    BookingAlreadyCancelledError,
    BookingNotFoundError,
    SeatConflictError,
)
from booking_service.domain.models import BookingStatus
from booking_service.telemetry import record_booking_operation
from booking_service.views import (
    BIGINT_MAX,
    BIGINT_MIN,
    BookingConfirmRequest,
    BookingCreateRequest,
    BookingResponse,
    BookingStatusUpdateRequest,
    ErrorResponse,
    SeatAvailabilityResponse,
    ValidationErrorResponse,
)

router = APIRouter(
    prefix=f"{settings.api_prefix}/bookings",
    tags=["bookings"],
    responses={status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse}},
)

# Ids are stored as signed 64-bit integers.
BookingIdPath = Annotated[int, Path(ge=BIGINT_MIN, le=BIGINT_MAX)]
CustomerIdPath = Annotated[int, Path(ge=BIGINT_MIN, le=BIGINT_MAX)]
FlightIdPath = Annotated[int, Path(ge=BIGINT_MIN, le=BIGINT_MAX)]

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}


def _not_found(operation: str, exc: BookingNotFoundError) -> HTTPException:
    record_booking_operation(operation, "not_found")
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))


@router.post(
    "",
    response_model=BookingResponse,
    status_code=status.HTTP_201_CREATED,
    responses=CONFLICT,
)
async def create_booking(
    payload: BookingCreateRequest,
    repository: BookingRepositoryDep,
) -> BookingResponse:
    use_case = CreateBookingUseCase(
        repository, enforce_seat_conflicts=settings.enforce_seat_conflicts
    )
    try:
        booking = await use_case.execute(
            customer_id=payload.customerId,
            flight_id=payload.flightId,
            number_of_passengers=payload.numberOfPassengers,
            total_price=payload.totalPrice,
            departure_date=payload.departureDate,
            seat_numbers=payload.seatNumbers,
            notes=payload.notes,
        )
    except SeatConflictError as exc:
        record_booking_operation("create", "conflict")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from None

    record_booking_operation("create")
    return BookingResponse.from_domain(booking)


@router.get("", response_model=List[BookingResponse])
async def list_bookings(
    repository: BookingRepositoryDep,
    status_filter: Annotated[
        Optional[BookingStatus], Query(alias="status")
    ] = None,
) -> List[BookingResponse]:
    bookings = await ListBookingsUseCase(repository).execute(status_filter)
    return [BookingResponse.from_domain(b) for b in bookings]


@router.get("/customer/{customer_id}", response_model=List[BookingResponse])
async def list_customer_bookings(
    customer_id: CustomerIdPath,
    repository: BookingRepositoryDep,
    status_filter: Annotated[
        Optional[BookingStatus], Query(alias="status")
    ] = None,
) -> List[BookingResponse]:
    bookings = await ListCustomerBookingsUseCase(repository).execute(
        customer_id, status_filter
    )
    return [BookingResponse.from_domain(b) for b in bookings]


@router.get("/flight/{flight_id}", response_model=List[BookingResponse])
async def list_flight_bookings(
    flight_id: FlightIdPath,
    repository: BookingRepositoryDep,
) -> List[BookingResponse]:
    bookings = await ListFlightBookingsUseCase(repository).execute(flight_id)
    return [BookingResponse.from_domain(b) for b in bookings]


@router.get("/flight/{flight_id}/seats", response_model=SeatAvailabilityResponse)
async def check_seats(
    flight_id: FlightIdPath,
    repository: BookingRepositoryDep,
    seat_numbers: Annotated[str, Query(alias="seatNumbers", min_length=1)],
) -> SeatAvailabilityResponse:
    taken = await CheckSeatsUseCase(repository).execute(flight_id, seat_numbers)
    return SeatAvailabilityResponse(
        flightId=flight_id, seatNumbers=seat_numbers, taken=taken
    )


@router.get(
    "/payment/{payment_id}", response_model=BookingResponse, responses=NOT_FOUND
)
async def get_booking_by_payment(
    payment_id: str,
    repository: BookingRepositoryDep,
) -> BookingResponse:
    try:
        booking = await GetBookingByPaymentUseCase(repository).execute(payment_id)
    except BookingNotFoundError as exc:
        raise _not_found("get_by_payment", exc) from None
    return BookingResponse.from_domain(booking)


@router.get("/{booking_id}", response_model=BookingResponse, responses=NOT_FOUND)
async def get_booking(
    booking_id: BookingIdPath,
    repository: BookingRepositoryDep,
) -> BookingResponse:
    try:
        booking = await GetBookingUseCase(repository).execute(booking_id)
    except BookingNotFoundError as exc:
        raise _not_found("get", exc) from None
    return BookingResponse.from_domain(booking)


@router.patch(
    "/{booking_id}/status", response_model=BookingResponse, responses=NOT_FOUND
)
async def update_booking_status(
    booking_id: BookingIdPath,
    payload: BookingStatusUpdateRequest,
    repository: BookingRepositoryDep,
) -> BookingResponse:
    try:
        booking = await UpdateBookingStatusUseCase(repository).execute(
            booking_id, payload.status
        )
    except BookingNotFoundError as exc:
        raise _not_found("update_status", exc) from None

    record_booking_operation("update_status")
    return BookingResponse.from_domain(booking)


@router.post(
    "/{booking_id}/confirm", response_model=BookingResponse, responses=NOT_FOUND
)
async def confirm_booking(
    booking_id: BookingIdPath,
    payload: BookingConfirmRequest,
    repository: BookingRepositoryDep,
) -> BookingResponse:
    try:
        booking = await ConfirmBookingUseCase(repository).execute(
            booking_id, payload.paymentId
        )
    except BookingNotFoundError as exc:
        raise _not_found("confirm", exc) from None

    record_booking_operation("confirm")
    return BookingResponse.from_domain(booking)


@router.post(
    "/{booking_id}/cancel",
    response_model=BookingResponse,
    responses={**NOT_FOUND, **CONFLICT},
)
async def cancel_booking(
    booking_id: BookingIdPath,
    repository: BookingRepositoryDep,
) -> BookingResponse:
    try:
        booking = await CancelBookingUseCase(repository).execute(booking_id)
    except BookingNotFoundError as exc:
        raise _not_found("cancel", exc) from None
    except BookingAlreadyCancelledError as exc:
        record_booking_operation("cancel", "conflict")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT, detail=str(exc)
        ) from None

    record_booking_operation("cancel")
    return BookingResponse.from_domain(booking)


@router.delete(
    "/{booking_id}", status_code=status.HTTP_204_NO_CONTENT, responses=NOT_FOUND
)
async def delete_booking(
    booking_id: BookingIdPath,
    repository: BookingRepositoryDep,
) -> Response:
    try:
        await DeleteBookingUseCase(repository).execute(booking_id)
    except BookingNotFoundError as exc:
        raise _not_found("delete", exc) from None

    record_booking_operation("delete")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
