from .booking_use_cases import (
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

__all__ = [
    "CreateBookingUseCase",
    "GetBookingUseCase",
    "GetBookingByPaymentUseCase",
    "ListBookingsUseCase",
    "ListCustomerBookingsUseCase",
    "ListFlightBookingsUseCase",
    "UpdateBookingStatusUseCase",
    "ConfirmBookingUseCase",
    "CancelBookingUseCase",
    "DeleteBookingUseCase",
    "CheckSeatsUseCase",
]
