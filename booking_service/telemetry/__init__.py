"""Telemetry helpers and metrics."""

from .metrics import (
    BOOKING_OPERATIONS,
    ERROR_COUNTER,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    observe_request,
    record_booking_operation,
)

__all__ = [
    "BOOKING_OPERATIONS",
    "ERROR_COUNTER",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "observe_request",
    "record_booking_operation",
]
