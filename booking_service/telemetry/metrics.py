"""Prometheus metrics for HTTP traffic and booking operations."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

NAMESPACE = "booking_service"

_LATENCY_BUCKETS = (0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0)

REQUEST_COUNT = Counter(
    "http_requests_total",
    "HTTP requests by method, route template and status code",
    ("method", "route", "status"),
    namespace=NAMESPACE,
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    namespace=NAMESPACE,
    buckets=_LATENCY_BUCKETS,
)

ERROR_COUNTER = Counter(
    "http_server_errors_total",
    "Requests answered with a 5xx status",
    ("method", "route"),
    namespace=NAMESPACE,
)

BOOKING_OPERATIONS = Counter(
    "booking_operations_total",
    "Booking lifecycle operations by outcome (success, not_found, conflict)",
    ("operation", "outcome"),
    namespace=NAMESPACE,
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record one finished HTTP request."""

    REQUEST_COUNT.labels(method, route, str(status_code)).inc()
    REQUEST_LATENCY.labels(method, route).observe(max(duration_seconds, 0.0))
    if status_code >= 500:
        ERROR_COUNTER.labels(method, route).inc()


def record_booking_operation(operation: str, outcome: str = "success") -> None:
    """Count one create/confirm/cancel/... call and how it ended."""

    BOOKING_OPERATIONS.labels(operation=operation, outcome=outcome).inc()
