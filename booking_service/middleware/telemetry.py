"""Telemetry middleware for request instrumentation."""

from __future__ import annotations

import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from booking_service.telemetry import observe_request

_UNTRACKED_PATHS = frozenset({"/metrics", "/health"})


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Collect request metrics for Prometheus."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        if request.url.path in _UNTRACKED_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            observe_request(
                request.method,
                self._route_template(request),
                500,
                time.perf_counter() - start_time,
            )
            raise

        observe_request(
            request.method,
            self._route_template(request),
            response.status_code,
            time.perf_counter() - start_time,
        )
        return response

    @staticmethod
    def _route_template(request: Request) -> str:
        """Return best-effort route pattern for metrics labels."""

        route = request.scope.get("route")
        path = getattr(route, "path", None)
        return path or request.url.path
