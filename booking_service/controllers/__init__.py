"""FastAPI routers acting as controllers."""

from . import bookings

__all__ = ["bookings"]
