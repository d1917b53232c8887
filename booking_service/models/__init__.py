"""SQLAlchemy models backing the booking service."""

from .base import Base
from .booking import Booking  # noqa: F401

__all__ = ["Base", "Booking"]
