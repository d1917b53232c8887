from .repositories_sqlalchemy import SQLAlchemyBookingRepository

__all__ = ["SQLAlchemyBookingRepository"]
