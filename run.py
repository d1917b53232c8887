#!/usr/bin/env python3
"""
Run script for the Flight Booking Service
"""
import uvicorn

from booking_service.config.settings import settings
from booking_service.main import app

if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port, reload=settings.debug)
