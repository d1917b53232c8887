"""Application configuration."""

from .settings import DatabaseConfig, Settings, settings

__all__ = ["DatabaseConfig", "Settings", "settings"]
