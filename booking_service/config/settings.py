from typing import Optional
from urllib.parse import quote_plus

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseConfig(BaseSettings):
    """Database configuration"""

    host: str = "localhost"
    port: int = 5432
    username: str = "postgres"
    password: SecretStr = Field(default=SecretStr("postgres"))
    database: str = "bookings"
    schema_name: Optional[str] = Field(default=None, validation_alias="DB_SCHEMA")
    serverless: bool = Field(
        default=True,
        description="If true, disable connection pooling so serverless DBs can pause.",
    )
    dsn: Optional[str] = Field(
        default=None,
        validation_alias="DB_URL",
        description="Full SQLAlchemy async URL; overrides the PostgreSQL fields.",
    )

    @property
    def url(self) -> str:
        """Get database URL"""
        if self.dsn:
            return self.dsn
        username = quote_plus(self.username)
        password = quote_plus(self.password.get_secret_value())
        return (
            "postgresql+asyncpg://"
            f"{username}:{password}"
            f"@{self.host}:{self.port}/{self.database}"
        )

    @property
    def is_postgres(self) -> bool:
        return self.url.startswith("postgresql")

    model_config = SettingsConfigDict(
        env_prefix="DB_",
        env_file=".env",
        secrets_dir=".secrets",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Flight Booking Service"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080
    log_file: str = "logs/booking_service.log"
    api_prefix: str = "/api"

    # Reject a create whose flight and seat numbers are already booked.
    enforce_seat_conflicts: bool = False

    # Database
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
