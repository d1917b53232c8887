"""Async engine and session wiring for the bookings table."""

from __future__ import annotations

import logging
import re
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from sqlalchemy.schema import CreateSchema

from booking_service.config.settings import DatabaseConfig, settings
from booking_service.models import Base

logger = logging.getLogger(__name__)

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def resolve_schema(config: DatabaseConfig) -> str | None:
    """Schema that should hold the bookings table, or None for the default one.

    Only PostgreSQL honours a schema; blank or malformed names are ignored.
    """

    if not config.is_postgres or not config.schema_name:
        return None

    schema = config.schema_name.strip()
    if not _IDENTIFIER.fullmatch(schema):
        logger.warning("Ignoring invalid schema name %r", config.schema_name)
        return None
    return schema or None


def _create_engine(config: DatabaseConfig) -> AsyncEngine:
    options: dict[str, Any] = {
        "echo": settings.debug,
        "pool_pre_ping": True,
    }
    if config.serverless or settings.debug:
        # Disable pooling when working with serverless databases (or in debug).
        options["poolclass"] = NullPool

    schema = resolve_schema(config)
    if schema:
        # Unqualified tables (the bookings table) resolve to the configured schema.
        options["execution_options"] = {"schema_translate_map": {None: schema}}

    return create_async_engine(config.url, **options)


engine: AsyncEngine = _create_engine(settings.database)

SessionFactory = async_sessionmaker(
    engine,
    expire_on_commit=False,
    class_=AsyncSession,
)


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding one session per request."""

    async with SessionFactory() as session:
        yield session


async def init_models(target_engine: AsyncEngine | None = None) -> None:
    """Create the bookings table (and its schema) if missing."""

    target = target_engine or engine
    schema = target.get_execution_options().get("schema_translate_map", {}).get(None)

    async with target.begin() as conn:
        if schema:
            await conn.execute(CreateSchema(schema, if_not_exists=True))
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Ensured bookings table in %s schema.", schema or "default")


async def dispose_engine() -> None:
    """Dispose of the engine and release pooled connections."""

    await engine.dispose()
