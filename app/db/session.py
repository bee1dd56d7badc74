"""Database engine and connection configuration."""

from typing import AsyncGenerator

import structlog
from sqlalchemy.ext.asyncio import AsyncConnection, create_async_engine

from app.config import settings
from app.db.base import Base

logger = structlog.get_logger(__name__)

# Create async engine
engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_size=settings.DATABASE_POOL_SIZE,
    max_overflow=settings.DATABASE_MAX_OVERFLOW,
    pool_pre_ping=True,
)


async def get_db() -> AsyncGenerator[AsyncConnection, None]:
    """
    Dependency to get a database connection.

    The connection runs inside one transaction which is committed when the
    request handler returns and rolled back when it raises.
    """
    async with engine.begin() as conn:
        yield conn


async def init_db():
    """Initialize database tables."""
    # Import all models to register them
    from app.models import company, job, user  # noqa: F401

    # Create tables (in production, use Alembic migrations)
    if settings.DEBUG:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("database_tables_created")
