"""Database engine and session management.

The engine and session factory live here, in the composition layer; the
catalog core only ever sees a store built around one session.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from catalog_service.infrastructure.config import settings

engine = create_async_engine(
    settings.database_url,
    echo=settings.debug,
    pool_pre_ping=True,
)

async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

# Base class for catalog models
Base = declarative_base()


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request.

    Commits when the request succeeds and rolls back otherwise. Read-only
    requests commit an empty transaction.

    Yields:
        AsyncSession for database operations.
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def dispose_engine() -> None:
    """Close all pooled connections."""
    await engine.dispose()
