"""
Database connection management.

Provides the async SQLAlchemy engine, session factory, and FastAPI
dependency for database session injection.

Dependencies: sqlalchemy, micourses.configs
System role: Database connection lifecycle management
"""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from micourses.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Create the process-wide async SQLAlchemy engine.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early. SQLite URLs skip pool sizing.

    Returns:
        AsyncEngine: Configured async SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    db_config = get_settings().database

    if db_config.is_sqlite:
        return create_async_engine(db_config.url, echo=db_config.echo_sql)

    return create_async_engine(
        db_config.url,
        echo=db_config.echo_sql,
        pool_size=db_config.pool_size,
        max_overflow=db_config.max_overflow,
        pool_timeout=db_config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker:
    """
    Create async session factory for database operations.

    autoflush=False and expire_on_commit=False keep loaded documents usable
    after the request transaction commits.

    Returns:
        async_sessionmaker: Async session factory

    Usage:
        SessionFactory = get_async_session_factory()
        async with SessionFactory() as session:
            session.add(obj)
            await session.commit()
    """
    return async_sessionmaker(
        bind=get_async_engine(),
        autoflush=False,
        expire_on_commit=False,
    )


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for async database session injection.

    One session per request. The transaction commits when the route
    returns normally and rolls back if it raises.

    Yields:
        AsyncSession: Async SQLAlchemy session (scoped to request lifetime)

    Usage:
        @router.get("/profile/{user_id}")
        async def get_profile(user_id: str, db: AsyncSession = Depends(get_async_db)):
            return await user_crud.get_by_id(db, user_id)
    """
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
