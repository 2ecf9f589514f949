"""
Database table creation.

Creates all tables defined in ORM models using SQLAlchemy metadata.
Runs from the application lifespan hook and as a module.

Dependencies: sqlalchemy, micourses.boundary.db
System role: Database schema initialization

Usage:
    python -m micourses.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from micourses.boundary.db.base import Base
from micourses.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from micourses.boundary.db.models import AdminModel, CourseModel, PostModel, UserModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Engine to use (defaults to the configured engine)
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


if __name__ == "__main__":
    asyncio.run(create_all_tables())
