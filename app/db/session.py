"""
Database engine and session factory construction.

This file builds the async database connection using SQLAlchemy + asyncpg.
Nothing here is global: the application lifespan creates one engine
(and therefore one connection pool) and hands the session maker to
whatever needs it.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.config import Settings


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """
    Create the async database engine.

    The pool size bounds how many store operations run at the same time;
    further requests wait for a free connection until DB_POOL_TIMEOUT.
    """
    return create_async_engine(
        settings.DATABASE_URL,
        echo=settings.DEBUG,  # When DEBUG=True, prints SQL queries to console
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Create a session factory bound to the given engine.

    expire_on_commit=False keeps loaded rows readable after the session
    that produced them is closed, which is how entities reach the templates.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
