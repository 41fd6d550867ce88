"""
Movie store configuration and session management.

Provides SQLAlchemy async engine setup, the session factory handed to
MoviesRepository, and helpers to create, clear and close the movie
collection.
"""

from typing import Optional

from sqlalchemy import delete, event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from movies_library.core.config import settings
from movies_library.core.logging_config import get_logger
from movies_library.models.base import Base

logger = get_logger(__name__)


def _sql_casefold(value):
    return value.casefold() if isinstance(value, str) else value


def get_async_engine(database_url: Optional[str] = None) -> AsyncEngine:
    """
    Create and configure the async SQLAlchemy engine.

    For SQLite:
    - Uses StaticPool so an in-memory database survives across sessions
    - Enables check_same_thread=False for async compatibility
    - Turns on foreign key enforcement per connection
    - Registers a casefold() SQL function; the built-in lower() only folds ASCII

    Args:
        database_url: Store URL; defaults to settings.database_url

    Returns:
        Configured AsyncEngine instance
    """
    url = database_url or settings.database_url
    is_sqlite = url.startswith("sqlite")

    connect_args: dict = {"check_same_thread": False} if is_sqlite else {}

    engine_kwargs = {
        "echo": settings.database_echo,
        "connect_args": connect_args,
    }

    if is_sqlite:
        engine_kwargs["poolclass"] = StaticPool

    engine = create_async_engine(url, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # noqa: ANN001
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()
            dbapi_connection.create_function("casefold", 1, _sql_casefold)

    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """
    Build a session factory bound to an engine.

    Args:
        engine: Engine for the movie store

    Returns:
        async_sessionmaker producing AsyncSession instances
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Documents stay readable after commit
        autoflush=False,
    )


# Global async engine instance
# Created once at import; nothing connects until the first call
engine = get_async_engine()

# Default session factory, used by movies_library.dependencies
async_session_maker = create_session_factory(engine)


async def init_db(target: Optional[AsyncEngine] = None) -> None:
    """
    Create the movie collection if it does not exist yet.

    Args:
        target: Engine to initialise; defaults to the global engine

    Example:
        await init_db()
    """
    # Import models so metadata is populated before create_all()
    from movies_library import models  # noqa: F401

    async with (target or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Movie store initialized")


async def clear_database(target: Optional[AsyncEngine] = None) -> None:
    """
    Remove every movie document, keeping the collection itself.

    Intended for test setup/teardown against a provisioned store.

    Args:
        target: Engine to clear; defaults to the global engine
    """
    from movies_library.models.movie import MovieDocument

    async with (target or engine).begin() as conn:
        await conn.execute(delete(MovieDocument))

    logger.info("Movie store cleared")


async def close_db(target: Optional[AsyncEngine] = None) -> None:
    """
    Close the store connection.

    Should be called at host application shutdown to cleanly close
    all pooled connections.
    """
    await (target or engine).dispose()

