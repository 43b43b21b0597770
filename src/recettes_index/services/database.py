"""
Database connection and session management for Recettes Index.

This module provides:
- Async engine creation and configuration
- Session factory (the backend client handed to repositories)
- Database initialization (create tables)
- Foreign key enforcement for the SQLite backend
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
import logging

from sqlalchemy import event, inspect
from sqlalchemy.engine.url import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from recettes_index.utils.config import get_config
from recettes_index.models.base import Base

# Configure logging
logger = logging.getLogger(__name__)

# Global engine and session factory
_engine: Optional[AsyncEngine] = None
_SessionFactory: Optional[async_sessionmaker] = None

EXPECTED_TABLES = ("recettes", "books", "authors", "books_authors")


def _set_sqlite_pragma(dbapi_connection, connection_record):
    """
    Set SQLite pragmas on connection.

    Called for every new connection of a SQLite engine. Foreign keys must
    be switched on per connection for books_authors integrity.
    """
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _is_memory_database(database_url: str) -> bool:
    return ":memory:" in database_url or "mode=memory" in database_url


def create_database_engine(
    database_url: Optional[str] = None, echo: Optional[bool] = None
) -> AsyncEngine:
    """
    Create and configure the async database engine.

    Args:
        database_url: Optional async database URL. If None, uses config default.
        echo: If True, log all SQL statements. If None, uses config default.

    Returns:
        Configured SQLAlchemy AsyncEngine
    """
    if database_url is None:
        database_url = get_config().database_url
    if echo is None:
        echo = get_config().sql_echo

    url = make_url(database_url)
    logger.info(f"Creating database engine: {url.render_as_string(hide_password=True)}")

    if url.get_backend_name() != "sqlite":
        return create_async_engine(database_url, echo=echo, pool_pre_ping=True)

    if _is_memory_database(database_url):
        # For in-memory databases (testing), every session shares one connection
        engine = create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": 30},
        )

    event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)
    return engine


async def init_database(engine: Optional[AsyncEngine] = None) -> None:
    """
    Initialize the database by creating all tables.

    Safe to call multiple times - existing tables won't be recreated.

    Args:
        engine: Optional engine to use. If None, uses global engine.
    """
    if engine is None:
        engine = get_engine()

    logger.info("Initializing database tables")

    # Import all models to ensure they're registered with Base
    from recettes_index.models import recipe, book, author, book_author  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized successfully")


def get_engine(force_recreate: bool = False) -> AsyncEngine:
    """
    Get the global database engine.

    Args:
        force_recreate: If True, recreate the engine even if one exists

    Returns:
        Database engine
    """
    global _engine

    if _engine is None or force_recreate:
        _engine = create_database_engine()

    return _engine


def get_session_factory() -> async_sessionmaker:
    """
    Get the global session factory.

    Returns:
        Session factory (async_sessionmaker)
    """
    global _SessionFactory

    if _SessionFactory is None:
        engine = get_engine()
        _SessionFactory = async_sessionmaker(bind=engine, expire_on_commit=False)

    return _SessionFactory


def get_session() -> AsyncSession:
    """
    Create a new database session from the global factory.

    Example:
        session = get_session()
        try:
            recipe = await session.get(Recipe, 1)
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
    """
    session_factory = get_session_factory()
    return session_factory()


@asynccontextmanager
async def session_scope(
    session_factory: Optional[async_sessionmaker] = None,
) -> AsyncIterator[AsyncSession]:
    """
    Provide a transactional scope for database operations.

    - Creates a new session (from session_factory, or the global one)
    - Commits on success
    - Rolls back on exception
    - Always closes the session

    Example:
        async with session_scope() as session:
            session.add(Book(title="Ottolenghi Simple"))
            # Commit happens automatically if no exception
    """
    session = session_factory() if session_factory is not None else get_session()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def verify_database(engine: Optional[AsyncEngine] = None) -> bool:
    """
    Verify that the database is accessible and has all tables.

    Returns:
        True if database is valid, False otherwise
    """
    if engine is None:
        engine = get_engine()

    try:
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
    except Exception as e:
        logger.error(f"Database verification failed: {e}")
        return False

    missing = [table for table in EXPECTED_TABLES if table not in tables]
    if missing:
        logger.warning(f"Database is missing tables: {', '.join(missing)}")
        return False
    return True


async def reset_database(confirm: bool = False, engine: Optional[AsyncEngine] = None) -> None:
    """
    Drop all tables and recreate the database.

    WARNING: This will delete all data!

    Args:
        confirm: Must be True to actually reset. Safety check.
        engine: Optional engine to use. If None, uses global engine.

    Raises:
        ValueError: If confirm is not True
    """
    if not confirm:
        raise ValueError("Must pass confirm=True to reset database. This will delete all data!")

    logger.warning("RESETTING DATABASE - ALL DATA WILL BE LOST")

    if engine is None:
        engine = get_engine()

    from recettes_index.models import recipe, book, author, book_author  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        logger.info("All tables dropped")
        await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables recreated")


async def close_connections() -> None:
    """
    Dispose of the global engine and forget the session factory.

    Useful for cleanup or before application exit.
    """
    global _engine, _SessionFactory

    _SessionFactory = None

    if _engine is not None:
        await _engine.dispose()
        _engine = None

    logger.info("Database connections closed")


async def initialize_app_database() -> None:
    """
    Initialize the application database.

    Main entry point at startup: creates the data directory and tables if
    they don't exist, then verifies the schema.
    """
    config = get_config()

    if config.uses_local_database:
        config.ensure_directories()
        if not config.database_exists():
            logger.info(f"Creating new database at: {config.database_path}")
        else:
            logger.info(f"Using existing database at: {config.database_path}")

    engine = get_engine()
    await init_database(engine)

    if await verify_database(engine):
        logger.info("Database initialized and verified successfully")
    else:
        logger.warning("Database verification failed - tables may not exist")
