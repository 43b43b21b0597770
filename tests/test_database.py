"""Tests for database engine and session management."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy import select, text
from sqlalchemy.ext.asyncio import async_sessionmaker

from recettes_index.models import Book
from recettes_index.services import database
from recettes_index.services.database import (
    create_database_engine,
    init_database,
    reset_database,
    session_scope,
    verify_database,
)


class TestEngine:
    """Tests for engine creation and schema initialization."""

    @pytest.mark.asyncio
    async def test_foreign_keys_enabled(self, test_engine):
        """SQLite connections enforce foreign keys."""
        async with test_engine.connect() as conn:
            result = await conn.execute(text("PRAGMA foreign_keys"))
            assert result.scalar() == 1

    @pytest.mark.asyncio
    async def test_verify_database(self, test_engine):
        """All four tables exist after init_database."""
        assert await verify_database(test_engine) is True

    @pytest.mark.asyncio
    async def test_verify_database_missing_tables(self):
        """An engine without tables fails verification."""
        engine = create_database_engine("sqlite+aiosqlite:///:memory:")
        try:
            assert await verify_database(engine) is False
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_init_database_is_idempotent(self, test_engine):
        await init_database(test_engine)
        assert await verify_database(test_engine) is True

    @pytest.mark.asyncio
    async def test_file_database(self, tmp_path):
        """A file-backed SQLite database is created on init."""
        db_file = tmp_path / "recettes.db"
        engine = create_database_engine(f"sqlite+aiosqlite:///{db_file.as_posix()}")
        try:
            await init_database(engine)
            assert db_file.exists()
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_reset_requires_confirmation(self, test_engine):
        with pytest.raises(ValueError):
            await reset_database(engine=test_engine)

    @pytest.mark.asyncio
    async def test_reset_drops_data(self, test_db, test_engine, sample_book):
        await reset_database(confirm=True, engine=test_engine)

        async with test_db() as session:
            result = await session.execute(select(Book))
            assert result.scalars().all() == []


class TestSessionScope:
    """Tests for the session_scope() context manager."""

    @pytest.mark.asyncio
    async def test_commits_on_success(self, test_db):
        async with session_scope(test_db) as session:
            session.add(Book(title="Larousse Gastronomique"))

        async with test_db() as session:
            result = await session.execute(select(Book.title))
            assert result.scalars().all() == ["Larousse Gastronomique"]

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self, test_db):
        with pytest.raises(RuntimeError):
            async with session_scope(test_db) as session:
                session.add(Book(title="Never saved"))
                await session.flush()
                raise RuntimeError("boom")

        async with test_db() as session:
            result = await session.execute(select(Book))
            assert result.scalars().all() == []

    @pytest.mark.asyncio
    async def test_defaults_to_global_factory(self, test_db):
        """Without an explicit factory the global one is used."""
        async with session_scope() as session:
            session.add(Book(title="Via global factory"))

        async with test_db() as session:
            result = await session.execute(select(Book.title))
            assert result.scalars().all() == ["Via global factory"]


class TestGlobalEngine:
    """Tests for the process-wide engine and factory."""

    @pytest.mark.asyncio
    async def test_initialize_app_database(self, tmp_path, monkeypatch):
        """Startup creates the configured database and its tables."""
        db_file = tmp_path / "app.db"
        db_url = f"sqlite+aiosqlite:///{db_file.as_posix()}"
        monkeypatch.setenv("RECETTES_INDEX_DATABASE_URL", db_url)
        monkeypatch.setattr(database, "_engine", None)
        monkeypatch.setattr(database, "_SessionFactory", None)

        try:
            await database.initialize_app_database()
            assert db_file.exists()
            assert isinstance(database.get_session_factory(), async_sessionmaker)
            assert database.get_engine() is database.get_engine()
        finally:
            await database.close_connections()

        assert database._engine is None
        assert database._SessionFactory is None

    @pytest.mark.asyncio
    async def test_close_connections_disposes_engine(self, monkeypatch):
        """The engine is disposed and the factory forgotten."""
        engine = MagicMock()
        engine.dispose = AsyncMock()
        monkeypatch.setattr(database, "_engine", engine)
        monkeypatch.setattr(database, "_SessionFactory", async_sessionmaker())

        await database.close_connections()

        engine.dispose.assert_awaited_once()
        assert database._engine is None
        assert database._SessionFactory is None

    @pytest.mark.asyncio
    async def test_close_connections_without_engine(self, monkeypatch):
        """Closing before anything was opened is a no-op."""
        monkeypatch.setattr(database, "_engine", None)
        monkeypatch.setattr(database, "_SessionFactory", None)

        await database.close_connections()

        assert database._engine is None
