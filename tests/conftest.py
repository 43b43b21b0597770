"""Pytest configuration and fixtures for Recettes Index tests."""

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import async_sessionmaker

from recettes_index.models import Author, Book, Recipe
from recettes_index.services.database import create_database_engine, init_database
from recettes_index.utils.config import reset_config

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Keep tests independent from the developer's environment."""
    monkeypatch.delenv("RECETTES_INDEX_ENV", raising=False)
    monkeypatch.delenv("RECETTES_INDEX_DATABASE_URL", raising=False)
    monkeypatch.delenv("RECETTES_INDEX_SQL_ECHO", raising=False)
    reset_config()
    yield
    reset_config()


@pytest_asyncio.fixture
async def test_engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_database_engine(TEST_DATABASE_URL, echo=False)
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine):
    """Provide a clean test database for each test function.

    This fixture:
    1. Builds a session factory over the in-memory engine
    2. Patches the global session factory so repositories built without
       an explicit factory use it too
    3. Yields the factory (the backend client handed to repositories)
    """
    session_factory = async_sessionmaker(bind=test_engine, expire_on_commit=False)

    import recettes_index.services.database as db_module

    original_get_session_factory = db_module.get_session_factory
    db_module.get_session_factory = lambda: session_factory

    yield session_factory

    db_module.get_session_factory = original_get_session_factory


@pytest_asyncio.fixture
async def empty_db(test_db, test_engine):
    """Database whose tables were never created, for backend failure tests."""
    from recettes_index.models.base import Base

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    yield test_db


@pytest_asyncio.fixture
async def sample_book(test_db):
    """A persisted book without authors."""
    async with test_db() as session:
        book = Book(title="Plenty")
        session.add(book)
        await session.commit()
    return book


@pytest_asyncio.fixture
async def sample_authors(test_db):
    """Two persisted authors, one without a last name."""
    async with test_db() as session:
        authors = [
            Author(first_name="Yotam", last_name="Ottolenghi"),
            Author(first_name="Sami"),
        ]
        session.add_all(authors)
        await session.commit()
    return authors


@pytest_asyncio.fixture
async def sample_recipe(test_db, sample_book):
    """A persisted recipe taken from sample_book."""
    async with test_db() as session:
        recipe = Recipe(name="Shakshuka", rating=4, book_id=sample_book.id, book_page=82)
        session.add(recipe)
        await session.commit()
    return recipe
