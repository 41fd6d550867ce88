"""
Pytest configuration and shared fixtures.

This module provides:
- Environment variable setup for tests
- A fresh, isolated movie store per test
- Repository fixtures covering every IMoviesRepository implementation
- Sample movies
"""

import os

import pytest


# Set test environment variables BEFORE any imports
# This must happen first to ensure settings load with test values
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["SEARCH_CASE_SENSITIVE"] = "false"


@pytest.fixture
def anyio_backend():
    """
    Configure anyio backend for async tests.

    Returns:
        str: Backend name ("asyncio")
    """
    return "asyncio"


@pytest.fixture(scope="function")
async def engine():
    """
    Provide an empty in-memory movie store.

    Creates the movies table before the test and disposes the engine after,
    so every test starts from a clean collection.
    """
    from movies_library.core.database import get_async_engine, init_db, close_db

    test_engine = get_async_engine("sqlite+aiosqlite:///:memory:")
    await init_db(test_engine)

    yield test_engine

    await close_db(test_engine)


@pytest.fixture
def session_factory(engine):
    """Session factory bound to the per-test store."""
    from movies_library.core.database import create_session_factory

    return create_session_factory(engine)


@pytest.fixture(params=["sqlalchemy", "in_memory"])
def repository(request, session_factory):
    """
    Provide each repository implementation in turn.

    Tests using this fixture run once against MoviesRepository and once
    against InMemoryMoviesRepository.
    """
    from movies_library.repositories import InMemoryMoviesRepository, MoviesRepository

    if request.param == "sqlalchemy":
        return MoviesRepository(session_factory, case_sensitive_search=False)
    return InMemoryMoviesRepository(case_sensitive_search=False)


@pytest.fixture
def controller(repository):
    """Controller wired to the parametrised repository."""
    from movies_library.controllers import MoviesLibraryController

    return MoviesLibraryController(repository)


@pytest.fixture
def make_movie():
    """
    Factory for valid movies.

    Returns:
        Callable accepting field overrides and returning a Movie
    """
    from movies_library.schemas.movie import Movie

    def _make_movie(**overrides):
        fields = {
            "title": "Test Movie",
            "director": "Test Director",
            "year_released": 2022,
            "genre": "Action",
            "duration": 86,
            "rating": 7.5,
        }
        fields.update(overrides)
        return Movie(**fields)

    return _make_movie


@pytest.fixture
def taxi(make_movie):
    return make_movie(
        title="Taxi",
        director="French Guy",
        year_released=2008,
        genre="Action",
        duration=100,
        rating=8,
    )


@pytest.fixture
def baguette(make_movie):
    return make_movie(
        title="Baguette",
        director="Same French Guy",
        year_released=2012,
        genre="Action",
        duration=116,
        rating=6.5,
    )
