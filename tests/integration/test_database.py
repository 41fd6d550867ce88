"""
Tests for the movie store bootstrap helpers and dependency wiring.
"""

import pytest
from sqlalchemy import inspect, text

from movies_library.controllers import MoviesLibraryController
from movies_library.core.database import clear_database, init_db
from movies_library.dependencies import get_movies_library_controller, get_movies_repository
from movies_library.repositories import InMemoryMoviesRepository, MoviesRepository


class TestBootstrap:

    @pytest.mark.anyio
    async def test_init_db_creates_movies_table(self, engine):
        async with engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

        assert "movies" in tables

    @pytest.mark.anyio
    async def test_sqlite_connection_folds_unicode_case(self, engine):
        async with engine.connect() as conn:
            folded = (await conn.execute(text("SELECT casefold('ÉMILE')"))).scalar_one()

        assert folded == "émile"

    @pytest.mark.anyio
    async def test_init_db_is_idempotent(self, engine, session_factory, taxi):
        repo = MoviesRepository(session_factory)
        await repo.insert_async(taxi)

        await init_db(engine)

        assert len(await repo.get_all_async()) == 1

    @pytest.mark.anyio
    async def test_clear_database_removes_all_documents(self, engine, session_factory, taxi, baguette):
        """
        Test clearing empties the collection but keeps it usable.

        Arrange: Store with two movies
        Act: clear_database
        Assert: No movies left, inserts still work
        """
        # Arrange
        repo = MoviesRepository(session_factory)
        await repo.insert_async(taxi)
        await repo.insert_async(baguette)

        # Act
        await clear_database(engine)

        # Assert
        assert await repo.get_all_async() == []
        await repo.insert_async(taxi)
        assert len(await repo.get_all_async()) == 1


class TestDependencies:

    def test_default_repository_uses_global_factory(self):
        from movies_library.core.database import async_session_maker

        repo = get_movies_repository()

        assert isinstance(repo, MoviesRepository)
        assert repo.session_factory is async_session_maker

    @pytest.mark.anyio
    async def test_repository_with_custom_factory(self, session_factory):
        assert get_movies_repository(session_factory).session_factory is session_factory

    def test_controller_with_given_repository(self):
        repository = InMemoryMoviesRepository()

        controller = get_movies_library_controller(repository)

        assert isinstance(controller, MoviesLibraryController)
        assert controller.repository is repository

    def test_controller_defaults_to_sqlalchemy_repository(self):
        controller = get_movies_library_controller()

        assert isinstance(controller.repository, MoviesRepository)
