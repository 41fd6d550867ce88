"""
Dependency wiring helpers.

Builds the default repository and controller for host applications that
do not assemble them by hand.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from movies_library.controllers.movies_library import MoviesLibraryController
from movies_library.interfaces.movies_repository import IMoviesRepository
from movies_library.repositories.movies import MoviesRepository


def get_movies_repository(
    session_factory: Optional[async_sessionmaker[AsyncSession]] = None,
) -> MoviesRepository:
    """
    Build a MoviesRepository.

    Args:
        session_factory: Factory for the target store; defaults to the
            global factory from movies_library.core.database

    Returns:
        MoviesRepository bound to the store
    """
    if session_factory is None:
        from movies_library.core.database import async_session_maker
        session_factory = async_session_maker

    return MoviesRepository(session_factory)


def get_movies_library_controller(
    repository: Optional[IMoviesRepository] = None,
) -> MoviesLibraryController:
    """
    Build a MoviesLibraryController.

    Args:
        repository: Repository to delegate to; defaults to
            get_movies_repository()

    Returns:
        MoviesLibraryController instance

    Example:
        controller = get_movies_library_controller()
        await controller.add_async(movie)
    """
    if repository is None:
        repository = get_movies_repository()

    return MoviesLibraryController(repository)
