"""
Movies library controller.

Validates input, enforces argument preconditions, delegates to an
IMoviesRepository and translates "not found" outcomes into the library's
exception types. Holds no state besides the repository handle.
"""

from typing import List, Optional

from movies_library.core.logging_config import get_logger, log_with_context
from movies_library.exceptions import (
    InvalidArgumentError,
    MovieNotFoundError,
    MovieNotFoundOperationError,
    MovieValidationError,
    NO_MOVIES_FOUND_MESSAGE,
    TITLE_EMPTY_MESSAGE,
    movie_not_found_message,
)
from movies_library.interfaces.movies_library_controller import IMoviesLibraryController
from movies_library.interfaces.movies_repository import IMoviesRepository
from movies_library.schemas.movie import Movie
from movies_library.validation import validate_movie

logger = get_logger(__name__)


class MoviesLibraryController(IMoviesLibraryController):
    """
    Validation and orchestration layer over a movies repository.

    Attributes:
        repository: Store the controller delegates to
    """

    def __init__(self, repository: IMoviesRepository):
        """
        Initialize controller with a repository.

        Args:
            repository: Any IMoviesRepository implementation
        """
        self.repository = repository

    def _validate(self, movie: Movie, operation: str) -> None:
        try:
            validate_movie(movie)
        except MovieValidationError as e:
            log_with_context(
                logger, "warning", "Movie rejected by validation",
                operation=operation,
                title=getattr(movie, "title", None),
                fields=e.fields,
            )
            raise

    async def add_async(self, movie: Movie) -> None:
        """
        Validate and insert a movie.

        Args:
            movie: Movie to add

        Raises:
            MovieValidationError: If any field is missing or out of range;
                the repository is not called
        """
        self._validate(movie, "add")
        await self.repository.insert_async(movie)
        log_with_context(logger, "info", "Movie added", operation="add", title=movie.title)

    async def delete_async(self, title: Optional[str]) -> None:
        """
        Delete the movie with the given title.

        Args:
            title: Exact title

        Raises:
            InvalidArgumentError: If title is None, empty or whitespace
            MovieNotFoundOperationError: If no movie has that title; it is
                both an InvalidOperationError and a MovieNotFoundError
        """
        if title is None or not title.strip():
            raise InvalidArgumentError(TITLE_EMPTY_MESSAGE)

        try:
            await self.repository.delete_async(title)
        except MovieNotFoundError as e:
            log_with_context(
                logger, "warning", "Delete target not found",
                operation="delete", title=title,
            )
            raise MovieNotFoundOperationError(movie_not_found_message(title)) from e

        log_with_context(logger, "info", "Movie deleted", operation="delete", title=title)

    async def get_all_async(self) -> List[Movie]:
        return await self.repository.get_all_async()

    async def get_by_title(self, title: str) -> Optional[Movie]:
        return await self.repository.get_by_title_async(title)

    async def search_by_title_fragment_async(self, fragment: str) -> List[Movie]:
        """
        Find movies whose title contains the fragment.

        Unlike get_by_title(), an empty result is an error here.

        Raises:
            MovieNotFoundError: If nothing matches ("No movies found.")
        """
        movies = await self.repository.search_by_title_fragment_async(fragment)

        if not movies:
            log_with_context(
                logger, "warning", "No movies match fragment",
                operation="search", fragment=fragment,
            )
            raise MovieNotFoundError(NO_MOVIES_FOUND_MESSAGE)

        return movies

    async def update_async(self, movie: Movie) -> None:
        """
        Validate a movie and replace the stored movie with the same title.

        Args:
            movie: New values, matched on movie.title

        Raises:
            MovieValidationError: If any field is missing or out of range;
                the repository is not called
        """
        self._validate(movie, "update")
        replaced = await self.repository.update_async(movie)

        if not replaced:
            log_with_context(
                logger, "warning", "No movie to update",
                operation="update", title=movie.title,
            )
            return

        log_with_context(logger, "info", "Movie updated", operation="update", title=movie.title)
