"""
Movies repository backed by async SQLAlchemy.

Provides the data access layer for MovieDocument. Performs no validation:
the controller checks every record before it gets here.
"""

from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from movies_library.core.config import settings
from movies_library.core.logging_config import get_logger, log_with_context
from movies_library.exceptions import MovieNotFoundError, movie_not_found_message
from movies_library.interfaces.movies_repository import IMoviesRepository
from movies_library.models.movie import MovieDocument
from movies_library.schemas.movie import Movie

logger = get_logger(__name__)

# Insertion order; documents sharing a timestamp fall back to their id
STORE_ORDER = (MovieDocument.created_at, MovieDocument.id)


class MoviesRepository(IMoviesRepository):
    """
    Repository for movie document access.

    Every operation opens its own session and transaction, so one call is
    one atomic store operation and concurrent calls never share a session.

    Attributes:
        session_factory: Factory producing AsyncSession instances bound to
            the movie store
        case_sensitive_search: Whether fragment search respects case
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        case_sensitive_search: Optional[bool] = None
    ):
        """
        Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
            case_sensitive_search: Override settings.search_case_sensitive
        """
        self.session_factory = session_factory
        if case_sensitive_search is None:
            case_sensitive_search = settings.search_case_sensitive
        self.case_sensitive_search = case_sensitive_search

    @staticmethod
    def _first_by_title(title: str):
        return (
            select(MovieDocument)
            .where(MovieDocument.title == title)
            .order_by(*STORE_ORDER)
            .limit(1)
        )

    @staticmethod
    def _search_statement(session: AsyncSession, fragment: str):
        if session.get_bind().dialect.name == "sqlite":
            # SQLite lower() only folds ASCII; casefold() is registered per connection
            condition = func.casefold(MovieDocument.title).contains(
                fragment.casefold(), autoescape=True
            )
        else:
            condition = MovieDocument.title.icontains(fragment, autoescape=True)
        return select(MovieDocument).where(condition).order_by(*STORE_ORDER)

    async def insert_async(self, movie: Movie) -> None:
        """
        Insert a new movie document.

        Args:
            movie: Movie to store (already validated)

        Example:
            >>> await repo.insert_async(Movie(title="Taxi", director="Gérard Pirès",
            ...     year_released=1998, genre="Action", duration=86, rating=7.0))
        """
        async with self.session_factory() as session:
            async with session.begin():
                document = MovieDocument(**movie.model_dump())
                session.add(document)
                await session.flush()
                movie_id = document.id

        log_with_context(
            logger, "debug", "Movie document inserted",
            operation="insert", title=movie.title, movie_id=movie_id,
        )

    async def delete_async(self, title: str) -> None:
        """
        Delete the first movie document with the given title.

        Args:
            title: Exact title

        Raises:
            MovieNotFoundError: If no document has that title
        """
        async with self.session_factory() as session:
            async with session.begin():
                result = await session.execute(self._first_by_title(title))
                document = result.scalar_one_or_none()

                if document is None:
                    raise MovieNotFoundError(movie_not_found_message(title))

                movie_id = document.id
                await session.delete(document)

        log_with_context(
            logger, "debug", "Movie document deleted",
            operation="delete", title=title, movie_id=movie_id,
        )

    async def get_all_async(self) -> List[Movie]:
        """
        Get all movie documents.

        Returns:
            List of movies ordered by insertion time
        """
        stmt = select(MovieDocument).order_by(*STORE_ORDER)

        async with self.session_factory() as session:
            result = await session.execute(stmt)
            return [Movie.model_validate(document) for document in result.scalars().all()]

    async def get_by_title_async(self, title: str) -> Optional[Movie]:
        """
        Retrieve the first movie with an exact title.

        Args:
            title: Exact title

        Returns:
            Movie if found, None otherwise
        """
        async with self.session_factory() as session:
            result = await session.execute(self._first_by_title(title))
            document = result.scalar_one_or_none()

            if document is None:
                return None
            return Movie.model_validate(document)

    async def search_by_title_fragment_async(self, fragment: str) -> List[Movie]:
        """
        Find movies whose title contains a fragment.

        Args:
            fragment: Literal substring; LIKE wildcards are escaped

        Returns:
            Matching movies ordered by insertion time, possibly empty
        """
        async with self.session_factory() as session:
            result = await session.execute(self._search_statement(session, fragment))
            movies = [Movie.model_validate(document) for document in result.scalars().all()]

        # The SQL filter ignores case, so exact-case matching is finished here
        if self.case_sensitive_search:
            movies = [movie for movie in movies if fragment in movie.title]

        log_with_context(
            logger, "debug", "Movie documents searched",
            operation="search", fragment=fragment, count=len(movies),
        )
        return movies

    async def update_async(self, movie: Movie) -> bool:
        """
        Replace the fields of the first movie with the same title.

        Args:
            movie: New values, matched on movie.title

        Returns:
            True if a document was replaced, False if none matched

        Note:
            A missing title is a no-op; nothing is inserted.
        """
        async with self.session_factory() as session:
            async with session.begin():
                result = await session.execute(self._first_by_title(movie.title))
                document = result.scalar_one_or_none()

                if document is None:
                    return False

                for field, value in movie.model_dump().items():
                    setattr(document, field, value)
                movie_id = document.id

        log_with_context(
            logger, "debug", "Movie document replaced",
            operation="update", title=movie.title, movie_id=movie_id,
        )
        return True
