"""
In-memory movies repository.

A list-backed IMoviesRepository with the same semantics as MoviesRepository,
for tests and for callers that do not need persistence.
"""

from typing import List, Optional

from movies_library.core.config import settings
from movies_library.core.logging_config import get_logger, log_with_context
from movies_library.exceptions import MovieNotFoundError, movie_not_found_message
from movies_library.interfaces.movies_repository import IMoviesRepository
from movies_library.schemas.movie import Movie

logger = get_logger(__name__)


class InMemoryMoviesRepository(IMoviesRepository):
    """
    Movie store kept in a Python list, in insertion order.

    Movies are copied on the way in and on the way out so that callers
    mutating their objects never change stored state.
    """

    def __init__(self, case_sensitive_search: Optional[bool] = None):
        if case_sensitive_search is None:
            case_sensitive_search = settings.search_case_sensitive
        self.case_sensitive_search = case_sensitive_search
        self._documents: List[Movie] = []

    def _index_of(self, title: str) -> Optional[int]:
        for index, document in enumerate(self._documents):
            if document.title == title:
                return index
        return None

    def _contains(self, title: Optional[str], fragment: str) -> bool:
        if title is None:
            return False
        if self.case_sensitive_search:
            return fragment in title
        return fragment.casefold() in title.casefold()

    async def insert_async(self, movie: Movie) -> None:
        self._documents.append(movie.model_copy())
        log_with_context(
            logger, "debug", "Movie document inserted",
            operation="insert", title=movie.title,
        )

    async def delete_async(self, title: str) -> None:
        index = self._index_of(title)
        if index is None:
            raise MovieNotFoundError(movie_not_found_message(title))

        del self._documents[index]
        log_with_context(
            logger, "debug", "Movie document deleted",
            operation="delete", title=title,
        )

    async def get_all_async(self) -> List[Movie]:
        return [document.model_copy() for document in self._documents]

    async def get_by_title_async(self, title: str) -> Optional[Movie]:
        index = self._index_of(title)
        if index is None:
            return None
        return self._documents[index].model_copy()

    async def search_by_title_fragment_async(self, fragment: str) -> List[Movie]:
        return [
            document.model_copy()
            for document in self._documents
            if self._contains(document.title, fragment)
        ]

    async def update_async(self, movie: Movie) -> bool:
        index = self._index_of(movie.title)
        if index is None:
            return False

        self._documents[index] = movie.model_copy()
        log_with_context(
            logger, "debug", "Movie document replaced",
            operation="update", title=movie.title,
        )
        return True

    def __len__(self) -> int:
        return len(self._documents)
