"""
Movies Repository Interface (IMoviesRepository)

Abstract base class defining the contract for movie persistence.
Exactly six operations: insert, delete-by-title, find-all, find-by-title,
find-by-title-fragment and replace-by-title.

Implementation guide:
- All methods must be async
- No validation: callers hand over records that are already checked
- Title matches resolve to the first document in store order
- Each call is independent; no state is held between calls
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from movies_library.schemas.movie import Movie


class IMoviesRepository(ABC):
    """
    Abstract interface for the movie collection.

    Implementations may be backed by any document-oriented or relational
    store, or by memory for tests.
    """

    @abstractmethod
    async def insert_async(self, movie: Movie) -> None:
        """
        Append a new movie document.

        Args:
            movie: Movie to store

        Note:
            No duplicate-title check is performed.
        """
        pass

    @abstractmethod
    async def delete_async(self, title: str) -> None:
        """
        Remove the first movie whose title equals the given value.

        Args:
            title: Exact title to delete

        Raises:
            MovieNotFoundError: If no movie has that title. The message is
                "Movie with title '{title}' not found."
        """
        pass

    @abstractmethod
    async def get_all_async(self) -> List[Movie]:
        """
        Get every stored movie in store order.

        Returns:
            List of movies, empty when the store is empty
        """
        pass

    @abstractmethod
    async def get_by_title_async(self, title: str) -> Optional[Movie]:
        """
        Get the first movie whose title equals the given value.

        Args:
            title: Exact title to look up

        Returns:
            Movie if found, None otherwise
        """
        pass

    @abstractmethod
    async def search_by_title_fragment_async(self, fragment: str) -> List[Movie]:
        """
        Get all movies whose title contains the fragment.

        Args:
            fragment: Literal substring to look for

        Returns:
            Matching movies in store order, empty when nothing matches

        Note:
            Containment is literal; characters such as '%' or '_' carry no
            wildcard meaning. Case sensitivity is an implementation setting.
        """
        pass

    @abstractmethod
    async def update_async(self, movie: Movie) -> bool:
        """
        Replace every field of the first movie with the same title.

        Args:
            movie: New field values, matched on movie.title

        Returns:
            True if a document was replaced, False if none matched
            (nothing is inserted)
        """
        pass
