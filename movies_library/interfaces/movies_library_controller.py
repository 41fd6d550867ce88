"""
Movies Library Controller Interface (IMoviesLibraryController)

Abstract base class for the validation and orchestration layer that sits
between callers and IMoviesRepository.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from movies_library.schemas.movie import Movie


class IMoviesLibraryController(ABC):
    """
    Abstract interface for validated access to the movie catalog.
    """

    @abstractmethod
    async def add_async(self, movie: Movie) -> None:
        """
        Validate and store a new movie.

        Raises:
            MovieValidationError: If the movie breaks a data model rule
        """
        pass

    @abstractmethod
    async def delete_async(self, title: Optional[str]) -> None:
        """
        Delete a movie by title.

        Raises:
            InvalidArgumentError: If title is None, empty or whitespace
            MovieNotFoundOperationError: If no movie has that title (an
                InvalidOperationError and a MovieNotFoundError)
        """
        pass

    @abstractmethod
    async def get_all_async(self) -> List[Movie]:
        """Get every stored movie. Never fails."""
        pass

    @abstractmethod
    async def get_by_title(self, title: str) -> Optional[Movie]:
        """Get a movie by exact title, or None. Never fails."""
        pass

    @abstractmethod
    async def search_by_title_fragment_async(self, fragment: str) -> List[Movie]:
        """
        Find movies whose title contains the fragment.

        Raises:
            MovieNotFoundError: If nothing matches ("No movies found.")
        """
        pass

    @abstractmethod
    async def update_async(self, movie: Movie) -> None:
        """
        Validate and replace a movie matched by title.

        Raises:
            MovieValidationError: If the movie breaks a data model rule
        """
        pass
