"""
Movies library: validated async access to a catalog of movie documents.
"""

from movies_library.controllers.movies_library import MoviesLibraryController
from movies_library.exceptions import (
    InvalidArgumentError,
    InvalidOperationError,
    MovieNotFoundOperationError,
    MovieNotFoundError,
    MoviesLibraryError,
    MovieValidationError,
)
from movies_library.interfaces import IMoviesLibraryController, IMoviesRepository
from movies_library.repositories import InMemoryMoviesRepository, MoviesRepository
from movies_library.schemas.movie import Movie
from movies_library.validation import validate_movie

__version__ = "1.0.0"

__all__ = [
    "IMoviesLibraryController",
    "IMoviesRepository",
    "InMemoryMoviesRepository",
    "InvalidArgumentError",
    "InvalidOperationError",
    "Movie",
    "MovieNotFoundError",
    "MovieNotFoundOperationError",
    "MoviesLibraryController",
    "MoviesLibraryError",
    "MoviesRepository",
    "MovieValidationError",
    "validate_movie",
]
