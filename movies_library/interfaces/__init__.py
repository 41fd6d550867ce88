"""Interface contracts (ABCs)"""

from movies_library.interfaces.movies_repository import IMoviesRepository
from movies_library.interfaces.movies_library_controller import IMoviesLibraryController

__all__ = [
    'IMoviesRepository',
    'IMoviesLibraryController',
]
