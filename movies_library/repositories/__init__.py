"""
Repository layer for data access.

Provides data access abstractions following the Repository pattern,
isolating store access from validation and orchestration.
"""

from movies_library.repositories.in_memory import InMemoryMoviesRepository
from movies_library.repositories.movies import MoviesRepository

__all__ = [
    "InMemoryMoviesRepository",
    "MoviesRepository",
]
