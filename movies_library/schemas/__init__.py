"""Movie schemas (pydantic)"""

from movies_library.schemas.movie import Movie, ValidatedMovie

__all__ = [
    "Movie",
    "ValidatedMovie",
]
