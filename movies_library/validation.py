"""
Movie validation.

validate_movie() is the single rule check shared by the add and update
paths. It has no side effects: it either returns the validated copy or
raises MovieValidationError describing every violated field.
"""

from pydantic import ValidationError

from movies_library.exceptions import MovieValidationError
from movies_library.schemas.movie import Movie, ValidatedMovie


def validate_movie(movie: Movie | None) -> ValidatedMovie:
    """
    Check a movie against the data model rules.

    Args:
        movie: Caller-supplied movie record

    Returns:
        Immutable ValidatedMovie with the same field values

    Raises:
        MovieValidationError: If movie is None, a required field is
            missing, or a field is out of range
    """
    if movie is None:
        raise MovieValidationError([{"field": "movie", "message": "Movie is required"}])

    # None means "not provided", so drop it to get pydantic's "Field required"
    try:
        return ValidatedMovie.model_validate(movie.model_dump(exclude_none=True))
    except ValidationError as e:
        raise MovieValidationError([
            {
                "field": ".".join(str(part) for part in error["loc"]) or "movie",
                "message": error["msg"],
            }
            for error in e.errors()
        ]) from e


def is_valid_movie(movie: Movie | None) -> bool:
    """Return True if validate_movie() would accept the movie."""
    try:
        validate_movie(movie)
    except MovieValidationError:
        return False
    return True
