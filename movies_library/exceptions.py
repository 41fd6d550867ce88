"""
Exception hierarchy for the movies library.

Every failure the controller raises derives from MoviesLibraryError and also
from the matching built-in exception, so callers can catch either.
"""

from typing import Any, Dict, List, Optional


TITLE_EMPTY_MESSAGE = "Title cannot be empty."
NO_MOVIES_FOUND_MESSAGE = "No movies found."


def movie_not_found_message(title: Optional[str]) -> str:
    return f"Movie with title '{title}' not found."


class MoviesLibraryError(Exception):
    """Base exception for the movies library"""
    pass


class MovieValidationError(MoviesLibraryError, ValueError):
    """
    Raised when a movie is missing a required field or a field is out of range.

    Attributes:
        errors: List of {"field": ..., "message": ...} dicts, one per violation
    """

    def __init__(self, errors: List[Dict[str, Any]]):
        self.errors = errors
        details = "; ".join(f"{error['field']}: {error['message']}" for error in errors)
        super().__init__(f"Movie validation failed: {details}")

    @property
    def fields(self) -> List[str]:
        return [error["field"] for error in self.errors]


class InvalidArgumentError(MoviesLibraryError, ValueError):
    """Raised when a caller-supplied argument violates a basic precondition"""
    pass


class MovieNotFoundError(MoviesLibraryError, LookupError):
    """Raised when a lookup the caller expects to succeed matches nothing"""
    pass


class InvalidOperationError(MoviesLibraryError, RuntimeError):
    """Raised when an operation cannot be carried out in the current store state"""
    pass


class MovieNotFoundOperationError(InvalidOperationError, MovieNotFoundError):
    """
    Raised when a delete targets a title that no movie has.

    Catchable both as InvalidOperationError and as MovieNotFoundError.
    """
    pass
