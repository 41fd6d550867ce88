"""Tests for the exception hierarchy and contract messages."""

import pytest

from movies_library.exceptions import (
    InvalidArgumentError,
    InvalidOperationError,
    MovieNotFoundError,
    MovieNotFoundOperationError,
    MoviesLibraryError,
    MovieValidationError,
    NO_MOVIES_FOUND_MESSAGE,
    TITLE_EMPTY_MESSAGE,
    movie_not_found_message,
)


class TestExceptionHierarchy:

    @pytest.mark.parametrize(
        "exc_class, builtin",
        [
            (InvalidArgumentError, ValueError),
            (MovieValidationError, ValueError),
            (MovieNotFoundError, LookupError),
            (InvalidOperationError, RuntimeError),
        ],
    )
    def test_library_errors_extend_builtins(self, exc_class, builtin):
        assert issubclass(exc_class, MoviesLibraryError)
        assert issubclass(exc_class, builtin)

    def test_delete_miss_is_both_not_found_and_invalid_operation(self):
        exc = MovieNotFoundOperationError(movie_not_found_message("random title"))

        assert isinstance(exc, MovieNotFoundError)
        assert isinstance(exc, InvalidOperationError)
        assert isinstance(exc, LookupError)
        assert isinstance(exc, RuntimeError)
        assert str(exc) == "Movie with title 'random title' not found."

    def test_str_is_plain_message(self):
        """LookupError subclasses must not quote the message like KeyError does."""
        assert str(MovieNotFoundError(NO_MOVIES_FOUND_MESSAGE)) == "No movies found."


class TestMessages:

    def test_title_empty_message(self):
        assert TITLE_EMPTY_MESSAGE == "Title cannot be empty."

    def test_movie_not_found_message(self):
        assert movie_not_found_message("random title") == "Movie with title 'random title' not found."

    def test_validation_error_keeps_errors(self):
        errors = [{"field": "rating", "message": "Field required"}]

        exc = MovieValidationError(errors)

        assert exc.errors == errors
        assert exc.fields == ["rating"]
        assert str(exc) == "Movie validation failed: rating: Field required"
