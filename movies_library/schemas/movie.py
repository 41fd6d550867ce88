from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


MIN_YEAR_RELEASED = 1889
MAX_YEAR_RELEASED = 2100


class Movie(BaseModel):
    """
    Movie record exchanged with callers.

    Every field is optional so that a caller can build an incomplete record;
    whether it may be stored is decided by validate_movie().

    Attributes:
        title: Movie title, the natural key for lookup/update/delete
        director: Director name
        year_released: Release year
        genre: Genre label
        duration: Running time in minutes
        rating: Rating on a 0-10 scale
    """
    model_config = ConfigDict(from_attributes=True)

    title: Optional[str] = None
    director: Optional[str] = None
    year_released: Optional[int] = None
    genre: Optional[str] = None
    duration: Optional[int] = None
    rating: Optional[float] = None


class ValidatedMovie(BaseModel):
    """
    Rule set a movie must satisfy before it reaches the store.

    Attributes:
        title: Required, non-blank, at most 255 characters
        director: Required, non-blank, at most 255 characters
        year_released: Required, 1889-2100
        genre: Required, non-blank, at most 100 characters
        duration: Required, at least one minute
        rating: Required, 0-10
    """
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, max_length=255, description="Movie title")
    director: str = Field(..., min_length=1, max_length=255, description="Director name")
    year_released: int = Field(
        ...,
        ge=MIN_YEAR_RELEASED,
        le=MAX_YEAR_RELEASED,
        description="Release year (films predate 1889 only as experiments)"
    )
    genre: str = Field(..., min_length=1, max_length=100, description="Genre label")
    duration: int = Field(..., ge=1, description="Running time in minutes")
    rating: float = Field(..., ge=0, le=10, allow_inf_nan=False, description="Rating on a 0-10 scale")

    @field_validator("title", "director", "genre")
    @classmethod
    def reject_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v
