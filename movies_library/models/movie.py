"""
Movie document model.

One row per stored movie. Title is the natural key callers address documents
by, but it is deliberately not unique: the store keeps whatever it is given
and lookups resolve to the first match in store order.
"""

from sqlalchemy import Column, Float, Index, Integer, String

from movies_library.models.base import Base, ModelMixin, TimestampMixin, UUIDMixin


class MovieDocument(Base, UUIDMixin, TimestampMixin, ModelMixin):
    """
    Stored movie document.

    Attributes:
        id: UUID primary key (document id)
        title: Movie title, natural lookup key
        director: Director name
        year_released: Release year
        genre: Genre label
        duration: Running time in minutes
        rating: Rating on a 0-10 scale
        created_at: When the document was inserted
        updated_at: When the document was last replaced
    """

    __tablename__ = "movies"

    title = Column(String(255), nullable=False, doc="Movie title")
    director = Column(String(255), nullable=False, doc="Director name")
    year_released = Column(Integer, nullable=False, doc="Release year")
    genre = Column(String(100), nullable=False, doc="Genre label")
    duration = Column(Integer, nullable=False, doc="Running time in minutes")
    rating = Column(Float, nullable=False, doc="Rating on a 0-10 scale")

    __table_args__ = (
        Index("idx_movies_title", "title"),
    )
