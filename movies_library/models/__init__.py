"""
SQLAlchemy ORM models for the movies library.

Import models from this module to ensure they're registered with SQLAlchemy.
"""

from movies_library.models.base import Base, TimestampMixin, UUIDMixin, ModelMixin
from movies_library.models.movie import MovieDocument

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "ModelMixin",
    # Models
    "MovieDocument",
]
