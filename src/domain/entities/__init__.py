"""Domain entities."""

from src.domain.entities.base import BaseEntity
from src.domain.entities.movie import Movie


__all__ = ["BaseEntity", "Movie"]
