"""Domain repository interfaces."""

from src.domain.repositories.base import BaseRepository
from src.domain.repositories.movie_repository import MovieRepository


__all__ = ["BaseRepository", "MovieRepository"]
