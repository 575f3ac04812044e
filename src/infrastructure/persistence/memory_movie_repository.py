"""In-memory movie repository."""

import copy
import logging

from src.domain.entities.movie import Movie
from src.domain.repositories.movie_repository import MovieRepository
from src.infrastructure.exceptions import UpdateError


logger = logging.getLogger(__name__)


class MemoryMovieRepository(MovieRepository):
    """Movie repository kept in process memory.

    Reads return copies, so callers cannot mutate the stored movies.
    """

    def __init__(self, movies: list[Movie] | None = None) -> None:
        self._movies: list[Movie] = []
        self._next_id = 1
        for movie in movies or []:
            self._movies.append(self._with_id(movie))

    def _with_id(self, movie: Movie) -> Movie:
        stored = copy.copy(movie)
        stored.id = self._next_id
        self._next_id += 1
        return stored

    async def get_by_id(self, entity_id: int) -> Movie | None:
        for movie in self._movies:
            if movie.id == entity_id:
                return copy.copy(movie)
        return None

    async def get_all(
        self, limit: int | None = None, offset: int | None = None
    ) -> list[Movie]:
        start = offset or 0
        end = start + limit if limit else None
        return [copy.copy(m) for m in self._movies[start:end]]

    async def create(self, entity: Movie) -> Movie:
        stored = self._with_id(entity)
        self._movies.append(stored)
        return copy.copy(stored)

    async def update(self, entity: Movie) -> Movie:
        if not entity.id:
            raise ValueError("Entity must have an ID to update")
        for index, movie in enumerate(self._movies):
            if movie.id == entity.id:
                self._movies[index] = copy.copy(entity)
                return copy.copy(entity)
        raise UpdateError("Movie not found", {"id": entity.id})

    async def delete(self, entity_id: int) -> bool:
        before = len(self._movies)
        self._movies = [m for m in self._movies if m.id != entity_id]
        return len(self._movies) < before

    async def count(self) -> int:
        return len(self._movies)

    async def clear_and_load(self, movies: list[Movie]) -> int:
        self._next_id = 1
        loaded = [self._with_id(movie) for movie in movies]
        self._movies = loaded
        logger.info(f"Loaded {len(loaded)} movies into memory")
        return len(loaded)

    async def get_winners(self) -> list[Movie]:
        winners = [m for m in self._movies if m.winner]
        return [copy.copy(m) for m in sorted(winners, key=lambda m: m.year)]
