"""Movie repository interface."""

from abc import abstractmethod

from src.domain.entities.movie import Movie
from src.domain.repositories.base import BaseRepository


class MovieRepository(BaseRepository[Movie]):
    """Repository interface for movies.

    Acts as the winner source of the interval calculation.
    """

    @abstractmethod
    async def clear_and_load(self, movies: list[Movie]) -> int:
        """Replace every stored movie with the given list.

        Args:
            movies: Movies to store

        Returns:
            Number of movies stored
        """
        pass

    @abstractmethod
    async def get_winners(self) -> list[Movie]:
        """Get winning movies only.

        Returns:
            Winning movies ordered by year ascending
        """
        pass
