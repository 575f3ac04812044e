"""Movie repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.movie import Movie
from src.domain.repositories.movie_repository import MovieRepository
from src.infrastructure.exceptions import DatabaseError
from src.infrastructure.persistence.base_repository_impl import BaseRepositoryImpl
from src.infrastructure.persistence.sqlalchemy_models import MovieModel


logger = logging.getLogger(__name__)


class MovieRepositoryImpl(BaseRepositoryImpl[Movie], MovieRepository):
    """Movie repository implementation using SQLAlchemy."""

    def __init__(self, session: AsyncSession):
        """Initialize repository with database session.

        Args:
            session: AsyncSession for database operations
        """
        super().__init__(
            session=session,
            entity_class=Movie,
            model_class=MovieModel,
        )

    async def clear_and_load(self, movies: list[Movie]) -> int:
        """Replace every stored movie with the given list.

        Runs inside the caller's transaction; the session commits or rolls
        back both the delete and the inserts together.

        Args:
            movies: Movies to store

        Returns:
            Number of movies stored
        """
        try:
            await self.session.execute(delete(MovieModel))
            self.session.add_all([self._to_model(movie) for movie in movies])
            await self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Database error loading movies: {e}")
            raise DatabaseError(
                "Failed to load movies", {"count": len(movies), "error": str(e)}
            ) from e

        logger.info(f"Loaded {len(movies)} movies")
        return len(movies)

    async def get_winners(self) -> list[Movie]:
        """Get winning movies ordered by year ascending."""
        query = (
            select(MovieModel)
            .where(MovieModel.winner.is_(True))
            .order_by(MovieModel.year, MovieModel.id)
        )
        try:
            result = await self.session.execute(query)
        except SQLAlchemyError as e:
            logger.error(f"Database error getting winners: {e}")
            raise DatabaseError("Failed to get winners", {"error": str(e)}) from e

        return [self._to_entity(model) for model in result.scalars().all()]

    def _to_entity(self, model: MovieModel) -> Movie:
        return Movie(
            id=model.id,
            year=model.year,
            title=model.title,
            studios=model.studios,
            producers=model.producers,
            winner=model.winner,
        )

    def _to_model(self, entity: Movie) -> MovieModel:
        return MovieModel(
            id=entity.id,
            year=entity.year,
            title=entity.title,
            studios=entity.studios,
            producers=entity.producers,
            winner=entity.winner,
        )

    def _update_model(self, model: MovieModel, entity: Movie) -> None:
        model.year = entity.year
        model.title = entity.title
        model.studios = entity.studios
        model.producers = entity.producers
        model.winner = entity.winner
