"""Use case factory.

Chooses the movie repository backend from settings and wires the use cases
on top of it. Both the CLI and the HTTP app build their use cases here.
"""

import logging

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from src.application.usecases.calculate_award_intervals_usecase import (
    CalculateAwardIntervalsUseCase,
)
from src.application.usecases.upload_movies_usecase import UploadMoviesUseCase
from src.domain.repositories.movie_repository import MovieRepository
from src.infrastructure.config.async_database import AsyncDatabase
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.importers.movie_csv_parser import MovieCsvParser
from src.infrastructure.persistence.memory_movie_repository import (
    MemoryMovieRepository,
)
from src.infrastructure.persistence.movie_repository_impl import MovieRepositoryImpl


logger = logging.getLogger(__name__)


class UseCaseFactory:
    """Builds repositories and use cases for one configuration.

    With the `memory` backend, every repository handed out shares one
    in-process store. With the `database` backend, each repository is bound
    to its own session, committed when the `movie_repository()` block exits.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        database: AsyncDatabase | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._database = database
        self._memory_repository: MemoryMovieRepository | None = None

    @property
    def database(self) -> AsyncDatabase:
        if self._database is None:
            self._database = AsyncDatabase(self.settings.get_database_url())
        return self._database

    @asynccontextmanager
    async def movie_repository(self) -> AsyncGenerator[MovieRepository]:
        """Yield a movie repository for the configured backend."""
        if self.settings.repository_backend == "memory":
            if self._memory_repository is None:
                logger.info("Creating in-memory movie repository")
                self._memory_repository = MemoryMovieRepository()
            yield self._memory_repository
            return

        async with self.database.get_session() as session:
            yield MovieRepositoryImpl(session)

    async def init_storage(self) -> None:
        """Create the movies table when the database backend is used."""
        if self.settings.repository_backend == "database":
            await self.database.create_tables()

    async def dispose(self) -> None:
        """Close the database connections of the current event loop."""
        if self._database is not None:
            await self._database.dispose()

    def csv_parser(self) -> MovieCsvParser:
        return MovieCsvParser(
            min_year=self.settings.min_award_year,
            max_year=self.settings.max_award_year,
        )

    def upload_movies_usecase(self, repository: MovieRepository) -> UploadMoviesUseCase:
        return UploadMoviesUseCase(
            movie_repository=repository,
            csv_parser=self.csv_parser(),
            max_upload_bytes=self.settings.max_upload_bytes,
        )

    def calculate_award_intervals_usecase(
        self, repository: MovieRepository
    ) -> CalculateAwardIntervalsUseCase:
        return CalculateAwardIntervalsUseCase(movie_repository=repository)
