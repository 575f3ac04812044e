"""Tests for MovieRepositoryImpl."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.movie import Movie
from src.infrastructure.config.async_database import AsyncDatabase
from src.infrastructure.exceptions import DatabaseError, UpdateError
from src.infrastructure.persistence.movie_repository_impl import MovieRepositoryImpl
from src.infrastructure.persistence.sqlalchemy_models import MovieModel
from tests.fixtures.movie_factories import make_movie


class TestMovieRepositoryImpl:
    """Test cases for MovieRepositoryImpl with a mocked session."""

    @pytest.fixture
    def mock_session(self) -> MagicMock:
        """Create mock async session."""
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock()
        session.get = AsyncMock()
        session.add = MagicMock()
        session.add_all = MagicMock()
        session.flush = AsyncMock()
        session.refresh = AsyncMock()
        session.delete = AsyncMock()
        return session

    @pytest.fixture
    def repository(self, mock_session: MagicMock) -> MovieRepositoryImpl:
        return MovieRepositoryImpl(mock_session)

    @pytest.fixture
    def sample_model(self) -> MovieModel:
        return MovieModel(
            id=1,
            year=1984,
            title="Bolero",
            studios="Cannon Films",
            producers="Bo Derek",
            winner=True,
        )

    @pytest.mark.asyncio
    async def test_clear_and_load(
        self, repository: MovieRepositoryImpl, mock_session: MagicMock
    ) -> None:
        movies = [make_movie(1980, "A"), make_movie(1984, "B", winner=False)]

        loaded = await repository.clear_and_load(movies)

        assert loaded == 2
        mock_session.execute.assert_awaited_once()
        added = mock_session.add_all.call_args[0][0]
        assert [(m.year, m.producers, m.winner) for m in added] == [
            (1980, "A", True),
            (1984, "B", False),
        ]
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_clear_and_load_wraps_database_errors(
        self, repository: MovieRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = SQLAlchemyError("boom")

        with pytest.raises(DatabaseError) as exc_info:
            await repository.clear_and_load([make_movie(1980, "A")])

        assert exc_info.value.details["count"] == 1

    @pytest.mark.asyncio
    async def test_get_winners(
        self,
        repository: MovieRepositoryImpl,
        mock_session: MagicMock,
        sample_model: MovieModel,
    ) -> None:
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = [sample_model]
        mock_session.execute.return_value = mock_result

        winners = await repository.get_winners()

        assert len(winners) == 1
        assert isinstance(winners[0], Movie)
        assert winners[0].id == 1
        assert winners[0].producers == "Bo Derek"
        assert winners[0].winner is True

    @pytest.mark.asyncio
    async def test_get_winners_wraps_database_errors(
        self, repository: MovieRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.execute.side_effect = SQLAlchemyError("boom")

        with pytest.raises(DatabaseError):
            await repository.get_winners()

    @pytest.mark.asyncio
    async def test_get_by_id(
        self,
        repository: MovieRepositoryImpl,
        mock_session: MagicMock,
        sample_model: MovieModel,
    ) -> None:
        mock_session.get.return_value = sample_model

        movie = await repository.get_by_id(1)

        assert movie is not None
        assert movie.title == "Bolero"
        mock_session.get.assert_awaited_once_with(MovieModel, 1)

    @pytest.mark.asyncio
    async def test_get_by_id_not_found(
        self, repository: MovieRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.get.return_value = None

        assert await repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_update_not_found(
        self, repository: MovieRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.get.return_value = None
        movie = make_movie(1980, "A")
        movie.id = 5

        with pytest.raises(UpdateError):
            await repository.update(movie)

    @pytest.mark.asyncio
    async def test_update_without_id(self, repository: MovieRepositoryImpl) -> None:
        with pytest.raises(ValueError):
            await repository.update(make_movie(1980, "A"))

    @pytest.mark.asyncio
    async def test_delete_not_found(
        self, repository: MovieRepositoryImpl, mock_session: MagicMock
    ) -> None:
        mock_session.get.return_value = None

        assert await repository.delete(1) is False
        mock_session.delete.assert_not_called()


@pytest.mark.integration
class TestMovieRepositoryImplSqlite:
    """Round trips against a real SQLite file."""

    @pytest.fixture
    def database(self, tmp_path: Path) -> AsyncDatabase:
        return AsyncDatabase(f"sqlite+aiosqlite:///{tmp_path / 'movies.db'}")

    @pytest.mark.asyncio
    async def test_load_then_get_winners(self, database: AsyncDatabase) -> None:
        await database.create_tables()
        try:
            async with database.get_session() as session:
                await MovieRepositoryImpl(session).clear_and_load(
                    [
                        make_movie(1990, "Bo Derek"),
                        make_movie(1980, "Jerry Weintraub", winner=False),
                        make_movie(1984, "Bo Derek"),
                    ]
                )

            async with database.get_session() as session:
                repository = MovieRepositoryImpl(session)
                winners = await repository.get_winners()
                total = await repository.count()

            assert total == 3
            assert [(m.year, m.producers) for m in winners] == [
                (1984, "Bo Derek"),
                (1990, "Bo Derek"),
            ]
            assert all(m.id is not None for m in winners)
        finally:
            await database.dispose()

    @pytest.mark.asyncio
    async def test_clear_and_load_replaces_previous_rows(
        self, database: AsyncDatabase
    ) -> None:
        await database.create_tables()
        try:
            async with database.get_session() as session:
                await MovieRepositoryImpl(session).clear_and_load(
                    [make_movie(1980, "A"), make_movie(1981, "B")]
                )
            async with database.get_session() as session:
                await MovieRepositoryImpl(session).clear_and_load([make_movie(2000, "C")])

            async with database.get_session() as session:
                movies = await MovieRepositoryImpl(session).get_all()

            assert [m.producers for m in movies] == ["C"]
        finally:
            await database.dispose()

    @pytest.mark.asyncio
    async def test_failed_session_rolls_back(self, database: AsyncDatabase) -> None:
        await database.create_tables()
        try:
            async with database.get_session() as session:
                await MovieRepositoryImpl(session).clear_and_load([make_movie(1980, "A")])

            with pytest.raises(RuntimeError):
                async with database.get_session() as session:
                    await MovieRepositoryImpl(session).clear_and_load([])
                    raise RuntimeError("abort")

            async with database.get_session() as session:
                assert await MovieRepositoryImpl(session).count() == 1
        finally:
            await database.dispose()
