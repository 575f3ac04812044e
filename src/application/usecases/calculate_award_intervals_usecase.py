"""Award interval calculation use case."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from src.application.dtos.award_interval_dto import CalculateAwardIntervalsOutputDto
from src.common.logging import get_logger
from src.domain.repositories.movie_repository import MovieRepository
from src.domain.services.award_interval_service import AwardIntervalService


if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger


class CalculateAwardIntervalsUseCase:
    """Find the producers with the shortest and longest gap between wins."""

    def __init__(
        self,
        movie_repository: MovieRepository,
        interval_service: AwardIntervalService | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            movie_repository: Source of winning movies
            interval_service: Domain service computing the intervals
            logger: Logger; a correlation id is bound on every call
        """
        self.movie_repository = movie_repository
        self._logger = logger or get_logger(__name__)
        self.interval_service = interval_service or AwardIntervalService(self._logger)

    async def execute(self) -> CalculateAwardIntervalsOutputDto:
        """Compute the current minimum and maximum intervals."""
        log = self._logger.bind(correlation_id=f"intervals-{uuid4().hex[:12]}")

        winners = await self.movie_repository.get_winners()
        log.info("Winners retrieved", winner_count=len(winners))

        result = self.interval_service.calculate(winners, logger=log)

        log.info(
            "Intervals calculated",
            min_count=len(result.minimum),
            max_count=len(result.maximum),
        )
        return CalculateAwardIntervalsOutputDto.from_award_intervals(
            result, winner_count=len(winners)
        )
