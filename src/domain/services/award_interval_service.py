"""Award interval domain service.

Computes, per producer, the gaps in years between consecutive wins and
selects the producers holding the smallest and the largest gap overall.
"""

from __future__ import annotations

import math

from collections.abc import Iterable
from typing import TYPE_CHECKING, Protocol

from src.common.logging import get_logger
from src.domain.services.producer_name_parser import parse_producer_names
from src.domain.value_objects.producer_interval import AwardIntervals, ProducerInterval


if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger


class WinningRecord(Protocol):
    """Anything carrying an award year and a raw producers string."""

    year: int
    producers: str


class AwardIntervalService:
    """Domain service computing minimum and maximum win intervals."""

    def __init__(self, logger: BoundLogger | None = None) -> None:
        """Initialize the service.

        Args:
            logger: Logger used by default for every calculation
        """
        self._logger = logger or get_logger(__name__)

    @staticmethod
    def group_wins_by_producer(winners: Iterable[WinningRecord]) -> dict[str, list[int]]:
        """Group winning years by producer.

        Producers are keyed in the order they are first encountered and
        each year list is sorted ascending. A movie crediting nobody adds
        nothing.

        Args:
            winners: Winning movies

        Returns:
            Mapping of producer name to sorted winning years

        Raises:
            TypeError: A record has a non-integer year
        """
        wins_by_producer: dict[str, list[int]] = {}

        for record in winners:
            year = record.year
            if isinstance(year, bool) or not isinstance(year, int):
                msg = f"year must be an int, got {type(year).__name__}: {year!r}"
                raise TypeError(msg)

            for producer in parse_producer_names(record.producers):
                wins_by_producer.setdefault(producer, []).append(year)

        for years in wins_by_producer.values():
            years.sort()

        return wins_by_producer

    @staticmethod
    def producer_intervals(producer: str, years: list[int]) -> list[ProducerInterval]:
        """Build one interval per pair of consecutive wins.

        Args:
            producer: Producer name
            years: Winning years sorted ascending

        Returns:
            Intervals in chronological order; empty for fewer than two wins
        """
        return [
            ProducerInterval(
                producer=producer,
                interval=following - previous,
                previous_win=previous,
                following_win=following,
            )
            for previous, following in zip(years, years[1:])
        ]

    @staticmethod
    def select_extremes(intervals: Iterable[ProducerInterval]) -> AwardIntervals:
        """Keep every interval equal to the global minimum or maximum.

        Single pass with running extremes; ties keep first-encountered
        order.
        """
        global_min = math.inf
        global_max = -math.inf
        minimum: list[ProducerInterval] = []
        maximum: list[ProducerInterval] = []

        for item in intervals:
            if item.interval < global_min:
                global_min = item.interval
                minimum = [item]
            elif item.interval == global_min:
                minimum.append(item)

            if item.interval > global_max:
                global_max = item.interval
                maximum = [item]
            elif item.interval == global_max:
                maximum.append(item)

        return AwardIntervals(minimum=tuple(minimum), maximum=tuple(maximum))

    def calculate(
        self,
        winners: Iterable[WinningRecord],
        logger: BoundLogger | None = None,
    ) -> AwardIntervals:
        """Compute the producers with the minimum and maximum win intervals.

        Args:
            winners: Winning movies, in any order
            logger: Logger for this call (defaults to the service logger)

        Returns:
            AwardIntervals with both extreme sets
        """
        log = logger or self._logger

        wins_by_producer = self.group_wins_by_producer(winners)
        log.debug("Grouped wins by producer", producer_count=len(wins_by_producer))

        intervals = [
            interval
            for producer, years in wins_by_producer.items()
            for interval in self.producer_intervals(producer, years)
        ]
        result = self.select_extremes(intervals)

        log.debug(
            "Selected interval extremes",
            interval_count=len(intervals),
            min_count=len(result.minimum),
            max_count=len(result.maximum),
        )
        return result
