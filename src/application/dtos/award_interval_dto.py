"""DTOs for award interval calculation.

The wire names (`min`, `max`, `producer`, `interval`, `previousWin`,
`followingWin`) are part of the public API contract.
"""

from dataclasses import dataclass, field
from typing import Any

from src.domain.value_objects.producer_interval import AwardIntervals, ProducerInterval


@dataclass
class ProducerIntervalOutputItem:
    """One producer interval in the output."""

    producer: str
    interval: int
    previous_win: int
    following_win: int

    @classmethod
    def from_value_object(cls, value: ProducerInterval) -> "ProducerIntervalOutputItem":
        """Build an output item from a domain ProducerInterval."""
        return cls(
            producer=value.producer,
            interval=value.interval,
            previous_win=value.previous_win,
            following_win=value.following_win,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "producer": self.producer,
            "interval": self.interval,
            "previousWin": self.previous_win,
            "followingWin": self.following_win,
        }


@dataclass
class CalculateAwardIntervalsOutputDto:
    """Producers with the minimum and maximum win intervals."""

    min: list[ProducerIntervalOutputItem] = field(default_factory=list)
    max: list[ProducerIntervalOutputItem] = field(default_factory=list)
    winner_count: int = 0

    @classmethod
    def from_award_intervals(
        cls, result: AwardIntervals, winner_count: int = 0
    ) -> "CalculateAwardIntervalsOutputDto":
        return cls(
            min=[ProducerIntervalOutputItem.from_value_object(v) for v in result.minimum],
            max=[ProducerIntervalOutputItem.from_value_object(v) for v in result.maximum],
            winner_count=winner_count,
        )

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        """Serialize to the public `{"min": [...], "max": [...]}` shape."""
        return {
            "min": [item.to_dict() for item in self.min],
            "max": [item.to_dict() for item in self.max],
        }
