"""Value objects for producer win intervals."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProducerInterval:
    """Gap between two consecutive wins of one producer."""

    producer: str
    interval: int
    previous_win: int
    following_win: int

    def __post_init__(self) -> None:
        if self.interval < 0:
            msg = f"interval({self.interval}) must not be negative"
            raise ValueError(msg)
        if self.following_win - self.previous_win != self.interval:
            msg = (
                f"interval({self.interval}) does not match "
                f"{self.previous_win}..{self.following_win}"
            )
            raise ValueError(msg)


@dataclass(frozen=True)
class AwardIntervals:
    """Producers holding the global minimum and maximum win intervals.

    Every entry of `minimum` shares the same interval, as does every entry
    of `maximum`. Both are empty when no producer has won twice.
    """

    minimum: tuple[ProducerInterval, ...] = ()
    maximum: tuple[ProducerInterval, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no producer has two or more wins."""
        return not self.minimum and not self.maximum
