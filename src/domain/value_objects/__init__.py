"""Domain value objects."""

from src.domain.value_objects.producer_interval import AwardIntervals, ProducerInterval


__all__ = ["AwardIntervals", "ProducerInterval"]
