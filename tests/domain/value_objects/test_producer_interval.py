"""Tests for ProducerInterval and AwardIntervals."""

from dataclasses import FrozenInstanceError

import pytest

from src.domain.value_objects.producer_interval import AwardIntervals, ProducerInterval


class TestProducerInterval:
    def test_valid_interval(self) -> None:
        item = ProducerInterval(
            producer="Bo Derek", interval=6, previous_win=1984, following_win=1990
        )

        assert item.following_win - item.previous_win == item.interval

    def test_zero_interval_is_valid(self) -> None:
        item = ProducerInterval("X", 0, 1990, 1990)

        assert item.interval == 0

    def test_negative_interval_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be negative"):
            ProducerInterval("X", -1, 1991, 1990)

    def test_mismatched_years_are_rejected(self) -> None:
        with pytest.raises(ValueError, match="does not match"):
            ProducerInterval("X", 3, 1990, 1995)

    def test_is_frozen(self) -> None:
        item = ProducerInterval("X", 1, 1990, 1991)

        with pytest.raises(FrozenInstanceError):
            item.interval = 2  # type: ignore[misc]

    def test_equal_by_value(self) -> None:
        assert ProducerInterval("X", 1, 1990, 1991) == ProducerInterval(
            "X", 1, 1990, 1991
        )


class TestAwardIntervals:
    def test_default_is_empty(self) -> None:
        assert AwardIntervals().is_empty

    def test_not_empty_with_entries(self) -> None:
        item = ProducerInterval("X", 1, 1990, 1991)

        assert not AwardIntervals(minimum=(item,), maximum=(item,)).is_empty
