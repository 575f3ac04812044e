"""Shared fixtures."""

import pytest

from src.infrastructure.config.settings import Settings
from src.interfaces.factories.usecase_factory import UseCaseFactory


MOVIE_LIST_CSV = """year;title;studios;producers;winner
1980;Can't Stop the Music;Associated Film Distribution;Allan Carr;yes
1980;Cruising;Lorimar Productions, United Artists;Jerry Weintraub;
1984;Bolero;Cannon Films;Bo Derek;yes
1990;Ghosts Can't Do It;Triumph Releasing;Bo Derek;yes
1991;Hudson Hawk;TriStar Pictures;Joel Silver;yes
1992;Shining Through;20th Century Fox;Carol Baum and Howard Rosenman;yes
2002;Swept Away;Screen Gems;Matthew Vaughn;yes
2015;Fantastic Four;20th Century Fox;Matthew Vaughn, Simon Kinberg, Hutch Parker, Robert Kulzer and Gregory Goodman;yes
"""


@pytest.fixture
def movie_list_csv() -> str:
    return MOVIE_LIST_CSV


@pytest.fixture
def memory_settings() -> Settings:
    return Settings(
        repository_backend="memory",
        min_award_year=1900,
        max_award_year=2100,
        log_level="WARNING",
    )


@pytest.fixture
def memory_factory(memory_settings: Settings) -> UseCaseFactory:
    return UseCaseFactory(settings=memory_settings)
