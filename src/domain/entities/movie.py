"""Movie entity."""

from src.domain.entities.base import BaseEntity


class Movie(BaseEntity):
    """A nominated movie from the award list.

    `producers` is the raw attribution string of the movie; it may credit
    several producers separated by commas and/or "and", for example
    "John Smith, Jane Doe and Bob Wilson".
    """

    def __init__(
        self,
        year: int,
        title: str,
        studios: str,
        producers: str,
        winner: bool = False,
        id: int | None = None,
    ) -> None:
        """Initialize a movie entity.

        Args:
            year: Award year
            title: Movie title
            studios: Raw studios string
            producers: Raw producers (attribution) string
            winner: Whether the movie won the award that year
            id: Movie ID
        """
        super().__init__(id)
        self.year = year
        self.title = title
        self.studios = studios
        self.producers = producers
        self.winner = winner

    def __str__(self) -> str:
        return f"{self.title} ({self.year})"

    def __repr__(self) -> str:
        return (
            f"Movie(id={self.id!r}, year={self.year!r}, title={self.title!r}, "
            f"winner={self.winner!r})"
        )
