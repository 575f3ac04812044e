"""Tests for the Movie entity."""

from src.domain.entities.movie import Movie


class TestMovie:
    def test_defaults(self) -> None:
        movie = Movie(year=1980, title="Cruising", studios="Lorimar", producers="Jerry Weintraub")

        assert movie.winner is False
        assert movie.id is None
        assert str(movie) == "Cruising (1980)"

    def test_equality_by_id(self) -> None:
        a = Movie(1980, "A", "S", "P", id=1)
        b = Movie(1999, "B", "S", "Q", id=1)

        assert a == b
        assert hash(a) == hash(b)

    def test_without_id_only_equal_to_itself(self) -> None:
        a = Movie(1980, "A", "S", "P")
        b = Movie(1980, "A", "S", "P")

        assert a == a
        assert a != b
