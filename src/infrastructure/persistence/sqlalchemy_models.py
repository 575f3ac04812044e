"""SQLAlchemy ORM models."""

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for every ORM model."""


class MovieModel(Base):
    """Row of the movies table."""

    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    year: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False)
    studios: Mapped[str] = mapped_column(Text, nullable=False)
    producers: Mapped[str] = mapped_column(Text, nullable=False)
    winner: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, index=True
    )

    def __repr__(self) -> str:
        return f"<MovieModel(id={self.id}, year={self.year}, title={self.title!r})>"
