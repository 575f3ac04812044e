"""DTOs for uploading the movie list."""

from dataclasses import dataclass, field


@dataclass
class UploadMoviesInputDto:
    """Input of a movie list upload."""

    content: str | bytes
    filename: str | None = None
    content_type: str | None = None


@dataclass
class InvalidRecordItem:
    """A rejected CSV line."""

    line_number: int
    errors: list[str]


@dataclass
class UploadMoviesOutputDto:
    """Result of a movie list upload."""

    success: bool
    total_records: int = 0
    loaded_count: int = 0
    winner_count: int = 0
    invalid_records: list[InvalidRecordItem] = field(default_factory=list)
    error_message: str | None = None
    status_code: int = 201

    @property
    def invalid_count(self) -> int:
        return len(self.invalid_records)
