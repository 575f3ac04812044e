"""Movie list upload use case."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

from src.application.dtos.upload_movies_dto import (
    InvalidRecordItem,
    UploadMoviesInputDto,
    UploadMoviesOutputDto,
)
from src.application.exceptions import (
    ApplicationError,
    CsvValidationError,
    FileTooLargeError,
    InvalidFileTypeError,
)
from src.common.logging import get_logger
from src.domain.entities.movie import Movie
from src.domain.repositories.movie_repository import MovieRepository
from src.infrastructure.importers.movie_csv_parser import (
    MovieCsvParser,
    MovieCsvRecord,
)


if TYPE_CHECKING:
    from structlog.stdlib import BoundLogger


ACCEPTED_CONTENT_TYPES = frozenset({"text/csv", "application/vnd.ms-excel"})


class UploadMoviesUseCase:
    """Validate an uploaded movie list and replace the stored movies with it."""

    def __init__(
        self,
        movie_repository: MovieRepository,
        csv_parser: MovieCsvParser | None = None,
        max_upload_bytes: int | None = None,
        logger: BoundLogger | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            movie_repository: Movie repository
            csv_parser: CSV parser (defaults to one without a year ceiling)
            max_upload_bytes: Size limit of the upload (unbounded when None)
            logger: Logger; a correlation id is bound on every call
        """
        self.movie_repository = movie_repository
        self.csv_parser = csv_parser or MovieCsvParser()
        self.max_upload_bytes = max_upload_bytes
        self._logger = logger or get_logger(__name__)

    async def execute(self, input_dto: UploadMoviesInputDto) -> UploadMoviesOutputDto:
        """Validate the CSV and load its valid records.

        Validation failures are returned as a failed output DTO. Repository
        failures propagate.
        """
        log = self._logger.bind(correlation_id=f"csv-{uuid4().hex[:12]}")
        log.info("Starting CSV upload", filename=input_dto.filename)

        try:
            self._check_file(input_dto)
            result = self.csv_parser.parse(input_dto.content)
        except ApplicationError as e:
            log.warning("CSV upload rejected", error=e.message, details=e.details)
            return UploadMoviesOutputDto(
                success=False, error_message=e.message, status_code=e.status_code
            )

        invalid_items = [
            InvalidRecordItem(line_number=r.line_number, errors=r.errors)
            for r in result.invalid_records
        ]
        if invalid_items:
            log.warning(
                "Invalid records found",
                invalid_count=len(invalid_items),
                invalid_lines=[item.line_number for item in invalid_items],
            )

        if not result.valid_records:
            first_error = result.invalid_records[0].errors[0]
            log.error("No valid records in CSV", first_error=first_error)
            return UploadMoviesOutputDto(
                success=False,
                total_records=result.total_records,
                invalid_records=invalid_items,
                error_message=first_error,
                status_code=CsvValidationError.status_code,
            )

        movies = [self._to_movie(record) for record in result.valid_records]
        loaded = await self.movie_repository.clear_and_load(movies)

        log.info(
            "CSV upload completed",
            total_records=result.total_records,
            loaded_count=loaded,
            invalid_count=len(invalid_items),
            winner_count=result.winner_count,
        )
        return UploadMoviesOutputDto(
            success=True,
            total_records=result.total_records,
            loaded_count=loaded,
            winner_count=result.winner_count,
            invalid_records=invalid_items,
        )

    def _check_file(self, input_dto: UploadMoviesInputDto) -> None:
        content_type = (input_dto.content_type or "").split(";")[0].strip().lower()
        if content_type:
            if content_type not in ACCEPTED_CONTENT_TYPES:
                raise InvalidFileTypeError(
                    "file must be a valid csv", {"content_type": content_type}
                )
        elif input_dto.filename and not input_dto.filename.lower().endswith(".csv"):
            raise InvalidFileTypeError(
                "file must be a valid csv", {"filename": input_dto.filename}
            )

        if self.max_upload_bytes is not None:
            size = len(input_dto.content)
            if isinstance(input_dto.content, str):
                size = len(input_dto.content.encode("utf-8"))
            if size > self.max_upload_bytes:
                raise FileTooLargeError(
                    "file is too large",
                    {"size": size, "limit": self.max_upload_bytes},
                )

    @staticmethod
    def _to_movie(record: MovieCsvRecord) -> Movie:
        return Movie(
            year=int(record.year),
            title=record.title,
            studios=record.studios,
            producers=record.producers,
            winner=record.is_winner,
        )
