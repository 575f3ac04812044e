"""Movie list CSV parser.

Reads the `;`-delimited movie list (year;title;studios;producers;winner),
checks the header and validates every record. Invalid records are reported
rather than raised, so one bad line does not reject the whole file.
"""

import csv
import io
import logging

from dataclasses import dataclass, field

from src.application.exceptions import CsvValidationError


logger = logging.getLogger(__name__)

CSV_DELIMITER = ";"
REQUIRED_COLUMNS = ("year", "title", "studios", "producers", "winner")
WINNER_VALUES = frozenset({"yes", ""})


@dataclass(frozen=True)
class MovieCsvRecord:
    """One data row of the movie list, as raw strings."""

    year: str
    title: str
    studios: str
    producers: str
    winner: str

    @property
    def is_winner(self) -> bool:
        return self.winner.strip().lower() == "yes"


@dataclass
class InvalidCsvRecord:
    """A data row rejected by validation."""

    line_number: int
    record: MovieCsvRecord
    errors: list[str]


@dataclass
class MovieCsvParseResult:
    """Outcome of parsing a movie list."""

    valid_records: list[MovieCsvRecord] = field(default_factory=list)
    invalid_records: list[InvalidCsvRecord] = field(default_factory=list)

    @property
    def total_records(self) -> int:
        return len(self.valid_records) + len(self.invalid_records)

    @property
    def winner_count(self) -> int:
        return sum(1 for r in self.valid_records if r.is_winner)


class MovieCsvParser:
    """Parser and validator for the movie list CSV."""

    def __init__(self, min_year: int = 1900, max_year: int | None = None) -> None:
        """Initialize the parser.

        Args:
            min_year: Smallest accepted award year
            max_year: Largest accepted award year (unbounded when None)
        """
        self.min_year = min_year
        self.max_year = max_year

    @staticmethod
    def decode(content: str | bytes) -> str:
        """Decode uploaded bytes as UTF-8, dropping a leading BOM."""
        if isinstance(content, bytes):
            try:
                return content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise CsvValidationError("Error reading CSV file") from e
        return content.lstrip("\ufeff")

    def parse(self, content: str | bytes) -> MovieCsvParseResult:
        """Parse and validate a movie list.

        Args:
            content: CSV text or raw bytes

        Returns:
            MovieCsvParseResult with valid and invalid records

        Raises:
            CsvValidationError: The file is empty, unreadable or misses a
                required column
        """
        # Lines may be indented (e.g. pasted test data); blank ones are skipped
        lines = [line.strip() for line in self.decode(content).splitlines()]
        lines = [line for line in lines if line]
        if len(lines) < 2:
            raise CsvValidationError("CSV file is empty")

        try:
            rows = list(csv.reader(lines, delimiter=CSV_DELIMITER))
        except csv.Error as e:
            raise CsvValidationError("Error parsing CSV file", {"error": str(e)}) from e

        header = [column.strip().lower() for column in rows[0]]
        self._validate_required_columns(header)
        index = {column: header.index(column) for column in REQUIRED_COLUMNS}

        result = MovieCsvParseResult()
        for line_number, row in enumerate(rows[1:], start=2):
            record = MovieCsvRecord(
                **{column: _cell(row, index[column]) for column in REQUIRED_COLUMNS}
            )
            errors = self.validate_record(record)
            if errors:
                result.invalid_records.append(
                    InvalidCsvRecord(line_number=line_number, record=record, errors=errors)
                )
            else:
                result.valid_records.append(record)

        if result.invalid_records:
            logger.warning(
                f"Invalid records found: {len(result.invalid_records)} of "
                f"{result.total_records}"
            )
        logger.info(
            f"CSV parsed: total={result.total_records} "
            f"valid={len(result.valid_records)} winners={result.winner_count}"
        )
        return result

    @staticmethod
    def _validate_required_columns(header: list[str]) -> None:
        for column in REQUIRED_COLUMNS:
            if column not in header:
                logger.error(f"Required column not found: {column} (columns={header})")
                raise CsvValidationError(
                    f"Missing required column: {column}", {"columns": header}
                )

    def validate_record(self, record: MovieCsvRecord) -> list[str]:
        """Validate one record.

        Returns:
            Error messages; empty when the record is valid
        """
        errors: list[str] = []

        year = parse_year(record.year)
        if (
            year is None
            or year < self.min_year
            or (self.max_year is not None and year > self.max_year)
        ):
            errors.append(f"Invalid year: {record.year}")

        if not record.title.strip():
            errors.append("Title cannot be empty")
        if not record.studios.strip():
            errors.append("Studios cannot be empty")
        if not record.producers.strip():
            errors.append("Producers cannot be empty")

        if record.winner.strip().lower() not in WINNER_VALUES:
            errors.append(f"Invalid winner value: {record.winner}")

        return errors


def parse_year(raw: str) -> int | None:
    """Parse a year cell; None when it is not a plain integer."""
    text = raw.strip()
    if not text.isdecimal():
        return None
    return int(text)


def _cell(row: list[str], position: int) -> str:
    return row[position].strip() if position < len(row) else ""
