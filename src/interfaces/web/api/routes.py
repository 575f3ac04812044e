"""HTTP routes."""

from typing import Any

from fastapi import APIRouter, File, Request, UploadFile
from fastapi.responses import JSONResponse

from src.application.dtos.upload_movies_dto import UploadMoviesInputDto
from src.interfaces.factories.usecase_factory import UseCaseFactory


router = APIRouter()


def _factory(request: Request) -> UseCaseFactory:
    return request.app.state.factory


@router.get("/health")
def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy"}


@router.post("/upload/csv", status_code=201)
async def upload_csv(request: Request, file: UploadFile = File(...)) -> Any:
    """Replace the stored movies with an uploaded CSV."""
    factory = _factory(request)
    content = await file.read()

    async with factory.movie_repository() as repository:
        output = await factory.upload_movies_usecase(repository).execute(
            UploadMoviesInputDto(
                content=content,
                filename=file.filename,
                content_type=file.content_type,
            )
        )

    if not output.success:
        return JSONResponse(
            status_code=output.status_code,
            content={
                "error": output.error_message,
                "invalidRecords": [
                    {"line": item.line_number, "errors": item.errors}
                    for item in output.invalid_records
                ],
            },
        )

    return {
        "message": "csv file processed successfully",
        "totalRecords": output.total_records,
        "loadedCount": output.loaded_count,
        "winnerCount": output.winner_count,
        "invalidCount": output.invalid_count,
    }


@router.get("/awards/intervals")
async def get_intervals(request: Request) -> dict[str, Any]:
    """Producers with the minimum and maximum interval between wins."""
    factory = _factory(request)
    async with factory.movie_repository() as repository:
        output = await factory.calculate_award_intervals_usecase(repository).execute()
    return output.to_dict()
