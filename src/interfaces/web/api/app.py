"""FastAPI application exposing the movie upload and award intervals."""

import logging

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.application.exceptions import ApplicationError
from src.interfaces.factories.usecase_factory import UseCaseFactory
from src.interfaces.web.api.routes import router


logger = logging.getLogger(__name__)


def create_app(factory: UseCaseFactory | None = None) -> FastAPI:
    """Create the HTTP application.

    Args:
        factory: Use case factory (defaults to one built from settings)
    """
    factory = factory or UseCaseFactory()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        await factory.init_storage()
        yield
        await factory.dispose()

    app = FastAPI(
        title="Award Intervals API",
        description="Producers with the shortest and longest gap between wins",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.factory = factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(
        request: Request, exc: ApplicationError
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"error": "internal server error"})

    app.include_router(router)
    return app
