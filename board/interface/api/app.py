"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from board.config import Settings
from board.domain.error import DomainError
from board.interface.api.routes import (
    auth,
    comments,
    health,
    posts,
    users,
    votes,
)
from board.interface.error import (
    INVALID_REQUEST_MESSAGE,
    error_body,
    status_code_for,
)
from board.util.di.container import create_container, setup_di
from board.util.observability import instrument_fastapi

API_PREFIX = "/api"


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_code_for(exc)
    logfire.info(
        "Request rejected",
        path=request.url.path,
        status_code=code,
        error=str(exc),
    )
    return JSONResponse(error_body(str(exc)), status_code=code)


async def http_error_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        error_body(str(exc.detail)),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logfire.info("Malformed request", path=request.url.path, errors=str(exc.errors()))
    return JSONResponse(error_body(INVALID_REQUEST_MESSAGE), status_code=400)


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to serve from (a production one is built if omitted)
    """
    settings = Settings()

    app_instance = FastAPI(
        title=settings.api.title,
        description="In-memory discussion board for practicing UI and API test automation",
        version=settings.api.version,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(DomainError, domain_error_handler)
    app_instance.add_exception_handler(HTTPException, http_error_handler)
    app_instance.add_exception_handler(RequestValidationError, validation_error_handler)

    setup_di(app_instance, container or create_container())

    for module in (health, auth, posts, comments, votes, users):
        app_instance.include_router(module.router, prefix=API_PREFIX)

    return app_instance
