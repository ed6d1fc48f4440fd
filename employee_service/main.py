from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from employee_service.db.init_db import init_db
from employee_service.errors import ApiError
from employee_service.logging_config import configure_app_logging
from employee_service.routers import employees, health
from employee_service.settings import get_settings

logger = logging.getLogger(__name__)


def _error_body(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def install_error_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": <message>}``."""

    @app.exception_handler(ApiError)
    async def _api_error(request: Request, exc: ApiError) -> JSONResponse:
        return _error_body(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return _error_body(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def _request_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("Unparsable request path=%s method=%s", request.url.path, request.method)
        return _error_body(status.HTTP_400_BAD_REQUEST, "Invalid request body")


def create_app() -> FastAPI:
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_app_logging(settings.log_level)
        logger.info("App startup beginning")

        init_db()
        logger.info("Database initialized (employees table ensured)")

        yield

    app = FastAPI(title="Employee Service", lifespan=lifespan)
    install_error_handlers(app)

    app.include_router(health.router)
    app.include_router(employees.router, prefix=settings.api_prefix)

    return app


app = create_app()
