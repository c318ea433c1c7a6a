from http import HTTPStatus
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from manga_catalog.applications.interfaces.dtos.response import APIResponse
from manga_catalog.domain.exceptions import (
    AccessDeniedError,
    AuthenticationError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from manga_catalog.infrastructure.logging.logger import Logger

logger = Logger.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"

DOMAIN_STATUS = {
    ValidationError: HTTPStatus.BAD_REQUEST,
    AuthenticationError: HTTPStatus.UNAUTHORIZED,
    AccessDeniedError: HTTPStatus.FORBIDDEN,
    NotFoundError: HTTPStatus.NOT_FOUND,
    ConflictError: HTTPStatus.CONFLICT,
}


def error_response(
    status_code: int, error: Any, message: Optional[str] = None, headers: Optional[Dict[str, str]] = None
) -> JSONResponse:
    body = APIResponse.fail(error=error, message=message)
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return error_response(HTTPStatus.BAD_REQUEST, jsonable_encoder(exc.errors()), "Validation failed")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, exc.detail, exc.detail, headers=getattr(exc, "headers", None))

    @app.exception_handler(DomainError)
    async def handle_domain_error(request: Request, exc: DomainError):
        for error_type, status_code in DOMAIN_STATUS.items():
            if isinstance(exc, error_type):
                return error_response(status_code, str(exc), str(exc))

        logger.error(f"{request.method} {request.url.path} failed: {exc!r}", exc_info=exc)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, INTERNAL_ERROR_MESSAGE)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(f"Unhandled error on {request.method} {request.url.path}", exc_info=exc)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE, INTERNAL_ERROR_MESSAGE)
