"""
Centralized exception handlers for the FastAPI application.

Application errors carry an ErrorKind chosen where they are raised; this
module is the only place that turns kinds into HTTP status codes.

Error Response Format:
    {
        "statusCode": 409,
        "message": "Email already in use",
        "error": "Conflict"
    }
"""

# Standard library imports
import logging
from http import HTTPStatus
from typing import Dict, List, Optional, Union

# External package imports
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from ...domain.exceptions import ErrorKind, TonAppError

logger = logging.getLogger(__name__)


ERROR_KIND_TO_STATUS: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.EMAIL_CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.UNEXPECTED: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

BEARER_CHALLENGE_KINDS = {ErrorKind.INVALID_TOKEN, ErrorKind.TOKEN_EXPIRED}


def status_for_kind(kind: ErrorKind) -> int:
    return ERROR_KIND_TO_STATUS.get(kind, status.HTTP_500_INTERNAL_SERVER_ERROR)


def create_error_response(
    status_code: int,
    message: Union[str, List[str]],
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Create a standardized error response"""
    return JSONResponse(
        status_code=status_code,
        content={
            "statusCode": status_code,
            "message": message,
            "error": HTTPStatus(status_code).phrase,
        },
        headers=headers,
    )


def _validation_messages(exc: RequestValidationError) -> List[str]:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        text = error.get("msg", "Invalid value")
        messages.append(f"{location}: {text}" if location else text)
    return messages


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers on the FastAPI application

    Args:
        app: The FastAPI application instance
    """

    @app.exception_handler(TonAppError)
    async def app_error_handler(request: Request, exc: TonAppError) -> JSONResponse:
        status_code = status_for_kind(exc.kind)
        logger.warning(
            "%s on %s %s: %s",
            exc.kind.value,
            request.method,
            request.url.path,
            exc.message,
        )
        headers = {"WWW-Authenticate": "Bearer"} if exc.kind in BEARER_CHALLENGE_KINDS else None
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            return create_error_response(status_code, "Internal server error")
        return create_error_response(status_code, exc.message, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        messages = _validation_messages(exc)
        logger.info("Validation failed on %s %s: %s", request.method, request.url.path, messages)
        return create_error_response(status.HTTP_400_BAD_REQUEST, messages)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return create_error_response(exc.status_code, str(exc.detail), headers=exc.headers)

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error on %s %s: %s",
            request.method,
            request.url.path,
            exc,
            exc_info=exc,
        )
        return create_error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
