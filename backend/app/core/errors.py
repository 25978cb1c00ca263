"""Tagged reservation errors and the handlers that render them as JSON."""

from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException


GENERIC_ERROR_MESSAGE = "Internal Server Error!"


class ErrorKind(str, Enum):
    INCOMPLETE_SUBMISSION = "incomplete_submission"
    SCHEMA_VALIDATION = "schema_validation"
    PERSISTENCE = "persistence"

    @property
    def status_code(self) -> int:
        if self is ErrorKind.PERSISTENCE:
            return status.HTTP_500_INTERNAL_SERVER_ERROR
        return status.HTTP_400_BAD_REQUEST


class ReservationError(Exception):
    """A failed submission: the kind decides the status, the message is shown to the visitor."""

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return self.kind.status_code


def error_response(status_code: int, message: str | None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message or GENERIC_ERROR_MESSAGE},
    )


async def reservation_error_handler(request: Request, exc: ReservationError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.opt(exception=exc.__cause__ or exc).error(f"{exc.kind.value}: {exc.message}")
    else:
        logger.warning(f"Rejected reservation ({exc.kind.value}): {exc.message}")
    return error_response(exc.status_code, exc.message)


def _describe_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request body"
    first = errors[0]
    location = [str(part) for part in first.get("loc", ()) if part != "body"]
    if location:
        return f"{'.'.join(location)}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "Invalid request body")


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.warning(f"Malformed request to {request.url.path}: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else None
    return error_response(exc.status_code, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.opt(exception=exc).error(f"Unhandled exception on {request.url.path}")
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


EXCEPTION_HANDLERS = {
    ReservationError: reservation_error_handler,
    RequestValidationError: request_validation_handler,
    StarletteHTTPException: http_exception_handler,
    Exception: unhandled_exception_handler,
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
