"""
homefix/core/exceptions.py

Error taxonomy shared by the store API and the remote-store client,
plus the handlers that render every error as `{"error": ..., "code": ...}`.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


# ---------------------------------------------------
# Domain Errors
# ---------------------------------------------------
class HomeFixError(Exception):
    """Base class for all marketplace errors."""

    code = "internal_error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(HomeFixError):
    """Missing or malformed input, caught before any write."""

    code = "validation_error"
    status_code = status.HTTP_400_BAD_REQUEST


class NotAuthorizedError(HomeFixError):
    """The actor lacks rights for the operation."""

    code = "not_authorized"
    status_code = status.HTTP_403_FORBIDDEN


class NotAuthenticatedError(NotAuthorizedError):
    """No session, or a session token that does not validate."""

    status_code = status.HTTP_401_UNAUTHORIZED


class IllegalTransitionError(HomeFixError):
    """The request state machine rejects the move."""

    code = "illegal_transition"
    status_code = status.HTTP_409_CONFLICT


class NotFoundError(HomeFixError):
    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(HomeFixError):
    code = "conflict"
    status_code = status.HTTP_409_CONFLICT


class RemoteError(HomeFixError):
    """Network or store failure, including non-2xx HTTP responses."""

    def __init__(self, message: str, status_code: int | None = None, code: str | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code or "remote_error"


# Store rejections keep their meaning on the client: each is both a RemoteError
# and the matching domain error.
class RemoteValidationError(RemoteError, ValidationError):
    pass


class RemoteNotAuthorizedError(RemoteError, NotAuthorizedError):
    pass


class RemoteIllegalTransitionError(RemoteError, IllegalTransitionError):
    pass


ERRORS_BY_CODE: dict[str, type[RemoteError]] = {
    ValidationError.code: RemoteValidationError,
    NotAuthorizedError.code: RemoteNotAuthorizedError,
    IllegalTransitionError.code: RemoteIllegalTransitionError,
}


# ---------------------------------------------------
# HTTP Error Rendering
# ---------------------------------------------------
_CODES_BY_STATUS = {
    status.HTTP_400_BAD_REQUEST: "validation_error",
    status.HTTP_401_UNAUTHORIZED: "not_authorized",
    status.HTTP_403_FORBIDDEN: "not_authorized",
    status.HTTP_404_NOT_FOUND: "not_found",
    status.HTTP_409_CONFLICT: "conflict",
    422: "validation_error",
    status.HTTP_429_TOO_MANY_REQUESTS: "rate_limited",
}


def error_body(message: str, code: str) -> dict[str, str]:
    return {"error": message, "code": code}


async def homefix_error_handler(request: Request, exc: HomeFixError) -> JSONResponse:
    status_code = exc.status_code or status.HTTP_502_BAD_GATEWAY
    log_fn = logger.error if status_code >= 500 else logger.warning
    log_fn(f"{request.method} {request.url.path} failed: {exc.code} - {exc.message}")
    return JSONResponse(status_code=status_code, content=error_body(exc.message, exc.code))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    code = _CODES_BY_STATUS.get(exc.status_code, "internal_error")
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message, code),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = f"{location}: {first.get('msg', 'Invalid request')}" if location else first.get("msg", "Invalid request")
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {message}")
    return JSONResponse(
        status_code=422,
        content=error_body(message, "validation_error"),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("Internal server error", HomeFixError.code),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Registers JSON error rendering for domain, HTTP, validation and unexpected errors."""
    app.add_exception_handler(HomeFixError, homefix_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
