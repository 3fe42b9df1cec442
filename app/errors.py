"""Error types and the FastAPI exception handlers that render them.

Every failure raised by validation or by a service is a ``ResponseError``
carrying an HTTP status and a message. The handlers below turn it, and
the framework's own errors, into the ``{"errors": message}`` body.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ResponseError(Exception):
    """Failure that short-circuits a request with ``status`` and ``message``."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"errors": self.message}


class ValidationError(ResponseError):
    """Request payload does not match its schema."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(ResponseError):
    """Resource already exists (duplicate username)."""

    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(ResponseError):
    """Bad credentials, or a missing or unknown bearer token."""

    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(ResponseError):
    """Resource absent or not owned by the caller."""

    status_code = status.HTTP_404_NOT_FOUND


def format_errors(errors) -> str:
    """
    Render pydantic error dicts as ``"field: message; ..."``.

    Location prefixes added by FastAPI (``body``, ``query``, ``path``)
    are dropped so the same text is produced for framework and
    service-level validation.
    """
    parts = []
    for error in errors:
        loc = [str(item) for item in error.get("loc", ()) if item not in ("body", "query", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {error['msg']}" if field else error["msg"])
    return "; ".join(parts)


async def response_error_handler(request: Request, exc: ResponseError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": format_errors(exc.errors())},
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"errors": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"errors": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the handlers above to ``app``, most specific first."""
    app.add_exception_handler(ResponseError, response_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
