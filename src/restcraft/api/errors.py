"""Exception to error-envelope translation at the HTTP boundary.

``error_to_envelope`` is the only place where errors are formatted. Route
handlers raise; they never build error bodies themselves. Domain errors,
FastAPI request validation errors, and framework HTTP errors (unknown
route, wrong method) all come out in the same ``{"errors": [...]}`` shape.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from restcraft.exceptions import ErrorCode, RestcraftError, ValidationError
from restcraft.presenters import present_error
from restcraft.schemas.envelope import ErrorEnvelope

logger = logging.getLogger(__name__)

INTERNAL_DETAIL = "An unexpected error occurred. Please try again later."


def _escape(part: object) -> str:
    """Escape one JSON pointer reference token (RFC 6901)."""
    return str(part).replace("~", "~0").replace("/", "~1")


def _request_validation_envelope(exc: RequestValidationError) -> ErrorEnvelope:
    """One error detail per failing location, in the order FastAPI reports them."""
    envelope = ErrorEnvelope()
    for err in exc.errors():
        loc = list(err.get("loc", ()))
        where = loc[0] if loc else "body"
        rest = loc[1:]
        if where == "body":
            envelope = present_error(
                ErrorCode.INVALID_ATTRIBUTE,
                "Invalid attribute",
                err.get("msg", "Invalid value"),
                HTTPStatus.BAD_REQUEST,
                "".join(f"/{_escape(part)}" for part in rest),
                envelope=envelope,
            )
        else:
            envelope = present_error(
                ErrorCode.INVALID_PARAMETER,
                "Invalid parameter",
                err.get("msg", "Invalid value"),
                HTTPStatus.BAD_REQUEST,
                source_parameter=".".join(str(part) for part in rest) or str(where),
                envelope=envelope,
            )
    return envelope


def error_to_envelope(exc: Exception) -> tuple[int, ErrorEnvelope]:
    """Map any exception to an HTTP status code and an error envelope.

    Client errors carry their own message. Server errors are logged with the
    traceback and rendered with a generic detail so internals never leak.
    """
    if isinstance(exc, RequestValidationError):
        logger.info("Request validation failed: %s", exc.errors())
        return HTTPStatus.BAD_REQUEST, _request_validation_envelope(exc)

    if isinstance(exc, RestcraftError):
        if exc.status_code >= 500:
            logger.error(
                "%s: %s | context: %s",
                type(exc).__name__,
                exc.message,
                exc.context,
                exc_info=exc,
            )
            return exc.status_code, present_error(
                exc.code, exc.title, INTERNAL_DETAIL, exc.status_code
            )
        logger.info("%s: %s", type(exc).__name__, exc.message)
        pointer = parameter = None
        if isinstance(exc, ValidationError):
            pointer, parameter = exc.pointer, exc.parameter
        return exc.status_code, present_error(
            exc.code,
            exc.title,
            exc.message,
            exc.status_code,
            pointer,
            source_parameter=parameter,
        )

    if isinstance(exc, StarletteHTTPException):
        try:
            status = HTTPStatus(exc.status_code)
        except ValueError:
            status = HTTPStatus.INTERNAL_SERVER_ERROR
        if status >= 500:
            logger.error("HTTP %d: %s", exc.status_code, exc.detail)
        return status, present_error(
            ErrorCode.HTTP_ERROR,
            status.phrase.capitalize(),
            str(exc.detail),
            status,
        )

    logger.error("Unhandled %s: %s", type(exc).__name__, exc, exc_info=exc)
    return HTTPStatus.INTERNAL_SERVER_ERROR, present_error(
        ErrorCode.INTERNAL,
        "Internal server error",
        INTERNAL_DETAIL,
        HTTPStatus.INTERNAL_SERVER_ERROR,
    )


async def _handle(request: Request, exc: Exception) -> JSONResponse:
    """FastAPI exception handler delegating to :func:`error_to_envelope`."""
    status_code, envelope = error_to_envelope(exc)
    return JSONResponse(
        status_code=int(status_code),
        content=envelope.dump(),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Route every error raised while handling a request through one mapper."""
    app.add_exception_handler(RestcraftError, _handle)
    app.add_exception_handler(RequestValidationError, _handle)
    app.add_exception_handler(StarletteHTTPException, _handle)
    app.add_exception_handler(Exception, _handle)
