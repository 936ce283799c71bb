"""
Centralized error handlers for FastAPI.

Every handler builds a RequestContext and defers to the dispatcher.
No stack traces or internal details are exposed to clients.
All error responses use the {success, message} envelope.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.domain.board.errors import BoardDomainError, ValidationFailedError
from app.shared.errors.dispatcher import (
    ErrorOutcome,
    RequestContext,
    dispatch_error,
)
from app.shared.errors.messages import resolve_locale

logger = logging.getLogger(__name__)

ERROR_CODE_HEADER = "X-Error-Code"


def request_context(request: Request) -> RequestContext:
    """Extract the dispatcher's view of a request."""
    route = request.scope.get("route")
    path = getattr(route, "path", None) or request.url.path
    locale = resolve_locale(
        request.headers.get("accept-language"), settings.default_locale
    )
    return RequestContext(method=request.method.upper(), path=path, locale=locale)


def error_response(outcome: ErrorOutcome) -> JSONResponse:
    """Render an outcome as an envelope, clearing the credential if asked."""
    response = JSONResponse(
        status_code=outcome.status_code,
        content={"success": False, "message": outcome.message},
        headers={ERROR_CODE_HEADER: outcome.code},
    )
    if outcome.clear_credential:
        response.delete_cookie(settings.auth_cookie_name)
    return response


def validation_error_from(exc: RequestValidationError) -> ValidationFailedError:
    """Convert a request schema failure into a classified validation error.

    The path is the last string segment of the first error location,
    e.g. ("body", "passwordConfirm") -> "passwordConfirm".
    """
    errors = exc.errors()
    path = None
    if errors:
        segments = [seg for seg in errors[0].get("loc", ()) if isinstance(seg, str)]
        if segments and segments[-1] not in ("body", "query", "path"):
            path = segments[-1]
        reason = errors[0].get("msg", "invalid value")
    else:
        reason = "invalid value"
    return ValidationFailedError(path=path, reason=reason)


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(BoardDomainError)
    async def handle_board_domain(
        request: Request, exc: BoardDomainError
    ) -> JSONResponse:
        """Handle every classified error raised by the use cases."""
        context = request_context(request)
        outcome = dispatch_error(exc, context)
        if outcome.status_code >= 500:
            logger.error(
                "%s %s failed: %s", context.method, context.path, exc.message,
                exc_info=exc.__cause__,
            )
        else:
            logger.warning(
                "%s %s -> %d %s", context.method, context.path,
                outcome.status_code, outcome.code,
            )
        return error_response(outcome)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle request schema failures as classified validation errors."""
        classified = validation_error_from(exc)
        context = request_context(request)
        logger.warning(
            "%s %s rejected: %s", context.method, context.path, classified.message
        )
        return error_response(dispatch_error(classified, context))

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        return error_response(dispatch_error(exc, request_context(request)))
