"""
Error dispatcher: the single translation from classified errors to responses.

``dispatch_error`` is a pure, total function. It never raises and every
input reaches exactly one outcome. FastAPI wiring lives in handlers.py.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.board.errors import BoardDomainError, ErrorKind
from app.shared.errors.messages import message

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_500 = 500

LOGOUT_PATH_SUFFIX = "/logout"


@dataclass(frozen=True)
class RequestContext:
    """The request metadata the dispatcher is allowed to look at.

    Attributes:
        method: HTTP method, upper case.
        path: Route path (template or concrete URL path).
        locale: Resolved message locale.
    """

    method: str
    path: str
    locale: str = "en"


@dataclass(frozen=True)
class ErrorOutcome:
    """Final response decided for a failed request.

    Attributes:
        status_code: HTTP status.
        code: Machine-stable error code, independent of wording.
        message: Localized user-facing message.
        clear_credential: Whether the stored credential must be cleared.
    """

    status_code: int
    code: str
    message: str
    clear_credential: bool = False


# Validation paths with field-specific wording: path -> (code, message key).
_VALIDATION_PATHS: dict[str, tuple[str, str]] = {
    "email": ("INVALID_EMAIL", "invalid_email"),
    "nickname": ("INVALID_NICKNAME", "invalid_nickname"),
    "password": ("INVALID_PASSWORD", "invalid_password"),
    "passwordConfirm": ("PASSWORD_CONFIRM_MISMATCH", "password_confirm_mismatch"),
    "title": ("POST_FIELDS_REQUIRED", "post_fields_required"),
    "content": ("POST_FIELDS_REQUIRED", "post_fields_required"),
}

# Auth kinds: kind -> (code, message key, clear credential).
_AUTH_KINDS: dict[ErrorKind, tuple[str, str, bool]] = {
    ErrorKind.TOKEN_TYPE_MISMATCH: ("TOKEN_TYPE_MISMATCH", "token_type_mismatch", False),
    ErrorKind.TOKEN_EXPIRED: ("TOKEN_EXPIRED", "token_expired", True),
    ErrorKind.USER_NOT_FOUND: ("USER_NOT_FOUND", "user_not_found", True),
    ErrorKind.TOKEN_MISSING: ("TOKEN_MISSING", "token_missing", False),
}


def classify(exc: BaseException) -> tuple[ErrorKind, Optional[str]]:
    """Return the error kind and validation path carried by an exception.

    Anything that is not a BoardDomainError is UNEXPECTED.
    """
    if isinstance(exc, BoardDomainError):
        return exc.kind, getattr(exc, "path", None)
    return ErrorKind.UNEXPECTED, None


def dispatch(
    kind: ErrorKind, context: RequestContext, path: Optional[str] = None
) -> ErrorOutcome:
    """Map an error kind plus request context to the final outcome.

    Args:
        kind: Classified cause of the failure.
        context: Method, route path and locale of the failing request.
        path: Failing field name, only meaningful for VALIDATION_FAILED.

    Returns:
        The one outcome for this input.
    """
    locale = context.locale

    if kind in _AUTH_KINDS:
        code, key, clear = _AUTH_KINDS[kind]
        return ErrorOutcome(HTTP_401, code, message(key, locale), clear)

    if kind is ErrorKind.VALIDATION_FAILED:
        code, key = _VALIDATION_PATHS.get(path or "", ("VALIDATION_FAILED", "validation_failed"))
        return ErrorOutcome(HTTP_400, code, message(key, locale))

    if kind is ErrorKind.NOT_FOUND:
        return ErrorOutcome(HTTP_404, "POST_NOT_FOUND", message("post_not_found", locale))

    if kind is ErrorKind.FORBIDDEN:
        key = "forbidden_delete" if context.method == "DELETE" else "forbidden_update"
        return ErrorOutcome(HTTP_403, "FORBIDDEN", message(key, locale))

    return _unexpected(context)


def _unexpected(context: RequestContext) -> ErrorOutcome:
    """Fallthrough for UNEXPECTED and anything unclassified."""
    if context.method != "GET" and context.path.rstrip("/").endswith(LOGOUT_PATH_SUFFIX):
        key = "unexpected_logout"
    else:
        key = "unexpected"
    return ErrorOutcome(HTTP_500, "UNEXPECTED_ERROR", message(key, context.locale))


def dispatch_error(exc: BaseException, context: RequestContext) -> ErrorOutcome:
    """Classify an exception and dispatch it. Never raises."""
    kind, path = classify(exc)
    return dispatch(kind, context, path)
