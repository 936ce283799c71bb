"""
Classified errors for the board bounded context.

Every failure a use case can report is one of the ErrorKind members below.
These are mapped to HTTP responses by the shared error dispatcher.
No framework imports allowed.
"""

from enum import Enum


class ErrorKind(Enum):
    """Closed set of failure causes understood by the error dispatcher."""

    TOKEN_MISSING = "token_missing"
    TOKEN_EXPIRED = "token_expired"
    TOKEN_TYPE_MISMATCH = "token_type_mismatch"
    USER_NOT_FOUND = "user_not_found"
    VALIDATION_FAILED = "validation_failed"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    UNEXPECTED = "unexpected"


class BoardDomainError(Exception):
    """Base error for all board domain errors.

    Subclasses pin ``kind``; the dispatcher never looks at ``message``.
    """

    kind: ErrorKind = ErrorKind.UNEXPECTED

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class TokenMissingError(BoardDomainError):
    """Raised when a request carries no usable credential."""

    kind = ErrorKind.TOKEN_MISSING

    def __init__(self, reason: str = "no credential supplied") -> None:
        super().__init__(f"Token missing: {reason}")
        self.reason = reason


class TokenExpiredError(BoardDomainError):
    """Raised when the session behind a credential has expired."""

    kind = ErrorKind.TOKEN_EXPIRED

    def __init__(self) -> None:
        super().__init__("Token expired")


class TokenTypeMismatchError(BoardDomainError):
    """Raised when the credential scheme is not the expected one."""

    kind = ErrorKind.TOKEN_TYPE_MISMATCH

    def __init__(self, token_type: str) -> None:
        super().__init__(f"Unexpected token type: {token_type!r}")
        self.token_type = token_type


class UserNotFoundError(BoardDomainError):
    """Raised when the user a credential or request refers to does not exist."""

    kind = ErrorKind.USER_NOT_FOUND

    def __init__(self, user_id: int | None = None) -> None:
        super().__init__(f"User not found: {user_id}")
        self.user_id = user_id


class ValidationFailedError(BoardDomainError):
    """Raised when an input field fails validation.

    Attributes:
        path: Name of the failing field as it appears on the wire, if known.
    """

    kind = ErrorKind.VALIDATION_FAILED

    def __init__(self, path: str | None, reason: str = "invalid value") -> None:
        super().__init__(f"Validation failed for {path or '<unknown>'}: {reason}")
        self.path = path
        self.reason = reason


class PostNotFoundError(BoardDomainError):
    """Raised when a post cannot be found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id


class ForbiddenError(BoardDomainError):
    """Raised when a user tries to change a post they do not own."""

    kind = ErrorKind.FORBIDDEN

    def __init__(self, post_id: int, user_id: int) -> None:
        super().__init__(f"User {user_id} does not own post {post_id}")
        self.post_id = post_id
        self.user_id = user_id


class UnexpectedError(BoardDomainError):
    """Raised when a collaborator fails in a way the domain does not model."""

    kind = ErrorKind.UNEXPECTED

    def __init__(self, reason: str) -> None:
        super().__init__(f"Unexpected failure: {reason}")
        self.reason = reason
