"""
Use case: Verify a request credential and resolve the user behind it.

Input: VerifyTokenQuery (raw "<type> <token>" credential)
Output: AuthenticatedUser
Side effects: Removes the session row of an expired token.
Failure cases: TokenMissingError, TokenTypeMismatchError,
    TokenExpiredError, UserNotFoundError.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from app.application.board._store import classified
from app.application.board.dtos import AuthenticatedUser, VerifyTokenQuery
from app.application.board.log_in import TOKEN_TYPE
from app.domain.board.errors import (
    TokenExpiredError,
    TokenMissingError,
    TokenTypeMismatchError,
    UserNotFoundError,
)
from app.domain.board.ports import SessionRepository, UserRepository

logger = logging.getLogger(__name__)


class VerifyTokenUseCase:
    """Resolves a bearer credential to a verified user id.

    Checks run in a fixed order: presence, scheme, session lookup,
    expiry, and finally existence of the session's user.
    """

    def __init__(
        self,
        session_repo: SessionRepository,
        user_repo: UserRepository,
        clock: Callable[[], datetime],
    ) -> None:
        self._session_repo = session_repo
        self._user_repo = user_repo
        self._clock = clock

    def execute(self, query: VerifyTokenQuery) -> AuthenticatedUser:
        token_type, token = _split_credential(query.credential)
        if token_type != TOKEN_TYPE:
            raise TokenTypeMismatchError(token_type)

        with classified("verify token"):
            session = self._session_repo.get(token)
            if session is None:
                raise TokenMissingError("unknown token")

            if session.is_expired(self._clock()):
                self._session_repo.delete(token)
                logger.info("Rejected expired session for user_id=%d", session.user_id)
                raise TokenExpiredError()

            if self._user_repo.get_by_id(session.user_id) is None:
                raise UserNotFoundError(session.user_id)

        return AuthenticatedUser(user_id=session.user_id, token=token)


def _split_credential(credential: str | None) -> tuple[str, str]:
    """Split "<type> <token>" into its two parts.

    Raises:
        TokenMissingError: If the credential is absent or has no token part.
    """
    if not credential or not credential.strip():
        raise TokenMissingError()
    token_type, _, token = credential.strip().partition(" ")
    token = token.strip()
    if not token:
        raise TokenMissingError("credential has no token part")
    return token_type, token
