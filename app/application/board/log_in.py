"""
Use case: Exchange email and password for a session token.

Input: LogInCommand (email, password)
Output: LogInResult
Side effects: Inserts one session row.
Failure cases: UserNotFoundError (unknown email or wrong password).
"""

import logging
import secrets
from collections.abc import Callable
from datetime import datetime, timedelta

from app.application.board._store import classified
from app.application.board.dtos import LogInCommand, LogInResult
from app.domain.board.entities import Session
from app.domain.board.errors import UserNotFoundError
from app.domain.board.ports import PasswordHasher, SessionRepository, UserRepository

logger = logging.getLogger(__name__)

TOKEN_TYPE = "Bearer"
TOKEN_BYTES = 32


class LogInUseCase:
    """Checks credentials and opens a server-side session.

    Unknown emails and wrong passwords fail identically so the response
    does not reveal which accounts exist.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        session_repo: SessionRepository,
        password_hasher: PasswordHasher,
        session_ttl: timedelta,
        clock: Callable[[], datetime],
    ) -> None:
        self._user_repo = user_repo
        self._session_repo = session_repo
        self._password_hasher = password_hasher
        self._session_ttl = session_ttl
        self._clock = clock

    def execute(self, command: LogInCommand) -> LogInResult:
        """Run the login use case.

        Args:
            command: The submitted email and password.

        Returns:
            The issued token with its type and expiry.
        """
        with classified("log in"):
            user = self._user_repo.get_by_email(command.email)
            if user is None or not self._password_hasher.verify(
                command.password, user.password_hash
            ):
                raise UserNotFoundError()

            now = self._clock()
            session = Session(
                token=secrets.token_urlsafe(TOKEN_BYTES),
                user_id=user.id,
                token_type=TOKEN_TYPE,
                expires_at=now + self._session_ttl,
                created_at=now,
            )
            self._session_repo.save(session)

        logger.info("Opened session for user_id=%d", user.id)
        return LogInResult(
            token=session.token,
            token_type=session.token_type,
            expires_at=session.expires_at,
        )
