"""
Use case: Register a new account.

Input: SignUpCommand (email, nickname, password)
Output: SignUpResult
Side effects: Inserts one user row with a hashed password.
Failure cases: ValidationFailedError (email already registered).
"""

import logging

from app.application.board._store import classified
from app.application.board.dtos import SignUpCommand, SignUpResult
from app.domain.board.errors import ValidationFailedError
from app.domain.board.ports import PasswordHasher, UserRepository

logger = logging.getLogger(__name__)


class SignUpUseCase:
    """Registers a user after checking the email is not taken."""

    def __init__(
        self, user_repo: UserRepository, password_hasher: PasswordHasher
    ) -> None:
        self._user_repo = user_repo
        self._password_hasher = password_hasher

    def execute(self, command: SignUpCommand) -> SignUpResult:
        with classified("sign up"):
            if self._user_repo.get_by_email(command.email) is not None:
                raise ValidationFailedError(path="email", reason="already registered")
            user = self._user_repo.create(
                email=command.email,
                nickname=command.nickname,
                password_hash=self._password_hasher.hash(command.password),
            )

        logger.info("Registered user_id=%d", user.id)
        return SignUpResult(user_id=user.id, email=user.email, nickname=user.nickname)
