"""
Use case: Revoke the session behind the current token.

Input: LogOutCommand (token)
Output: None
Side effects: Deletes one session row.
Failure cases: UnexpectedError.
"""

import logging

from app.application.board._store import classified
from app.application.board.dtos import LogOutCommand
from app.domain.board.ports import SessionRepository

logger = logging.getLogger(__name__)


class LogOutUseCase:
    def __init__(self, session_repo: SessionRepository) -> None:
        self._session_repo = session_repo

    def execute(self, command: LogOutCommand) -> None:
        with classified("log out"):
            removed = self._session_repo.delete(command.token)
        logger.info("Logout revoked_session=%s", removed)
