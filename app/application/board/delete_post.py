"""
Use case: Permanently delete a post owned by the requester.

Input: DeletePostCommand (post_id, user_id)
Output: None
Side effects: Removes one post row (hard delete).
Failure cases: PostNotFoundError, ForbiddenError.
"""

import logging

from app.application.board._ownership import raise_for_missed_mutation
from app.application.board._store import classified
from app.application.board.dtos import DeletePostCommand
from app.domain.board.ports import PostRepository

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: DeletePostCommand) -> None:
        with classified("delete post"):
            deleted = self._post_repo.delete_owned(
                post_id=command.post_id, user_id=command.user_id
            )
            if not deleted:
                raise_for_missed_mutation(
                    self._post_repo, command.post_id, command.user_id
                )

        logger.info(
            "Deleted post id=%d by user_id=%d", command.post_id, command.user_id
        )
