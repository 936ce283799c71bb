"""
Use case: Update the title and content of a post owned by the requester.

Input: UpdatePostCommand (post_id, user_id, title, content)
Output: None
Side effects: Updates one post row and its updated_at timestamp.
Failure cases: ValidationFailedError, PostNotFoundError, ForbiddenError.
"""

import logging

from app.application.board._ownership import raise_for_missed_mutation
from app.application.board._store import classified, require_text
from app.application.board.dtos import UpdatePostCommand
from app.domain.board.ports import PostRepository

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Applies the ownership guard and the write in one conditional update."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: UpdatePostCommand) -> None:
        """Run the update-post use case.

        Args:
            command: Target post, requester and the new field values.
        """
        title = require_text(command.title, "title")
        content = require_text(command.content, "content")

        with classified("update post"):
            updated = self._post_repo.update_owned(
                post_id=command.post_id,
                user_id=command.user_id,
                title=title,
                content=content,
            )
            if not updated:
                raise_for_missed_mutation(
                    self._post_repo, command.post_id, command.user_id
                )

        logger.info(
            "Updated post id=%d by user_id=%d", command.post_id, command.user_id
        )
