"""
Use case: Create a post owned by the requester.

Input: CreatePostCommand (user_id, title, content, optional category_id)
Output: PostResult
Side effects: Inserts one post row.
Failure cases: ValidationFailedError (title/content), UserNotFoundError.
"""

import logging

from app.application.board._store import classified, require_text
from app.application.board.dtos import CreatePostCommand, PostResult
from app.application.board.mappers import to_post_result
from app.domain.board.errors import UserNotFoundError
from app.domain.board.ports import PostRepository, UserRepository

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Validates input, confirms the requester exists, then persists the post."""

    def __init__(
        self, post_repo: PostRepository, user_repo: UserRepository
    ) -> None:
        self._post_repo = post_repo
        self._user_repo = user_repo

    def execute(self, command: CreatePostCommand) -> PostResult:
        """Run the create-post use case.

        Args:
            command: The requester id and the new post's fields.

        Returns:
            The stored post, including its generated id and timestamps.
        """
        title = require_text(command.title, "title")
        content = require_text(command.content, "content")

        with classified("create post"):
            if self._user_repo.get_by_id(command.user_id) is None:
                raise UserNotFoundError(command.user_id)
            post = self._post_repo.create(
                user_id=command.user_id,
                title=title,
                content=content,
                category_id=command.category_id,
            )

        logger.info("Created post id=%d for user_id=%d", post.id, post.user_id)
        return to_post_result(post)
