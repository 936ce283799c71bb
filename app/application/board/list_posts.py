"""
Use case: List posts ordered by creation time.

Input: ListPostsQuery (raw sort value)
Output: list[PostSummaryResult]
Side effects: None.
Failure cases: UnexpectedError.
"""

import logging

from app.application.board._store import classified
from app.application.board.dtos import ListPostsQuery, PostSummaryResult
from app.domain.board.entities import SortDirection
from app.domain.board.ports import PostRepository

logger = logging.getLogger(__name__)


class ListPostsUseCase:
    """Normalizes the requested direction and returns the listing projection."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, query: ListPostsQuery) -> list[PostSummaryResult]:
        direction = SortDirection.normalize(query.sort)
        logger.debug("Listing posts sort=%r -> %s", query.sort, direction.value)

        with classified("list posts"):
            summaries = self._post_repo.list_summaries(direction)

        return [
            PostSummaryResult(
                id=s.id,
                title=s.title,
                category_id=s.category_id,
                created_at=s.created_at,
            )
            for s in summaries
        ]
