"""
Use case: Retrieve a single post.

Input: GetPostQuery (post_id)
Output: PostResult
Side effects: None.
Failure cases: PostNotFoundError.
"""

from app.application.board._store import classified
from app.application.board.dtos import GetPostQuery, PostResult
from app.application.board.mappers import to_post_result
from app.domain.board.errors import PostNotFoundError
from app.domain.board.ports import PostRepository


class GetPostUseCase:
    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, query: GetPostQuery) -> PostResult:
        with classified("get post"):
            post = self._post_repo.get_by_id(query.post_id)
        if post is None:
            raise PostNotFoundError(query.post_id)
        return to_post_result(post)
