"""Entity-to-DTO mapping shared by the post use cases."""

from app.application.board.dtos import PostResult
from app.domain.board.entities import Post


def to_post_result(post: Post) -> PostResult:
    return PostResult(
        id=post.id,
        user_id=post.user_id,
        title=post.title,
        content=post.content,
        category_id=post.category_id,
        created_at=post.created_at,
        updated_at=post.updated_at,
    )
