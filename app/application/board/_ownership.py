"""
Classification of a conditional mutation that affected no rows.

The write itself is conditioned on (id, owner). When it misses, one
follow-up read decides which of the two guards failed.
"""

from app.domain.board.errors import ForbiddenError, PostNotFoundError
from app.domain.board.ports import PostRepository


def raise_for_missed_mutation(
    post_repo: PostRepository, post_id: int, user_id: int
) -> None:
    """Raise PostNotFoundError or ForbiddenError for a zero-row mutation.

    If the post was deleted concurrently the read finds nothing and the
    caller observes NotFound.
    """
    post = post_repo.get_by_id(post_id)
    if post is None:
        raise PostNotFoundError(post_id)
    if not post.is_owned_by(user_id):
        raise ForbiddenError(post_id=post_id, user_id=user_id)
    # Present and owned, yet the conditional write matched nothing.
    raise PostNotFoundError(post_id)
