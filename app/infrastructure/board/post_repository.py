"""
Adapter: Post persistence.

Implements PostRepository port on SQLAlchemy Core.
Update and delete are single statements conditioned on (id, user_id),
so the ownership guard and the write cannot be separated by another request.
"""

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from app.domain.board.entities import Post, PostSummary, SortDirection
from app.domain.board.ports import PostRepository
from app.infrastructure.board.database import as_utc, utcnow
from app.infrastructure.board.schema import posts

logger = logging.getLogger(__name__)

# Ids are signed 64-bit integers; anything outside cannot name a row.
MAX_POST_ID = 2**63 - 1


def _is_storable_id(post_id: int) -> bool:
    return 1 <= post_id <= MAX_POST_ID


class PostRepositoryAdapter(PostRepository):
    """Concrete adapter for post persistence.

    Args:
        engine: SQLAlchemy engine of the board store.
        clock: Source of created_at/updated_at values.
    """

    def __init__(
        self, engine: Engine, clock: Callable[[], datetime] = utcnow
    ) -> None:
        self._engine = engine
        self._clock = clock

    def get_by_id(self, post_id: int) -> Optional[Post]:
        if not _is_storable_id(post_id):
            return None
        query = select(posts).where(posts.c.id == post_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()
        return _to_post(row) if row is not None else None

    def list_summaries(self, direction: SortDirection) -> list[PostSummary]:
        """Return listing rows ordered by created_at, ties broken by id.

        Args:
            direction: Applied to both ordering keys.
        """
        if direction is SortDirection.ASC:
            order = (posts.c.created_at.asc(), posts.c.id.asc())
        else:
            order = (posts.c.created_at.desc(), posts.c.id.desc())

        query = select(
            posts.c.id, posts.c.title, posts.c.category_id, posts.c.created_at
        ).order_by(*order)
        with self._engine.connect() as conn:
            rows = conn.execute(query).mappings().all()

        return [
            PostSummary(
                id=row["id"],
                title=row["title"],
                category_id=row["category_id"],
                created_at=as_utc(row["created_at"]),
            )
            for row in rows
        ]

    def create(
        self,
        user_id: int,
        title: str,
        content: str,
        category_id: Optional[int],
    ) -> Post:
        now = self._clock()
        values = {
            "user_id": user_id,
            "title": title,
            "content": content,
            "category_id": category_id,
            "created_at": now,
            "updated_at": now,
        }
        with self._engine.begin() as conn:
            result = conn.execute(insert(posts).values(**values))
            post_id = result.inserted_primary_key[0]

        return Post(id=post_id, **values)

    def update_owned(
        self, post_id: int, user_id: int, title: str, content: str
    ) -> bool:
        if not _is_storable_id(post_id):
            return False
        statement = (
            update(posts)
            .where(posts.c.id == post_id, posts.c.user_id == user_id)
            .values(title=title, content=content, updated_at=self._clock())
        )
        with self._engine.begin() as conn:
            rowcount = conn.execute(statement).rowcount

        logger.debug("update_owned post_id=%d rowcount=%d", post_id, rowcount)
        return rowcount == 1

    def delete_owned(self, post_id: int, user_id: int) -> bool:
        if not _is_storable_id(post_id):
            return False
        statement = delete(posts).where(
            posts.c.id == post_id, posts.c.user_id == user_id
        )
        with self._engine.begin() as conn:
            rowcount = conn.execute(statement).rowcount

        logger.debug("delete_owned post_id=%d rowcount=%d", post_id, rowcount)
        return rowcount == 1


def _to_post(row: Any) -> Post:
    return Post(
        id=row["id"],
        user_id=row["user_id"],
        title=row["title"],
        content=row["content"],
        category_id=row["category_id"],
        created_at=as_utc(row["created_at"]),
        updated_at=as_utc(row["updated_at"]),
    )
