"""
Adapter: User persistence.

Implements UserRepository port on SQLAlchemy Core.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any, Optional

from sqlalchemy import insert, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError

from app.domain.board.entities import User
from app.domain.board.errors import ValidationFailedError
from app.domain.board.ports import UserRepository
from app.infrastructure.board.database import as_utc, utcnow
from app.infrastructure.board.schema import users


class UserRepositoryAdapter(UserRepository):
    """Concrete adapter for user persistence."""

    def __init__(
        self, engine: Engine, clock: Callable[[], datetime] = utcnow
    ) -> None:
        self._engine = engine
        self._clock = clock

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self._fetch_one(select(users).where(users.c.id == user_id))

    def get_by_email(self, email: str) -> Optional[User]:
        return self._fetch_one(select(users).where(users.c.email == email))

    def create(self, email: str, nickname: str, password_hash: str) -> User:
        values = {
            "email": email,
            "nickname": nickname,
            "password_hash": password_hash,
            "created_at": self._clock(),
        }
        try:
            with self._engine.begin() as conn:
                result = conn.execute(insert(users).values(**values))
                user_id = result.inserted_primary_key[0]
        except IntegrityError as exc:
            # email is the only unique column on users
            raise ValidationFailedError(
                path="email", reason="already registered"
            ) from exc
        return User(id=user_id, **values)

    def _fetch_one(self, query: Any) -> Optional[User]:
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()
        if row is None:
            return None
        return User(
            id=row["id"],
            email=row["email"],
            nickname=row["nickname"],
            password_hash=row["password_hash"],
            created_at=as_utc(row["created_at"]),
        )
