"""
Adapter: Session persistence.

Implements SessionRepository port on SQLAlchemy Core.
Tokens are looked up by primary key; nothing here logs token values.
"""

from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.engine import Engine

from app.domain.board.entities import Session
from app.domain.board.ports import SessionRepository
from app.infrastructure.board.database import as_utc
from app.infrastructure.board.schema import sessions


class SessionRepositoryAdapter(SessionRepository):
    """Concrete adapter for login sessions."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get(self, token: str) -> Optional[Session]:
        query = select(sessions).where(sessions.c.token == token)
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()
        if row is None:
            return None
        return Session(
            token=row["token"],
            user_id=row["user_id"],
            token_type=row["token_type"],
            expires_at=as_utc(row["expires_at"]),
            created_at=as_utc(row["created_at"]),
        )

    def save(self, session: Session) -> None:
        with self._engine.begin() as conn:
            conn.execute(
                insert(sessions).values(
                    token=session.token,
                    user_id=session.user_id,
                    token_type=session.token_type,
                    expires_at=session.expires_at,
                    created_at=session.created_at,
                )
            )

    def delete(self, token: str) -> bool:
        with self._engine.begin() as conn:
            rowcount = conn.execute(
                delete(sessions).where(sessions.c.token == token)
            ).rowcount
        return rowcount == 1
