"""
Domain entities for the board bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


class SortDirection(Enum):
    """Ordering applied to post listings by creation time."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def normalize(cls, raw: Optional[str]) -> "SortDirection":
        """Map a free-form query value to a direction, defaulting to DESC."""
        if raw is None:
            return cls.DESC
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return cls.DESC


@dataclass(frozen=True)
class User:
    """A registered account. Only ``id`` matters to the post lifecycle."""

    id: int
    email: str
    nickname: str
    password_hash: str
    created_at: datetime


@dataclass(frozen=True)
class Session:
    """A server-side login session backing an opaque bearer token."""

    token: str
    user_id: int
    token_type: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime) -> bool:
        """Return True once ``now`` has reached the expiry instant."""
        return now >= self.expires_at


@dataclass(frozen=True)
class Post:
    """A post owned by the user who created it.

    ``user_id`` is fixed at creation and never changes.
    """

    id: int
    user_id: int
    title: str
    content: str
    category_id: Optional[int]
    created_at: datetime
    updated_at: datetime

    def is_owned_by(self, user_id: int) -> bool:
        return self.user_id == user_id


@dataclass(frozen=True)
class PostSummary:
    """Listing projection of a post."""

    id: int
    title: str
    category_id: Optional[int]
    created_at: datetime
