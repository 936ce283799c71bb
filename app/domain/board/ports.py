"""
Port interfaces (ABCs) for the board bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.board.entities import (
    Post,
    PostSummary,
    Session,
    SortDirection,
    User,
)


class UserRepository(ABC):
    """Port for reading and registering users."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> Optional[User]:
        """Return the user with this id, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        """Return the user registered under this email, or None."""
        raise NotImplementedError

    @abstractmethod
    def create(self, email: str, nickname: str, password_hash: str) -> User:
        """Persist a new user and return it with its assigned id.

        Raises:
            ValidationFailedError: path "email" when the email is taken,
                including when a concurrent sign-up claimed it first.
        """
        raise NotImplementedError


class SessionRepository(ABC):
    """Port for server-side login sessions."""

    @abstractmethod
    def get(self, token: str) -> Optional[Session]:
        """Return the session for a token, or None if unknown."""
        raise NotImplementedError

    @abstractmethod
    def save(self, session: Session) -> None:
        """Persist a new session."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, token: str) -> bool:
        """Remove a session. Returns True if a row was removed."""
        raise NotImplementedError


class PostRepository(ABC):
    """Port for post persistence.

    Mutations are conditioned on both id and owner so that the ownership
    check and the write happen in one atomic statement. Timestamps are
    maintained by the adapter.
    """

    @abstractmethod
    def get_by_id(self, post_id: int) -> Optional[Post]:
        """Return the full post, or None."""
        raise NotImplementedError

    @abstractmethod
    def list_summaries(self, direction: SortDirection) -> list[PostSummary]:
        """Return every post's listing projection ordered by creation time."""
        raise NotImplementedError

    @abstractmethod
    def create(
        self,
        user_id: int,
        title: str,
        content: str,
        category_id: Optional[int],
    ) -> Post:
        """Persist a new post owned by ``user_id``."""
        raise NotImplementedError

    @abstractmethod
    def update_owned(
        self, post_id: int, user_id: int, title: str, content: str
    ) -> bool:
        """Update title/content if the post exists and belongs to the user.

        Returns:
            True if exactly one row was changed.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_owned(self, post_id: int, user_id: int) -> bool:
        """Hard-delete the post if it exists and belongs to the user.

        Returns:
            True if exactly one row was removed.
        """
        raise NotImplementedError


class PasswordHasher(ABC):
    """Port for one-way password hashing."""

    @abstractmethod
    def hash(self, password: str) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, password: str, hashed: str) -> bool:
        raise NotImplementedError
