"""
Data Transfer Objects for the board application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for creating a post.

    Attributes:
        user_id: Verified id of the requester, becomes the owner.
        title: Post title. Must be non-empty.
        content: Post body. Must be non-empty.
        category_id: Optional category reference.
    """

    user_id: int
    title: Optional[str]
    content: Optional[str]
    category_id: Optional[int] = None


@dataclass(frozen=True)
class ListPostsQuery:
    """Input DTO for listing posts.

    Attributes:
        sort: Raw sort value from the query string (any case, may be absent).
    """

    sort: Optional[str] = None


@dataclass(frozen=True)
class GetPostQuery:
    post_id: int


@dataclass(frozen=True)
class UpdatePostCommand:
    """Input DTO for updating a post's title and content."""

    post_id: int
    user_id: int
    title: Optional[str]
    content: Optional[str]


@dataclass(frozen=True)
class DeletePostCommand:
    post_id: int
    user_id: int


@dataclass(frozen=True)
class PostResult:
    """Output DTO for a full post record."""

    id: int
    user_id: int
    title: str
    content: str
    category_id: Optional[int]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class PostSummaryResult:
    """Output DTO for a post listing row."""

    id: int
    title: str
    category_id: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class SignUpCommand:
    """Input DTO for account registration.

    Field-level format rules are enforced by the request schema;
    the use case only guards email uniqueness.
    """

    email: str
    nickname: str
    password: str


@dataclass(frozen=True)
class SignUpResult:
    user_id: int
    email: str
    nickname: str


@dataclass(frozen=True)
class LogInCommand:
    email: str
    password: str


@dataclass(frozen=True)
class LogInResult:
    """Output DTO for a successful login.

    Attributes:
        token: Opaque session token.
        token_type: Credential scheme, always "Bearer".
        expires_at: When the session stops being accepted.
    """

    token: str
    token_type: str
    expires_at: datetime


@dataclass(frozen=True)
class LogOutCommand:
    token: str


@dataclass(frozen=True)
class VerifyTokenQuery:
    """Input DTO for token verification.

    Attributes:
        credential: Raw "<type> <token>" value from cookie or header.
    """

    credential: Optional[str]


@dataclass(frozen=True)
class AuthenticatedUser:
    """Verified identity attached to a request."""

    user_id: int
    token: str
