"""
Pydantic schemas for board API request/response validation.

Wire names are camelCase (``categoryId``, ``passwordConfirm``); Python
attributes stay snake_case. Every response is a {success, message?, data?}
envelope. No business logic belongs here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from app.core.config import settings

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
EMAIL_MAX_LEN = 254


class CamelModel(BaseModel):
    """Base schema mapping snake_case attributes to camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Requests ─────────────────────────────────────────────────────────


class SignUpRequest(CamelModel):
    """Request schema for account registration.

    Attributes:
        email: Login email address.
        nickname: Display name.
        password: Plain-text password, hashed before storage.
        password_confirm: Must equal ``password``.
    """

    email: str = Field(..., max_length=EMAIL_MAX_LEN, pattern=EMAIL_PATTERN)
    nickname: str = Field(..., min_length=settings.nickname_min_length)
    password: str = Field(..., min_length=settings.password_min_length)
    password_confirm: str

    @field_validator("password_confirm")
    @classmethod
    def _matches_password(cls, value: str, info: ValidationInfo) -> str:
        password = info.data.get("password")
        if password is not None and value != password:
            raise ValueError("password confirmation does not match")
        return value


class LogInRequest(CamelModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class CreatePostRequest(CamelModel):
    """Request schema for creating a post.

    Emptiness of title/content is checked by the use case so that both
    a missing and a blank field fail the same way.
    """

    title: Optional[str] = None
    content: Optional[str] = None
    category_id: Optional[int] = None


class UpdatePostRequest(CamelModel):
    title: Optional[str] = None
    content: Optional[str] = None


# ── Response payloads ────────────────────────────────────────────────


class PostItem(CamelModel):
    """Full post record."""

    id: int
    user_id: int
    title: str
    content: str
    category_id: Optional[int]
    created_at: datetime
    updated_at: datetime


class PostSummaryItem(CamelModel):
    """Listing projection of a post."""

    id: int
    title: str
    category_id: Optional[int]
    created_at: datetime


class AccountItem(CamelModel):
    user_id: int
    email: str
    nickname: str


class SessionItem(CamelModel):
    """Issued session credential. ``token`` also travels in the cookie."""

    token: str
    token_type: str
    expires_at: datetime


# ── Envelopes ────────────────────────────────────────────────────────


class MessageResponse(BaseModel):
    """Success envelope without a payload."""

    success: bool = True
    message: str


class ErrorResponse(BaseModel):
    """Failure envelope. Never carries ``data``."""

    success: bool = False
    message: str


class PostResponse(BaseModel):
    success: bool = True
    data: PostItem


class CreatedPostResponse(BaseModel):
    success: bool = True
    message: str
    data: PostItem


class PostListResponse(BaseModel):
    success: bool = True
    data: list[PostSummaryItem]


class AccountResponse(BaseModel):
    success: bool = True
    message: str
    data: AccountItem


class SessionResponse(BaseModel):
    success: bool = True
    message: str
    data: SessionItem


class HealthResponse(BaseModel):
    """Response schema for the health endpoint."""

    status: str
    version: str
