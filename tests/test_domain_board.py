"""
Tests for the board domain layer.

Tests entities and error classes in isolation.
No external dependencies or IO required.
"""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.board.entities import Post, Session, SortDirection
from app.domain.board.errors import (
    BoardDomainError,
    ErrorKind,
    ForbiddenError,
    PostNotFoundError,
    TokenExpiredError,
    TokenMissingError,
    TokenTypeMismatchError,
    UnexpectedError,
    UserNotFoundError,
    ValidationFailedError,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


class TestSortDirection:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("asc", SortDirection.ASC),
            ("ASC", SortDirection.ASC),
            (" Asc ", SortDirection.ASC),
            ("DESC", SortDirection.DESC),
            ("desc", SortDirection.DESC),
            ("bogus", SortDirection.DESC),
            ("", SortDirection.DESC),
            (None, SortDirection.DESC),
        ],
    )
    def test_normalize(self, raw, expected) -> None:
        assert SortDirection.normalize(raw) is expected


class TestSession:
    def test_expiry_is_inclusive(self) -> None:
        session = Session(
            token="t",
            user_id=1,
            token_type="Bearer",
            expires_at=NOW + timedelta(minutes=5),
            created_at=NOW,
        )
        assert not session.is_expired(NOW)
        assert session.is_expired(NOW + timedelta(minutes=5))


class TestPost:
    def test_ownership(self) -> None:
        post = Post(
            id=1,
            user_id=7,
            title="T",
            content="C",
            category_id=None,
            created_at=NOW,
            updated_at=NOW,
        )
        assert post.is_owned_by(7)
        assert not post.is_owned_by(8)


class TestDomainErrors:
    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (TokenMissingError(), ErrorKind.TOKEN_MISSING),
            (TokenExpiredError(), ErrorKind.TOKEN_EXPIRED),
            (TokenTypeMismatchError("Basic"), ErrorKind.TOKEN_TYPE_MISMATCH),
            (UserNotFoundError(3), ErrorKind.USER_NOT_FOUND),
            (ValidationFailedError("title"), ErrorKind.VALIDATION_FAILED),
            (PostNotFoundError(3), ErrorKind.NOT_FOUND),
            (ForbiddenError(3, 4), ErrorKind.FORBIDDEN),
            (UnexpectedError("boom"), ErrorKind.UNEXPECTED),
        ],
    )
    def test_each_error_pins_its_kind(self, error, kind) -> None:
        assert isinstance(error, BoardDomainError)
        assert error.kind is kind

    def test_validation_error_keeps_path(self) -> None:
        error = ValidationFailedError(path="passwordConfirm", reason="mismatch")
        assert error.path == "passwordConfirm"
        assert "passwordConfirm" in error.message

    def test_post_not_found_message_contains_id(self) -> None:
        assert "42" in PostNotFoundError(42).message
