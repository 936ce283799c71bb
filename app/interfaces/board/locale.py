"""Localized success messages for route handlers."""

from fastapi import Request

from app.core.config import settings
from app.shared.errors.messages import message, resolve_locale


def request_message(request: Request, key: str) -> str:
    """Return the catalog message for ``key`` in the request's locale."""
    locale = resolve_locale(
        request.headers.get("accept-language"), settings.default_locale
    )
    return message(key, locale)
