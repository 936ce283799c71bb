"""
Rate limiting configuration and setup.

Uses slowapi to enforce rate limits keyed by client address. The default
limit applies to every route through SlowAPIMiddleware.
Sign-up and login carry a stricter limit than the default.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings
from app.shared.errors.messages import message, resolve_locale

HTTP_429 = 429

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.rate_limit_default],
    enabled=settings.rate_limit_enabled,
)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Answer a rate-limited request with the standard failure envelope.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a localized message.
    """
    locale = resolve_locale(
        request.headers.get("accept-language"), settings.default_locale
    )
    return JSONResponse(
        status_code=HTTP_429,
        content={"success": False, "message": message("rate_limited", locale)},
        headers={"X-Error-Code": "RATE_LIMITED", "Retry-After": "60"},
    )
