"""
Basic application tests.

Validates that the FastAPI app starts correctly, the health endpoint
responds, and cross-cutting middleware is in place.
"""

import asyncio
from unittest.mock import MagicMock
from wsgiref.util import setup_testing_defaults

from fastapi.testclient import TestClient
from starlette.requests import Request

from app.core.config import settings
from app.main import app
from app.shared.security.headers import SECURE_HEADERS
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must return status and version fields."""
        body = client.get("/api/v1/health").json()
        assert body["status"] == "ok"
        assert "version" in body


class TestSecurityHeaders:
    def test_security_headers_present(self) -> None:
        """All security headers must be present on every response."""
        response = client.get("/api/v1/health")
        for name, value in SECURE_HEADERS.items():
            assert response.headers[name] == value

    def test_security_headers_on_errors(self) -> None:
        response = client.get("/api/v1/posts")
        assert response.status_code == 401
        assert response.headers["X-Frame-Options"] == "DENY"


class TestRateLimitHandler:
    def test_returns_enveloped_429(self) -> None:
        request = Request(
            {
                "type": "http",
                "method": "POST",
                "path": "/api/v1/users/login",
                "headers": [(b"accept-language", b"en")],
            }
        )
        response = asyncio.run(rate_limit_exceeded_handler(request, MagicMock()))
        assert response.status_code == 429
        assert response.headers["X-Error-Code"] == "RATE_LIMITED"
        assert b'"success":false' in response.body


class TestDefaultRateLimit:
    def test_default_limit_applies_to_undecorated_routes(self) -> None:
        allowed = int(settings.rate_limit_default.split("/")[0])
        limiter.reset()
        limiter.enabled = True
        try:
            statuses = [
                client.get("/api/v1/health").status_code for _ in range(allowed + 1)
            ]
        finally:
            limiter.enabled = False
            limiter.reset()

        assert statuses[:allowed] == [200] * allowed
        assert statuses[-1] == 429

    def test_limited_response_is_enveloped(self) -> None:
        allowed = int(settings.rate_limit_default.split("/")[0])
        limiter.reset()
        limiter.enabled = True
        try:
            for _ in range(allowed):
                client.get("/api/v1/health")
            response = client.get("/api/v1/health")
        finally:
            limiter.enabled = False
            limiter.reset()

        assert response.status_code == 429
        assert response.headers["X-Error-Code"] == "RATE_LIMITED"
        assert response.json()["success"] is False


class TestWsgiApplication:
    def test_serves_health(self) -> None:
        from app.wsgi import application

        environ: dict = {}
        setup_testing_defaults(environ)
        environ["PATH_INFO"] = "/api/v1/health"
        started = {}

        def start_response(status, headers, exc_info=None):
            started["status"] = status
            started["headers"] = dict(headers)
            return lambda data: None

        body = b"".join(application(environ, start_response))
        assert started["status"].startswith("200")
        assert b'"status":"ok"' in body
