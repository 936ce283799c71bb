"""
Shared fixtures for the board test suite.

Every test gets its own in-memory SQLite store and a deterministic clock.
The API client is wired to both through dependency overrides.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DEFAULT_LOCALE", "en")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import datetime, timedelta, timezone  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.infrastructure.board.database import create_db_engine, init_database  # noqa: E402
from app.interfaces.board.dependencies import get_clock, get_engine  # noqa: E402
from app.main import app  # noqa: E402

API = "/api/v1"


class FakeClock:
    """Clock that advances one second on every read.

    Consecutive writes therefore get strictly increasing timestamps.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def engine():
    """Fresh in-memory store with all board tables."""
    db = create_db_engine("sqlite://")
    init_database(db)
    yield db
    db.dispose()


@pytest.fixture
def client(engine, clock):
    """TestClient bound to the per-test store and clock."""
    app.dependency_overrides[get_engine] = lambda: engine
    app.dependency_overrides[get_clock] = lambda: clock
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


def register(
    client: TestClient,
    email: str = "writer@example.com",
    nickname: str = "writer",
    password: str = "secret-pw",
) -> dict[str, str]:
    """Sign up and log in, returning Authorization headers for the user.

    The login cookie is dropped so several users can share one client.
    """
    response = client.post(
        f"{API}/users/signup",
        json={
            "email": email,
            "nickname": nickname,
            "password": password,
            "passwordConfirm": password,
        },
    )
    assert response.status_code == 201, response.text

    response = client.post(
        f"{API}/users/login", json={"email": email, "password": password}
    )
    assert response.status_code == 200, response.text
    client.cookies.clear()

    data = response.json()["data"]
    return {"Authorization": f"{data['tokenType']} {data['token']}"}
