"""Engine construction and table creation for the board store.

SQLAlchemy Core (not ORM): every repository call is a single statement
inside its own transaction, so there is no session state to manage.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

from app.infrastructure.board.schema import metadata

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from SQLite."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def create_db_engine(url: str) -> Engine:
    """Create an engine for ``url``.

    SQLite gets foreign keys enabled and cross-thread access, since sync
    endpoints run in the server threadpool. In-memory SQLite shares one
    connection so every thread sees the same database.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    kwargs: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_conn: Any, _: Any) -> None:
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    return engine


def init_database(engine: Engine) -> None:
    """Create all board tables. Idempotent."""
    metadata.create_all(engine)
    logger.info("Board tables ready on %s", engine.url.render_as_string(hide_password=True))
