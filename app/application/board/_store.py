"""
Store failure classification shared by the board use cases.

Classified errors pass through untouched; anything else raised while
talking to a port is re-raised as UnexpectedError, chained to the cause.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from app.domain.board.errors import (
    BoardDomainError,
    UnexpectedError,
    ValidationFailedError,
)

logger = logging.getLogger(__name__)


@contextmanager
def classified(operation: str) -> Iterator[None]:
    """Wrap a block of port calls so no raw store failure escapes."""
    try:
        yield
    except BoardDomainError:
        raise
    except Exception as exc:
        logger.error("Store failure during %s: %s", operation, type(exc).__name__)
        raise UnexpectedError(f"{operation} failed") from exc


def require_text(value: str | None, path: str) -> str:
    """Return ``value`` if it is a non-blank string, else fail validation."""
    if value is None or not value.strip():
        raise ValidationFailedError(path=path, reason="must not be empty")
    return value
