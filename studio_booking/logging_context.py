"""Session ID logging context for tracing one guest's booking flow.

Provides a session-aware logger that attaches a session ID to every
log message, so wizard steps, re-pricing and submission of a single
booking can be followed in the logs.

Usage:
    from studio_booking.logging_context import get_session_logger, set_session_id

    set_session_id("BKS-abc123")
    logger = get_session_logger(__name__)
    logger.info("Wizard started")  # record.session_id == "BKS-abc123"
"""

import logging
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

_session_id: ContextVar[str] = ContextVar("session_id", default="NO_SESSION")


def new_session_id() -> str:
    """Generate a fresh booking session ID."""
    return f"BKS-{uuid.uuid4().hex[:8]}"


def set_session_id(session_id: str) -> None:
    """Set the session ID for the current context."""
    _session_id.set(session_id)


def get_session_id() -> str:
    """Retrieve the current session ID."""
    return _session_id.get()


@contextmanager
def session_context(session_id: str) -> Iterator[None]:
    """Tag records with ``session_id`` inside the block, then restore the previous ID."""
    token = _session_id.set(session_id)
    try:
        yield
    finally:
        _session_id.reset(token)


class SessionIdFilter(logging.Filter):
    """Injects session_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = _session_id.get()  # type: ignore[attr-defined]
        return True


def get_session_logger(name: str) -> logging.Logger:
    """Return a logger with the SessionIdFilter attached.

    The filter adds ``session_id`` to each record so formatters can
    include ``%(session_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, SessionIdFilter) for f in logger.filters):
        logger.addFilter(SessionIdFilter())
    return logger
