"""Request-scoped context for tool invocations.

Correlation ids live in a ContextVar so they follow a tool call across
awaits, including the queued Gemini calls made on its behalf.
"""

import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id(prefix: str = "req") -> str:
    """Generate a new correlation id such as ``tool-1f2e3d4c5b6a``."""
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def get_correlation_id() -> str:
    """Return the correlation id of the current request, or ``""``."""
    return _correlation_id.get()


@contextmanager
def sync_request_context(*, correlation_id: Optional[str] = None) -> Iterator[str]:
    """Bind a correlation id for the duration of the block.

    Yields:
        The correlation id in effect inside the block.
    """
    cid = correlation_id or generate_correlation_id()
    token = _correlation_id.set(cid)
    try:
        yield cid
    finally:
        _correlation_id.reset(token)
