"""Resilience error classes raised by the request execution layer."""

from __future__ import annotations

from typing import Optional


class DeadlineExceededError(Exception):
    """A Gemini call did not finish within its per-call deadline.

    The underlying call is not cancelled; its eventual result is discarded.

    Attributes:
        timeout_seconds: The deadline that was exceeded.
        operation: Name of the operation that timed out.
        resource: Model id of the attempt that timed out, when known.
    """

    def __init__(
        self,
        message: str,
        timeout_seconds: Optional[float] = None,
        operation: Optional[str] = None,
        resource: Optional[str] = None,
    ):
        super().__init__(message)
        self.timeout_seconds = timeout_seconds
        self.operation = operation
        self.resource = resource
