"""Optional wall-clock deadline for a single Gemini call."""

import asyncio
import logging
from typing import Awaitable, Optional, TypeVar

from ui_designer_mcp.core.errors.resilience import DeadlineExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_deadline(
    operation: Awaitable[T],
    max_duration: Optional[float],
    *,
    operation_name: Optional[str] = None,
) -> T:
    """Await ``operation``, giving up after ``max_duration`` seconds.

    A missing or non-positive ``max_duration`` awaits the operation as is.
    When the deadline wins, the operation keeps running in the background and
    its eventual outcome is discarded.

    Raises:
        DeadlineExceededError: If the deadline elapses first.
    """
    if max_duration is None or max_duration <= 0:
        return await operation

    task = asyncio.ensure_future(operation)
    try:
        done, _ = await asyncio.wait({task}, timeout=max_duration)
    except asyncio.CancelledError:
        task.add_done_callback(_discard_result)
        raise

    if task in done:
        return task.result()

    task.add_done_callback(_discard_result)
    label = operation_name or "Gemini request"
    logger.warning("%s exceeded its %.1fs deadline", label, max_duration)
    raise DeadlineExceededError(
        f"{label} timed out after {max_duration * 1000:.0f}ms",
        timeout_seconds=max_duration,
        operation=operation_name,
    )


def _discard_result(task: "asyncio.Future[object]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.debug("Abandoned request finished with %s: %s", type(exc).__name__, exc)
