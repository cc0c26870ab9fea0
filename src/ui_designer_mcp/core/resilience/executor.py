"""Resilient execution of Gemini calls.

Combines admission/pacing, the optional deadline, rate-limit backoff and a
single fallback-model substitution around one external call.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional, TypeVar, Union

from ui_designer_mcp.core.context import get_correlation_id
from ui_designer_mcp.core.errors.resilience import DeadlineExceededError
from ui_designer_mcp.core.observability import audit_log, get_audit_logger
from ui_designer_mcp.core.resilience.classify import classify_error
from ui_designer_mcp.core.resilience.deadline import with_deadline
from ui_designer_mcp.core.resilience.models import (
    Classification,
    Clock,
    ExecutorStats,
    OperationKind,
    ResilienceConfig,
    RetryContext,
    SleepFunc,
)
from ui_designer_mcp.core.resilience.retry import RetryPolicy
from ui_designer_mcp.core.resilience.scheduler import RequestScheduler
from ui_designer_mcp.core.resilience.selector import ResourceSelector

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ResilientExecutor:
    """Runs operations through the shared scheduler with recovery.

    Recovery rules for a failed attempt:
    1. DeadlineExceededError surfaces immediately
    2. OVERLOADED switches to the fallback model once, without using a retry
    3. RATE_LIMITED sleeps the backoff delay and re-queues, up to max_retries
    4. Anything else surfaces unchanged

    Example:
        >>> text = await executor.execute(
        ...     OperationKind.TEXT,
        ...     lambda model: client.generate_text(model, prompt),
        ... )
    """

    def __init__(
        self,
        scheduler: RequestScheduler,
        selector: ResourceSelector,
        retry_policy: Optional[RetryPolicy] = None,
        *,
        default_deadline: float = 0.0,
        sleep: Optional[SleepFunc] = None,
    ) -> None:
        self.scheduler = scheduler
        self.selector = selector
        self.retry_policy = retry_policy or RetryPolicy()
        self.default_deadline = default_deadline
        self._sleep = sleep or asyncio.sleep
        self.stats = ExecutorStats()

    @classmethod
    def from_config(
        cls,
        config: ResilienceConfig,
        selector: ResourceSelector,
        *,
        clock: Clock = time.monotonic,
        sleep: Optional[SleepFunc] = None,
    ) -> "ResilientExecutor":
        """Build an executor and its scheduler from resilience settings."""
        scheduler = RequestScheduler(
            config.min_request_interval, clock=clock, sleep=sleep
        )
        return cls(
            scheduler,
            selector,
            RetryPolicy(
                max_retries=config.max_retries,
                initial_delay=config.initial_retry_delay,
            ),
            default_deadline=config.timeout,
            sleep=sleep,
        )

    async def execute(
        self,
        kind: Union[OperationKind, str],
        build_call: Callable[[str], Awaitable[T]],
        preferred_resource: Optional[str] = None,
        *,
        deadline: Optional[float] = None,
        operation_name: Optional[str] = None,
    ) -> T:
        """Execute ``build_call`` against the selected model.

        Args:
            kind: Operation kind, selects primary and fallback models
            build_call: Performs exactly one external call for a model id
            preferred_resource: Model to try first instead of the primary
            deadline: Per-attempt deadline in seconds; None uses the default,
                0 disables
            operation_name: Label used in logs and timeout messages

        Returns:
            Result of the first successful attempt.

        Raises:
            DeadlineExceededError: If an attempt exceeds its deadline.
            Exception: The last failure once recovery is exhausted.
        """
        kind = OperationKind(kind)
        context = RetryContext(resource=self.selector.resolve(kind, preferred_resource))
        max_duration = self.default_deadline if deadline is None else deadline
        label = operation_name or f"{kind.value} generation"
        self.stats.calls += 1

        while True:
            try:
                async with self.scheduler.admit():
                    return await with_deadline(
                        build_call(context.resource),
                        max_duration,
                        operation_name=label,
                    )
            except DeadlineExceededError as exc:
                exc.resource = context.resource
                self.stats.timeouts += 1
                self._audit(
                    "deadline_exceeded",
                    resource=context.resource,
                    timeout_ms=round(max_duration * 1000),
                )
                raise
            except Exception as exc:
                classification = classify_error(exc)

                if (
                    classification is Classification.OVERLOADED
                    and not context.fallback_used
                ):
                    fallback = self.selector.fallback_for(kind)
                    logger.warning(
                        "Model %s is overloaded, retrying with fallback model %s",
                        context.resource,
                        fallback,
                    )
                    self._audit(
                        "fallback", resource=context.resource, fallback=fallback
                    )
                    context.use_fallback(fallback)
                    self.stats.fallbacks += 1
                    continue

                if self.retry_policy.should_retry(classification, context.attempt):
                    delay = self.retry_policy.backoff_delay(context.attempt)
                    logger.warning(
                        "Rate limit hit on %s, retrying in %.0fms (attempt %d/%d)",
                        context.resource,
                        delay * 1000,
                        context.attempt + 1,
                        self.retry_policy.max_retries,
                    )
                    get_audit_logger().rate_limit(
                        context.resource, context.attempt + 1, delay
                    )
                    await self._sleep(delay)
                    context.attempt += 1
                    self.stats.retries += 1
                    continue

                self.stats.failures += 1
                logger.debug(
                    "%s failed on %s (%s): %s",
                    label,
                    context.resource,
                    classification.value,
                    exc,
                )
                raise

    def _audit(self, event_type: str, **details: object) -> None:
        correlation_id = get_correlation_id()
        if correlation_id:
            details["correlation_id"] = correlation_id
        audit_log(event_type, **details)
