"""Request execution and resilience for Gemini calls.

Every outbound call goes through one shared ``ResilientExecutor``:

- ``RequestScheduler``: FIFO admission and minimum spacing between calls
- ``classify_error``: OVERLOADED / RATE_LIMITED / OTHER labelling
- ``RetryPolicy``: exponential backoff for rate limits
- ``ResourceSelector``: primary and fallback models per operation kind
- ``with_deadline``: optional per-call deadline
"""

from ui_designer_mcp.core.resilience.classify import classify_error
from ui_designer_mcp.core.resilience.deadline import with_deadline
from ui_designer_mcp.core.resilience.executor import ResilientExecutor
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
from ui_designer_mcp.core.resilience.selector import (
    ResourceSelection,
    ResourceSelector,
)

__all__ = [
    "Classification",
    "Clock",
    "ExecutorStats",
    "OperationKind",
    "RequestScheduler",
    "ResilienceConfig",
    "ResilientExecutor",
    "ResourceSelection",
    "ResourceSelector",
    "RetryContext",
    "RetryPolicy",
    "SleepFunc",
    "classify_error",
    "with_deadline",
]
