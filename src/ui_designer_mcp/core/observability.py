"""
Observability utilities for ui-designer-mcp.

Provides audit logging and the ``mcp_tool`` decorator applied to every
registered tool. Records go through the standard logger so they end up on
stderr next to the rest of the server logs.

FastMCP integration:

    mcp = FastMCP("ui-designer-mcp")

    @mcp.tool()
    @mcp_tool(tool_name="generate_component")
    async def generate_component(component_type: str) -> dict:
        ...
"""

import asyncio
import functools
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Dict, Optional, TypeVar

from ui_designer_mcp.core.context import get_correlation_id, sync_request_context

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AuditEventType(Enum):
    """Types of audit events."""

    TOOL_INVOCATION = "tool_invocation"
    RATE_LIMIT = "rate_limit"
    RETRY = "retry"
    FALLBACK = "fallback"
    DEADLINE_EXCEEDED = "deadline_exceeded"
    CONFIG_CHANGE = "config_change"


@dataclass
class AuditEvent:
    """Structured audit event."""

    event_type: AuditEventType
    details: Dict[str, Any] = field(default_factory=dict)
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
    correlation_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = {
            "event_type": self.event_type.value,
            "timestamp": self.timestamp,
            "details": self.details,
        }
        if self.correlation_id:
            result["correlation_id"] = self.correlation_id
        return result


class AuditLogger:
    """
    Structured audit logging.

    Audit records are written to a separate logger for easy filtering.
    """

    def __init__(self):
        self._logger = logging.getLogger(f"{__name__}.audit")

    def log(self, event: AuditEvent) -> None:
        """Log an audit event."""
        if event.correlation_id is None:
            event.correlation_id = get_correlation_id() or None
        self._logger.info(
            f"AUDIT: {event.event_type.value}", extra={"audit": event.to_dict()}
        )

    def rate_limit(self, resource: str, attempt: int, delay: float) -> None:
        """Log a rate-limited call that will be retried."""
        self.log(
            AuditEvent(
                event_type=AuditEventType.RATE_LIMIT,
                details={
                    "resource": resource,
                    "attempt": attempt,
                    "delay_ms": round(delay * 1000),
                },
            )
        )

    def tool_invocation(
        self,
        tool_name: str,
        success: bool = True,
        duration_ms: Optional[float] = None,
        **details: Any,
    ) -> None:
        """Log tool invocation."""
        self.log(
            AuditEvent(
                event_type=AuditEventType.TOOL_INVOCATION,
                details={
                    "tool": tool_name,
                    "success": success,
                    "duration_ms": duration_ms,
                    **details,
                },
            )
        )


# Global audit logger
_audit = AuditLogger()


def get_audit_logger() -> AuditLogger:
    """Get the global audit logger."""
    return _audit


def audit_log(event_type: str, **details: Any) -> None:
    """
    Convenience function for audit logging.

    Args:
        event_type: Type of event (tool_invocation, rate_limit, retry,
                    fallback, deadline_exceeded, config_change)
        **details: Additional details to include in the audit log
    """
    try:
        event_enum = AuditEventType(event_type)
    except ValueError:
        event_enum = AuditEventType.TOOL_INVOCATION
        details["original_event_type"] = event_type

    _audit.log(AuditEvent(event_type=event_enum, details=details))


def mcp_tool(
    tool_name: Optional[str] = None, audit: bool = True
) -> Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Decorator for MCP tool handlers with observability.

    Automatically:
    - Binds a fresh correlation id for the duration of the call
    - Times the call
    - Creates an audit log entry

    Args:
        tool_name: Override tool name (defaults to function name)
        audit: Whether to create audit log entries
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        name = tool_name or func.__name__

        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> T:
            with sync_request_context(correlation_id=None) as correlation_id:
                start = time.perf_counter()
                success = True
                error_msg = None

                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    success = False
                    error_msg = str(e)
                    raise
                finally:
                    duration_ms = (time.perf_counter() - start) * 1000
                    logger.debug(
                        "Tool %s finished in %.1fms",
                        name,
                        duration_ms,
                        extra={"correlation_id": correlation_id},
                    )
                    if audit:
                        _audit.tool_invocation(
                            tool_name=name,
                            success=success,
                            duration_ms=round(duration_ms, 2),
                            error=error_msg,
                        )

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> T:
            with sync_request_context(correlation_id=None):
                start = time.perf_counter()
                success = True
                error_msg = None

                try:
                    return func(*args, **kwargs)
                except Exception as e:
                    success = False
                    error_msg = str(e)
                    raise
                finally:
                    duration_ms = (time.perf_counter() - start) * 1000
                    if audit:
                        _audit.tool_invocation(
                            tool_name=name,
                            success=success,
                            duration_ms=round(duration_ms, 2),
                            error=error_msg,
                        )

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator
