"""Shared helpers for the tool modules.

Holds the per-server service bundle handed to every handler and the mapping
from executor failures to response envelopes.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any, Optional

import httpx
from google.genai import errors as genai_errors

from ui_designer_mcp.config.server import ServerConfig
from ui_designer_mcp.core.context import generate_correlation_id, get_correlation_id
from ui_designer_mcp.core.errors import DeadlineExceededError, error_to_response
from ui_designer_mcp.core.gem import GemConfigStore, GemGenerator, Workspace
from ui_designer_mcp.core.generation import DesignGenerator
from ui_designer_mcp.core.resilience import (
    Classification,
    OperationKind,
    ResilientExecutor,
    classify_error,
)
from ui_designer_mcp.core.responses import (
    ai_provider_error,
    ai_provider_timeout_error,
    ai_provider_unavailable_error,
    ai_rate_limit_error,
    internal_error,
    sanitize_error_message,
    validation_error,
)

logger = logging.getLogger(__name__)


@dataclass
class DesignServices:
    """Everything a tool handler needs, built once per server."""

    config: ServerConfig
    executor: ResilientExecutor
    generator: DesignGenerator
    workspace: Workspace
    gem_store: GemConfigStore
    gem_generator: GemGenerator
    http_client: Optional[httpx.AsyncClient] = None


def build_request_id(tool_name: str) -> str:
    """Return an existing correlation ID or generate one with *tool_name* prefix."""
    return get_correlation_id() or generate_correlation_id(prefix=tool_name)


def require_text(
    value: Optional[str], field: str, *, request_id: str, remediation: str
) -> Optional[dict]:
    """Return a validation error envelope if ``value`` is blank, else None."""
    if value is None or not str(value).strip():
        return asdict(
            validation_error(
                f"{field} is required",
                field=field,
                remediation=remediation,
                request_id=request_id,
            )
        )
    return None


def generation_failure_response(
    exc: Exception,
    *,
    services: DesignServices,
    kind: OperationKind,
    tool_name: str,
    request_id: str,
) -> dict:
    """Convert a failed generation into an error envelope.

    Known input errors use the shared mapping; provider failures are mapped
    through the same classifier the executor used.
    """
    selection = services.executor.selector.selection_for(kind)

    if isinstance(exc, DeadlineExceededError):
        return asdict(
            ai_provider_timeout_error(
                exc.resource or selection.primary,
                exc.timeout_seconds or 0,
                message=str(exc),
                request_id=request_id,
            )
        )

    mapped = error_to_response(exc)
    if mapped is not None:
        return mapped

    classification = classify_error(exc)
    detail = _error_detail(exc)

    if classification is Classification.OVERLOADED:
        logger.warning("%s: models still overloaded after fallback: %s", tool_name, detail)
        return asdict(
            ai_provider_unavailable_error(
                f"{selection.primary} / {selection.fallback}",
                detail,
                request_id=request_id,
            )
        )
    if classification is Classification.RATE_LIMITED:
        logger.warning("%s: rate limit persisted after retries: %s", tool_name, detail)
        return asdict(
            ai_rate_limit_error(
                selection.primary,
                detail,
                retries=services.executor.retry_policy.max_retries,
                request_id=request_id,
            )
        )
    if isinstance(exc, genai_errors.APIError):
        logger.warning("%s: Gemini API error: %s", tool_name, detail)
        return asdict(
            ai_provider_error(
                selection.primary,
                detail,
                status_code=exc.code if isinstance(exc.code, int) else None,
                request_id=request_id,
            )
        )

    logger.exception("%s: unexpected failure", tool_name)
    return asdict(
        internal_error(
            sanitize_error_message(exc, context=tool_name),
            request_id=request_id,
        )
    )


def _error_detail(exc: Any) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or type(exc).__name__
