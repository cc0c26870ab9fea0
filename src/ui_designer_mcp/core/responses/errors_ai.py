"""
AI provider error helpers for MCP tool responses.

One helper per terminal outcome of the resilient executor: deadline
exceeded, model still overloaded after fallback, rate limit retries
exhausted, and any other provider error.
"""

from typing import Any, Dict, Optional

from ui_designer_mcp.core.responses.builders import error_response
from ui_designer_mcp.core.responses.types import ErrorCode, ErrorType, ToolResponse


def ai_provider_timeout_error(
    model: str,
    timeout_seconds: float,
    *,
    message: Optional[str] = None,
    remediation: Optional[str] = None,
    request_id: Optional[str] = None,
) -> ToolResponse:
    """Create an error response for a Gemini call that exceeded its deadline.

    Example:
        >>> ai_provider_timeout_error("gemini-2.5-flash-image", 120)
    """
    default_message = f"Gemini model '{model}' timed out after {timeout_seconds:g}s"

    return error_response(
        message or default_message,
        error_code=ErrorCode.AI_PROVIDER_TIMEOUT,
        error_type=ErrorType.UNAVAILABLE,
        data={
            "model": model,
            "timeout_seconds": timeout_seconds,
        },
        remediation=remediation
        or (
            "Try again with a simpler request, raise GEMINI_TIMEOUT / "
            "GEMINI_IMAGE_TIMEOUT, or set them to 0 to disable the deadline."
        ),
        request_id=request_id,
    )


def ai_provider_unavailable_error(
    model: str,
    error_detail: str,
    *,
    request_id: Optional[str] = None,
) -> ToolResponse:
    """Create an error response for a model that stayed overloaded after fallback."""
    return error_response(
        f"Gemini model '{model}' is overloaded: {error_detail}",
        error_code=ErrorCode.UNAVAILABLE,
        error_type=ErrorType.UNAVAILABLE,
        data={"model": model, "error_detail": error_detail},
        remediation="The primary and fallback models are both busy. Retry in a few moments.",
        request_id=request_id,
    )


def ai_rate_limit_error(
    model: str,
    error_detail: str,
    *,
    retries: Optional[int] = None,
    request_id: Optional[str] = None,
) -> ToolResponse:
    """Create an error response for a rate limit that outlasted every retry."""
    data: Dict[str, Any] = {"model": model, "error_detail": error_detail}
    if retries is not None:
        data["retries"] = retries

    return error_response(
        f"Gemini rate limit exceeded for '{model}': {error_detail}",
        error_code=ErrorCode.RATE_LIMIT_EXCEEDED,
        error_type=ErrorType.RATE_LIMIT,
        data=data,
        remediation=(
            "Wait before retrying, raise GEMINI_MIN_REQUEST_INTERVAL, "
            "or check the API key's quota."
        ),
        request_id=request_id,
    )


def ai_provider_error(
    model: str,
    error_detail: str,
    *,
    status_code: Optional[int] = None,
    remediation: Optional[str] = None,
    request_id: Optional[str] = None,
) -> ToolResponse:
    """Create an error response for any other Gemini failure.

    Example:
        >>> ai_provider_error("gemini-2.5-flash", "API key not valid", status_code=400)
    """
    data: Dict[str, Any] = {
        "model": model,
        "error_detail": error_detail,
    }
    if status_code is not None:
        data["status_code"] = status_code

    return error_response(
        f"Gemini model '{model}' returned error: {error_detail}",
        error_code=ErrorCode.AI_PROVIDER_ERROR,
        error_type=ErrorType.AI_PROVIDER,
        data=data,
        remediation=remediation
        or "Check GEMINI_API_KEY and the model name. Consult the Gemini API docs for error details.",
        request_id=request_id,
    )
