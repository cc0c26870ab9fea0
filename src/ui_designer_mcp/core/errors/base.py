"""Error-to-ErrorCode mapping registry.

Provides a centralized mapping from exception types to (ErrorCode, ErrorType)
tuples so tool handlers build consistent error envelopes.

Usage:
    from ui_designer_mcp.core.errors.base import error_to_response

    try:
        do_something()
    except Exception as e:
        result = error_to_response(e)
        if result is not None:
            return result
        raise  # Unknown error, re-raise
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Type

from ui_designer_mcp.core.errors.inputs import GemConfigError, ImageInputError
from ui_designer_mcp.core.errors.resilience import DeadlineExceededError
from ui_designer_mcp.core.responses.types import ErrorCode, ErrorType

ERROR_MAPPINGS: Dict[Type[Exception], Tuple[ErrorCode, ErrorType]] = {
    # --- Resilience errors ---
    DeadlineExceededError: (ErrorCode.AI_PROVIDER_TIMEOUT, ErrorType.UNAVAILABLE),
    # --- Input errors ---
    ImageInputError: (ErrorCode.INVALID_FORMAT, ErrorType.VALIDATION),
    GemConfigError: (ErrorCode.NOT_FOUND, ErrorType.NOT_FOUND),
}


def error_to_response(exc: Exception) -> Optional[dict]:
    """Convert a known exception to a standard error_response dict, or None if unknown.

    Looks up the exception's *exact* type in ERROR_MAPPINGS.

    Args:
        exc: The exception to convert.

    Returns:
        A dict suitable for an MCP tool response, or None if the exception
        type is not registered in ERROR_MAPPINGS.
    """
    mapping = ERROR_MAPPINGS.get(type(exc))
    if mapping is None:
        return None

    from dataclasses import asdict

    from ui_designer_mcp.core.responses.builders import error_response

    code, error_type = mapping
    return asdict(error_response(str(exc), error_code=code, error_type=error_type))
