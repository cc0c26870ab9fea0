"""
Standard response contracts for MCP tool operations.

Sub-modules:
    types           - ErrorCode, ErrorType, ToolResponse, _build_meta
    builders        - success_response, error_response
    errors_generic  - validation_error, not_found_error, internal_error
    errors_ai       - ai_provider_error, ai_provider_timeout_error, etc.
    sanitization    - sanitize_error_message
"""

from ui_designer_mcp.core.responses.types import (  # noqa: F401
    ErrorCode,
    ErrorType,
    ToolResponse,
    _build_meta,
)
from ui_designer_mcp.core.responses.builders import (  # noqa: F401
    error_response,
    success_response,
)
from ui_designer_mcp.core.responses.errors_generic import (  # noqa: F401
    internal_error,
    not_found_error,
    validation_error,
)
from ui_designer_mcp.core.responses.errors_ai import (  # noqa: F401
    ai_provider_error,
    ai_provider_timeout_error,
    ai_provider_unavailable_error,
    ai_rate_limit_error,
)
from ui_designer_mcp.core.responses.sanitization import (  # noqa: F401
    sanitize_error_message,
)

__all__ = [
    "ErrorCode",
    "ErrorType",
    "ToolResponse",
    "error_response",
    "success_response",
    "internal_error",
    "not_found_error",
    "validation_error",
    "ai_provider_error",
    "ai_provider_timeout_error",
    "ai_provider_unavailable_error",
    "ai_rate_limit_error",
    "sanitize_error_message",
]
