"""Error hierarchy for ui-designer-mcp.

Usage:
    from ui_designer_mcp.core.errors import DeadlineExceededError, error_to_response
"""

from ui_designer_mcp.core.errors.base import ERROR_MAPPINGS, error_to_response
from ui_designer_mcp.core.errors.inputs import GemConfigError, ImageInputError
from ui_designer_mcp.core.errors.resilience import DeadlineExceededError

__all__ = [
    "ERROR_MAPPINGS",
    "error_to_response",
    "DeadlineExceededError",
    "GemConfigError",
    "ImageInputError",
]
