"""Errors raised while preparing a request from tool input."""

from typing import Optional


class ImageInputError(ValueError):
    """An image reference could not be resolved to image bytes.

    Attributes:
        reference: The (possibly truncated) reference supplied by the caller.
    """

    def __init__(self, message: str, *, reference: Optional[str] = None):
        super().__init__(message)
        self.reference = reference


class GemConfigError(RuntimeError):
    """A saved Gem configuration is missing or unusable."""
