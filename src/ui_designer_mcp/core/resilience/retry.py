"""Exponential backoff policy for rate-limited Gemini calls."""

from dataclasses import dataclass

from ui_designer_mcp.core.resilience.models import Classification


@dataclass(frozen=True)
class RetryPolicy:
    """Decides whether a failed call is retried and how long to wait.

    Only RATE_LIMITED failures are retried here. Overload is handled by
    fallback substitution in the executor, everything else is terminal.

    Attributes:
        max_retries: Retries allowed per top-level call (0 disables retrying)
        initial_delay: Delay in seconds before the first retry
    """

    max_retries: int = 3
    initial_delay: float = 0.3

    def should_retry(self, classification: Classification, attempt: int) -> bool:
        """Return True when a retry is allowed.

        Args:
            classification: Label of the failure that just happened
            attempt: Retries already performed for this call (zero-based)
        """
        if classification is not Classification.RATE_LIMITED:
            return False
        return attempt < self.max_retries

    def backoff_delay(self, attempt: int) -> float:
        """Delay before retry number ``attempt + 1``: ``initial_delay * 2 ** attempt``."""
        return self.initial_delay * (2**attempt)
