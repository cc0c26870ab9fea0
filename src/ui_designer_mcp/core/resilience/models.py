"""Resilience data models, enums, and protocols.

Defines the core types used across the resilience sub-package:
- Classification enum for failure labelling
- OperationKind for resource selection
- ResilienceConfig for pacing, retry and deadline tuning
- RetryContext for per-call retry/fallback state
- ExecutorStats for observability
- SleepFunc / Clock protocols for injectable time
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Protocol


class Classification(str, Enum):
    """Label assigned to a failed Gemini call."""

    OVERLOADED = "overloaded"
    RATE_LIMITED = "rate_limited"
    OTHER = "other"


class OperationKind(str, Enum):
    """Kind of generation an operation performs; selects its models."""

    TEXT = "text"
    IMAGE = "image"


@dataclass
class ResilienceConfig:
    """Pacing, retry and deadline settings for the request executor.

    All durations are in seconds.

    Attributes:
        min_request_interval: Minimum gap between the starts of consecutive
            Gemini calls (0 disables pacing, calls stay serialized)
        max_retries: Maximum rate-limit retries per top-level call
        initial_retry_delay: Backoff before the first retry; doubles after
        timeout: Default per-call deadline (0 disables)
        image_timeout: Deadline for image generation calls (0 disables)
    """

    min_request_interval: float = 0.05
    max_retries: int = 3
    initial_retry_delay: float = 0.3
    timeout: float = 0.0
    image_timeout: float = 120.0

    def __post_init__(self) -> None:
        self.min_request_interval = max(0.0, float(self.min_request_interval))
        self.max_retries = max(0, int(self.max_retries))
        self.initial_retry_delay = max(0.0, float(self.initial_retry_delay))
        self.timeout = max(0.0, float(self.timeout))
        self.image_timeout = max(0.0, float(self.image_timeout))

    @classmethod
    def from_toml_dict(
        cls, data: Dict[str, Any], base: Optional["ResilienceConfig"] = None
    ) -> "ResilienceConfig":
        """Create config from TOML dict (typically [resilience] section).

        Missing keys keep their value from ``base`` (or the defaults).
        """
        base = base or cls()
        return cls(
            min_request_interval=float(
                data.get("min_request_interval", base.min_request_interval)
            ),
            max_retries=int(data.get("max_retries", base.max_retries)),
            initial_retry_delay=float(
                data.get("initial_retry_delay", base.initial_retry_delay)
            ),
            timeout=float(data.get("timeout", base.timeout)),
            image_timeout=float(data.get("image_timeout", base.image_timeout)),
        )


@dataclass
class RetryContext:
    """State of one top-level ``execute`` call.

    ``attempt`` counts rate-limit retries only; the fallback substitution
    does not consume an attempt and can happen once.
    """

    resource: str
    attempt: int = 0
    fallback_used: bool = False

    def use_fallback(self, resource: str) -> None:
        if self.fallback_used:
            raise RuntimeError("fallback resource already used for this call")
        self.resource = resource
        self.fallback_used = True


@dataclass
class ExecutorStats:
    """Counters for the executor, exposed by the resilience-status tool."""

    calls: int = 0
    retries: int = 0
    fallbacks: int = 0
    timeouts: int = 0
    failures: int = 0


class SleepFunc(Protocol):
    """Protocol for injectable sleep function."""

    async def __call__(self, seconds: float) -> None: ...


Clock = Callable[[], float]
