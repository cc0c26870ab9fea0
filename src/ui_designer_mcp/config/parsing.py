"""Parsing and normalization helpers for configuration values."""

import logging
from typing import Any, Callable, Optional

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

Warn = Callable[[str], None]


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"true", "1", "yes", "on"}


def _normalize_log_level(value: str, warn: Optional[Warn] = None) -> str:
    normalized = str(value).strip().upper()
    if normalized not in _VALID_LOG_LEVELS:
        message = (
            f"Invalid log level '{value}'. Falling back to INFO. "
            f"Valid options: {', '.join(sorted(_VALID_LOG_LEVELS))}"
        )
        if warn:
            warn(message)
        else:
            logger.warning(message)
        return "INFO"
    return normalized


def _parse_non_negative_int(name: str, raw: str, warn: Warn) -> Optional[int]:
    """Parse an integer setting; negatives clamp to 0, garbage returns None."""
    try:
        value = int(str(raw).strip())
    except ValueError:
        warn(f"Ignoring {name}={raw!r}: expected an integer")
        return None
    if value < 0:
        warn(f"{name}={raw!r} is negative; using 0")
        return 0
    return value


def _parse_millis(name: str, raw: str, warn: Warn) -> Optional[float]:
    """Parse a millisecond setting into seconds.

    Negatives clamp to 0, values that are not numbers return None.
    """
    try:
        value = float(str(raw).strip())
    except ValueError:
        warn(f"Ignoring {name}={raw!r}: expected a number of milliseconds")
        return None
    if value != value or value in (float("inf"), float("-inf")):
        warn(f"Ignoring {name}={raw!r}: expected a finite number of milliseconds")
        return None
    if value < 0:
        warn(f"{name}={raw!r} is negative; using 0")
        return 0.0
    return value / 1000.0
