"""Classification of Gemini failures.

Structured fields (HTTP code, RPC status) decide whenever a failure carries
them; a 404 whose message mentions "unavailable" stays OTHER. Only opaque
failures fall back to substring matching on their rendered form, which
mirrors what the Gemini API puts in its error bodies but is not exhaustive.
"""

import json
import re
from typing import Any, Optional

from ui_designer_mcp.core.resilience.models import Classification

_OVERLOADED_CODES = frozenset({503})
_RATE_LIMITED_CODES = frozenset({429})
_OVERLOADED_STATUSES = frozenset({"UNAVAILABLE"})
_RATE_LIMITED_STATUSES = frozenset({"RESOURCE_EXHAUSTED"})

_OVERLOADED_PATTERN = re.compile(r"overloaded|unavailable|\b503\b")
_RATE_LIMITED_PATTERN = re.compile(
    r"\b429\b|resource[_ ]exhausted|rate[ -]?limit|quota"
)


def classify_error(error: Any) -> Classification:
    """Label a failure as OVERLOADED, RATE_LIMITED or OTHER.

    Overload wins when a failure carries markers of both, so a single input
    never maps to two labels. Never raises.
    """
    try:
        return _classify(error)
    except Exception:
        return Classification.OTHER


def _classify(error: Any) -> Classification:
    code = _status_code(error)
    if code in _OVERLOADED_CODES:
        return Classification.OVERLOADED
    if code in _RATE_LIMITED_CODES:
        return Classification.RATE_LIMITED

    status = getattr(error, "status", None)
    if isinstance(status, str) and status.strip():
        normalized = status.strip().upper()
        if normalized in _OVERLOADED_STATUSES:
            return Classification.OVERLOADED
        if normalized in _RATE_LIMITED_STATUSES:
            return Classification.RATE_LIMITED
        return Classification.OTHER

    if code is not None:
        return Classification.OTHER

    rendered = _render(error).lower()
    if _OVERLOADED_PATTERN.search(rendered):
        return Classification.OVERLOADED
    if _RATE_LIMITED_PATTERN.search(rendered):
        return Classification.RATE_LIMITED
    return Classification.OTHER


def _status_code(error: Any) -> Optional[int]:
    """Pull an HTTP-style status code out of a failure, if it carries one."""
    for attr in ("code", "status_code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            return value

    # {"error": {"code": 503, ...}} as returned in Gemini error bodies
    for attr in ("details", "error", "response_json"):
        payload = getattr(error, attr, None)
        if isinstance(payload, dict):
            nested = payload.get("error", payload)
            if isinstance(nested, dict):
                value = nested.get("code")
                if isinstance(value, int) and not isinstance(value, bool):
                    return value

    response = getattr(error, "response", None)
    value = getattr(response, "status_code", None)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _render(error: Any) -> str:
    parts = [type(error).__name__, str(error)]
    for attr in ("status", "message", "details"):
        value = getattr(error, attr, None)
        if value is None:
            continue
        if isinstance(value, (dict, list)):
            parts.append(json.dumps(value, default=str))
        else:
            parts.append(str(value))
    return " ".join(parts)
