"""Tests for classify_error."""

import pytest
from google.genai import errors as genai_errors

from ui_designer_mcp.core.resilience import Classification, classify_error


class StructuredError(Exception):
    """Failure shaped like an API error: code, status and message fields."""

    def __init__(self, message="", *, code=None, status=None, details=None):
        super().__init__(message)
        self.code = code
        self.status = status
        self.message = message
        self.details = details


class TestStructuredFields:
    """HTTP codes and RPC statuses are checked before the text."""

    def test_503_code_is_overloaded(self):
        assert classify_error(StructuredError("oops", code=503)) is Classification.OVERLOADED

    def test_429_code_is_rate_limited(self):
        assert classify_error(StructuredError("oops", code=429)) is Classification.RATE_LIMITED

    def test_unavailable_status_is_overloaded(self):
        error = StructuredError("oops", status="UNAVAILABLE")
        assert classify_error(error) is Classification.OVERLOADED

    def test_resource_exhausted_status_is_rate_limited(self):
        error = StructuredError("oops", status="RESOURCE_EXHAUSTED")
        assert classify_error(error) is Classification.RATE_LIMITED

    def test_nested_error_body_code(self):
        error = StructuredError("oops", details={"error": {"code": 503, "message": "busy"}})
        assert classify_error(error) is Classification.OVERLOADED

    def test_response_status_code(self):
        class Response:
            status_code = 429

        error = Exception("request failed")
        error.response = Response()
        assert classify_error(error) is Classification.RATE_LIMITED

    def test_genai_server_error(self):
        error = genai_errors.ServerError(
            503,
            {"error": {"code": 503, "message": "The model is overloaded.", "status": "UNAVAILABLE"}},
        )
        assert classify_error(error) is Classification.OVERLOADED

    @pytest.mark.parametrize(
        "error",
        [
            StructuredError("Model unavailable in this region", code=404),
            StructuredError("quota project not set", code=403),
            StructuredError("Service unavailable", status="NOT_FOUND"),
        ],
    )
    def test_structured_fields_override_message_text(self, error):
        assert classify_error(error) is Classification.OTHER

    def test_genai_not_found_mentioning_unavailable(self):
        error = genai_errors.ClientError(
            404,
            {"error": {"code": 404, "message": "Model is unavailable.", "status": "NOT_FOUND"}},
        )
        assert classify_error(error) is Classification.OTHER

    def test_genai_client_error_quota(self):
        error = genai_errors.ClientError(
            429,
            {"error": {"code": 429, "message": "Quota exceeded.", "status": "RESOURCE_EXHAUSTED"}},
        )
        assert classify_error(error) is Classification.RATE_LIMITED


class TestTextMatching:
    """Opaque failures are classified from their rendered text."""

    @pytest.mark.parametrize(
        "message",
        [
            "The model is overloaded. Please try again later.",
            "503 Service Unavailable",
            "UNAVAILABLE",
        ],
    )
    def test_overload_markers(self, message):
        assert classify_error(RuntimeError(message)) is Classification.OVERLOADED

    @pytest.mark.parametrize(
        "message",
        [
            "429 Too Many Requests",
            "RESOURCE_EXHAUSTED",
            "Quota exceeded for metric generate_content_requests",
            "rate limit reached",
            "Rate-limit hit",
        ],
    )
    def test_rate_limit_markers(self, message):
        assert classify_error(RuntimeError(message)) is Classification.RATE_LIMITED

    def test_overload_wins_over_rate_limit(self):
        error = RuntimeError("503 overloaded while quota nearly exhausted")
        assert classify_error(error) is Classification.OVERLOADED

    def test_code_embedded_in_larger_number_is_ignored(self):
        assert classify_error(RuntimeError("prompt used 15030 tokens")) is Classification.OTHER

    @pytest.mark.parametrize(
        "error",
        [
            ValueError("Invalid API key"),
            StructuredError("Bad request", code=400, status="INVALID_ARGUMENT"),
            None,
        ],
    )
    def test_everything_else_is_other(self, error):
        assert classify_error(error) is Classification.OTHER

    def test_plain_string_input(self):
        assert classify_error("rate limit exceeded") is Classification.RATE_LIMITED


class TestNeverRaises:
    def test_unrenderable_error(self):
        class Unprintable(Exception):
            def __str__(self):
                raise RuntimeError("cannot render")

        assert classify_error(Unprintable()) is Classification.OTHER
