"""
Tests for response helper functions and standard format validation.

Verifies that the response envelope is consistent across all tools.
"""

import json
from dataclasses import asdict

import pytest

from ui_designer_mcp.core.context import sync_request_context
from ui_designer_mcp.core.errors import (
    DeadlineExceededError,
    GemConfigError,
    ImageInputError,
    error_to_response,
)
from ui_designer_mcp.core.responses import (
    ErrorCode,
    ErrorType,
    ToolResponse,
    ai_provider_error,
    ai_provider_timeout_error,
    ai_provider_unavailable_error,
    ai_rate_limit_error,
    error_response,
    internal_error,
    not_found_error,
    sanitize_error_message,
    success_response,
    validation_error,
)


class TestToolResponse:
    """Tests for the ToolResponse dataclass."""

    def test_defaults(self):
        response = ToolResponse(success=True)
        assert response.data == {}
        assert response.error is None
        assert response.meta == {"version": "response-v2"}


class TestSuccessResponse:
    """Tests for the success_response helper function."""

    def test_data_and_fields_merged(self):
        response = success_response({"content": "# Spec"}, model="gemini-2.5-flash")
        assert response.success is True
        assert response.error is None
        assert response.data == {"content": "# Spec", "model": "gemini-2.5-flash"}

    def test_empty_response(self):
        response = success_response()
        assert response.success is True
        assert response.data == {}

    def test_warnings_and_telemetry_in_meta(self):
        response = success_response(
            warnings=["No image returned"],
            telemetry={"duration_ms": 12.5},
            request_id="req-1",
        )
        assert response.meta["warnings"] == ["No image returned"]
        assert response.meta["telemetry"] == {"duration_ms": 12.5}
        assert response.meta["request_id"] == "req-1"

    def test_request_id_injected_from_context(self):
        with sync_request_context(correlation_id="tool-abc"):
            response = success_response()
        assert response.meta["request_id"] == "tool-abc"

    def test_serializable(self):
        json.dumps(asdict(success_response(images=[{"mime_type": "image/png"}])))


class TestErrorResponse:
    """Tests for the error_response helper function."""

    def test_defaults_to_internal(self):
        response = error_response("Something broke")
        assert response.success is False
        assert response.error == "Something broke"
        assert response.data["error_code"] == "INTERNAL_ERROR"
        assert response.data["error_type"] == "internal"

    def test_code_type_remediation_details(self):
        response = error_response(
            "Bad input",
            error_code=ErrorCode.VALIDATION_ERROR,
            error_type=ErrorType.VALIDATION,
            remediation="Fix it",
            details={"field": "image"},
        )
        assert response.data == {
            "error_code": "VALIDATION_ERROR",
            "error_type": "validation",
            "remediation": "Fix it",
            "details": {"field": "image"},
        }


class TestErrorHelpers:
    def test_validation_error_records_field(self):
        response = validation_error("description is required", field="description")
        assert response.data["details"] == {"field": "description"}

    def test_not_found_error(self):
        response = not_found_error("Gem configuration", "/p/.kiro/gem-config.json")
        assert response.error == "Gem configuration '/p/.kiro/gem-config.json' not found"
        assert response.data["error_type"] == "not_found"

    def test_internal_error_references_request(self):
        response = internal_error("Oops", request_id="req-9")
        assert "Reference: req-9" in response.data["remediation"]

    def test_timeout_error(self):
        response = ai_provider_timeout_error("gemini-2.5-flash-image", 120)
        assert response.error == "Gemini model 'gemini-2.5-flash-image' timed out after 120s"
        assert response.data["error_code"] == "AI_PROVIDER_TIMEOUT"
        assert response.data["timeout_seconds"] == 120

    def test_unavailable_error(self):
        response = ai_provider_unavailable_error("a / b", "overloaded")
        assert response.data["error_code"] == "UNAVAILABLE"
        assert response.data["error_type"] == "unavailable"

    def test_rate_limit_error(self):
        response = ai_rate_limit_error("gemini-2.5-flash", "quota", retries=3)
        assert response.data["error_type"] == "rate_limit"
        assert response.data["retries"] == 3

    def test_provider_error_status_code(self):
        response = ai_provider_error("gemini-2.5-flash", "API key not valid", status_code=400)
        assert response.data["status_code"] == 400
        assert response.data["error_type"] == "ai_provider"


class TestErrorMapping:
    @pytest.mark.parametrize(
        "exc,code",
        [
            (DeadlineExceededError("late"), "AI_PROVIDER_TIMEOUT"),
            (ImageInputError("bad image"), "INVALID_FORMAT"),
            (GemConfigError("missing"), "NOT_FOUND"),
        ],
    )
    def test_known_errors(self, exc, code):
        response = error_to_response(exc)
        assert response["success"] is False
        assert response["data"]["error_code"] == code
        assert response["error"] == str(exc)

    def test_unknown_error_returns_none(self):
        assert error_to_response(RuntimeError("x")) is None


class TestSanitization:
    @pytest.mark.parametrize(
        "exc,expected",
        [
            (FileNotFoundError("/secret/path"), "Required file or resource not found"),
            (PermissionError("/secret"), "Permission denied for requested operation"),
            (ValueError("token=abc"), "Invalid value provided"),
            (RuntimeError("stack"), "An internal error occurred"),
        ],
    )
    def test_hides_details(self, exc, expected):
        assert sanitize_error_message(exc) == expected

    def test_include_type(self):
        assert sanitize_error_message(KeyError("k"), include_type=True) == (
            "An internal error occurred (KeyError)"
        )
