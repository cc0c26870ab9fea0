"""Tests for the resilience status tool."""

import pytest

from ui_designer_mcp.tools.design import handle_generate_component
from ui_designer_mcp.tools.status import handle_resilience_status


class TestResilienceStatus:
    def test_reports_settings_in_milliseconds(self, services):
        response = handle_resilience_status(services)

        assert response["success"] is True
        data = response["data"]
        assert data["settings"] == {
            "min_request_interval_ms": 50,
            "max_retries": 3,
            "initial_retry_delay_ms": 300,
            "timeout_ms": 0,
            "image_timeout_ms": 120000,
        }
        assert data["models"]["text"] == {
            "primary": "gemini-2.5-flash",
            "fallback": "gemini-2.0-flash-exp",
        }
        assert data["gem_id"] is None
        assert data["scheduler"] == {"queued": 0, "admitted": 0, "next_slot_ms": 0}

    @pytest.mark.asyncio
    async def test_counters_follow_calls(self, services):
        await handle_generate_component(
            services, component_type="card", framework="react", styling="css"
        )

        data = handle_resilience_status(services)["data"]

        assert data["scheduler"]["admitted"] == 1
        assert data["stats"] == {
            "calls": 1,
            "retries": 0,
            "fallbacks": 0,
            "timeouts": 0,
            "failures": 0,
        }
