"""Read-only view of the request execution settings."""

import logging
from dataclasses import asdict

from mcp.server.fastmcp import FastMCP

from ui_designer_mcp.core.naming import canonical_tool
from ui_designer_mcp.core.responses import success_response
from ui_designer_mcp.tools.common import DesignServices, build_request_id

logger = logging.getLogger(__name__)


def handle_resilience_status(services: DesignServices) -> dict:
    request_id = build_request_id("resilience_status")
    resilience = services.config.resilience
    scheduler = services.executor.scheduler

    return asdict(
        success_response(
            data={
                "settings": {
                    "min_request_interval_ms": round(resilience.min_request_interval * 1000),
                    "max_retries": resilience.max_retries,
                    "initial_retry_delay_ms": round(resilience.initial_retry_delay * 1000),
                    "timeout_ms": round(resilience.timeout * 1000),
                    "image_timeout_ms": round(resilience.image_timeout * 1000),
                },
                "models": services.executor.selector.to_dict(),
                "gem_id": services.config.gemini.gem_id,
                "scheduler": {
                    "queued": scheduler.queued,
                    "admitted": scheduler.admitted,
                    "next_slot_ms": round(scheduler.time_until_next_slot() * 1000),
                },
                "stats": asdict(services.executor.stats),
            },
            request_id=request_id,
        )
    )


def register_status_tools(mcp: FastMCP, services: DesignServices) -> None:
    """Register the resilience status tool."""

    @canonical_tool(
        mcp,
        canonical_name="resilience_status",
        description="Show request pacing, retry, deadline and model fallback settings",
    )
    def resilience_status() -> dict:
        """Report effective resilience settings, selected models and counters."""
        return handle_resilience_status(services)

    logger.debug("Registered status tools")
