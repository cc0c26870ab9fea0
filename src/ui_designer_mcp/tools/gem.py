"""Custom Gem tools: create, regenerate and show the saved configuration."""

import logging
import time
from dataclasses import asdict
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from ui_designer_mcp.core.errors import GemConfigError
from ui_designer_mcp.core.gem import GemGenerationResult
from ui_designer_mcp.core.naming import canonical_tool
from ui_designer_mcp.core.resilience import OperationKind
from ui_designer_mcp.core.responses import not_found_error, success_response
from ui_designer_mcp.tools.common import (
    DesignServices,
    build_request_id,
    generation_failure_response,
)

logger = logging.getLogger(__name__)

_CREATE_REMEDIATION = "Run create_custom_gem to scan the workspace and save a Gem configuration."


def _files_analyzed(result: GemGenerationResult) -> Dict[str, Any]:
    return {
        "steering": result.steering_found,
        "design_system": result.design_system_count,
        "code_examples": result.code_examples_count,
    }


def _generation_payload(services: DesignServices, result: GemGenerationResult) -> Dict[str, Any]:
    return {
        "gem_name": result.gem_name,
        "project_name": result.config.project_name,
        "response": result.response,
        "files_analyzed": _files_analyzed(result),
        "config_path": str(services.gem_store.path),
        "saved": result.saved,
    }


def _save_warnings(services: DesignServices, result: GemGenerationResult) -> List[str]:
    if result.saved:
        return []
    return [f"Gem configuration could not be saved to {services.gem_store.path}"]


async def handle_create_custom_gem(
    services: DesignServices,
    *,
    design_system_files: Optional[List[str]] = None,
    codebase_examples: Optional[List[str]] = None,
    custom_instructions: Optional[str] = None,
    gem_name: Optional[str] = None,
    auto_detect: bool = True,
) -> dict:
    request_id = build_request_id("create_custom_gem")

    start = time.perf_counter()
    try:
        result = await services.gem_generator.generate(
            design_system_files=design_system_files,
            codebase_examples=codebase_examples,
            custom_instructions=custom_instructions,
            gem_name=gem_name,
            auto_detect=auto_detect,
        )
    except Exception as exc:
        return generation_failure_response(
            exc,
            services=services,
            kind=OperationKind.TEXT,
            tool_name="create_custom_gem",
            request_id=request_id,
        )
    elapsed_ms = (time.perf_counter() - start) * 1000

    return asdict(
        success_response(
            data=_generation_payload(services, result),
            warnings=_save_warnings(services, result),
            telemetry={"duration_ms": round(elapsed_ms, 2)},
            request_id=request_id,
        )
    )


async def handle_regenerate_gem(
    services: DesignServices,
    *,
    reason: Optional[str] = None,
) -> dict:
    request_id = build_request_id("regenerate_gem")

    try:
        previous = services.gem_store.require()
    except GemConfigError:
        return asdict(
            not_found_error(
                "Gem configuration",
                str(services.gem_store.path),
                remediation=_CREATE_REMEDIATION,
                request_id=request_id,
            )
        )

    start = time.perf_counter()
    try:
        result = await services.gem_generator.regenerate(previous)
    except Exception as exc:
        return generation_failure_response(
            exc,
            services=services,
            kind=OperationKind.TEXT,
            tool_name="regenerate_gem",
            request_id=request_id,
        )
    elapsed_ms = (time.perf_counter() - start) * 1000

    payload = _generation_payload(services, result)
    payload.update(
        {
            "reason": reason or "Manual regeneration",
            "previous_generated_at": previous.generated_at.isoformat(),
            "generated_at": result.config.generated_at.isoformat(),
        }
    )
    return asdict(
        success_response(
            data=payload,
            warnings=_save_warnings(services, result),
            telemetry={"duration_ms": round(elapsed_ms, 2)},
            request_id=request_id,
        )
    )


def handle_show_gem_config(services: DesignServices) -> dict:
    request_id = build_request_id("show_gem_config")

    try:
        config = services.gem_store.require()
    except GemConfigError:
        return asdict(
            not_found_error(
                "Gem configuration",
                str(services.gem_store.path),
                remediation=_CREATE_REMEDIATION,
                request_id=request_id,
            )
        )

    age = datetime.now(timezone.utc) - config.generated_at
    return asdict(
        success_response(
            data={
                "config": config.model_dump(mode="json", by_alias=True),
                "config_path": str(services.gem_store.path),
                "design_system_count": len(config.design_system_files),
                "code_examples_count": len(config.codebase_examples),
                "age_seconds": max(0, int(age.total_seconds())),
            },
            request_id=request_id,
        )
    )


def register_gem_tools(mcp: FastMCP, services: DesignServices) -> None:
    """Register the custom Gem tools."""

    @canonical_tool(
        mcp,
        canonical_name="create_custom_gem",
        description=(
            "Create or update a custom Gemini Gem trained on your design system, "
            "codebase, and steering files"
        ),
    )
    async def create_custom_gem(
        design_system_files: Optional[List[str]] = None,
        codebase_examples: Optional[List[str]] = None,
        custom_instructions: Optional[str] = None,
        gem_name: Optional[str] = None,
        auto_detect: bool = True,
    ) -> dict:
        """Generate a Gem configuration guide and save its inputs.

        Args:
            design_system_files: Paths to design system files to include
            codebase_examples: Paths to example code files from your codebase
            custom_instructions: Additional custom instructions for the Gem
            gem_name: Name for the custom Gem (defaults to "UI Designer Pro - <project>")
            auto_detect: Automatically detect design system and code files
        """
        return await handle_create_custom_gem(
            services,
            design_system_files=design_system_files,
            codebase_examples=codebase_examples,
            custom_instructions=custom_instructions,
            gem_name=gem_name,
            auto_detect=auto_detect,
        )

    @canonical_tool(
        mcp,
        canonical_name="regenerate_gem",
        description=(
            "Regenerate your custom Gemini Gem (use after design system changes, "
            "rebranding, or tech stack updates)"
        ),
    )
    async def regenerate_gem(reason: Optional[str] = None) -> dict:
        """Regenerate the Gem from the saved configuration.

        Args:
            reason: Reason for regeneration (e.g. 'rebranding', 'design system update')
        """
        return await handle_regenerate_gem(services, reason=reason)

    @canonical_tool(
        mcp,
        canonical_name="show_gem_config",
        description="Show the current custom Gem configuration",
    )
    def show_gem_config() -> dict:
        """Show the saved Gem configuration."""
        return handle_show_gem_config(services)

    logger.debug("Registered gem tools")


__all__ = [
    "handle_create_custom_gem",
    "handle_regenerate_gem",
    "handle_show_gem_config",
    "register_gem_tools",
]
