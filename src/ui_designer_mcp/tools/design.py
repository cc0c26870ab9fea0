"""Design tools: mockup generation, design-to-code, analysis, components."""

import logging
import time
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from ui_designer_mcp.core.images import resolve_image
from ui_designer_mcp.core.naming import canonical_tool
from ui_designer_mcp.core.prompts import (
    NO_IMAGE_NOTE,
    build_analysis_prompt,
    build_component_prompt,
    build_design_to_code_prompt,
    build_project_context,
    build_ui_design_prompt,
)
from ui_designer_mcp.core.resilience import OperationKind
from ui_designer_mcp.core.responses import success_response
from ui_designer_mcp.tools.common import (
    DesignServices,
    build_request_id,
    generation_failure_response,
    require_text,
)

logger = logging.getLogger(__name__)

_IMAGE_REMEDIATION = (
    "Pass an image URL, a data:image/...;base64 URI, a file path, or base64 data"
)


async def handle_generate_ui_design(
    services: DesignServices,
    *,
    description: str,
    style: Optional[str] = None,
    color_scheme: Optional[str] = None,
    framework: Optional[str] = None,
) -> dict:
    request_id = build_request_id("generate_ui_design")
    err = require_text(
        description,
        "description",
        request_id=request_id,
        remediation="Describe the screen or page you want designed",
    )
    if err:
        return err

    prompt = build_ui_design_prompt(
        description,
        style=style or "modern",
        color_scheme=color_scheme or "light",
        framework=framework or "generic",
        project_context=build_project_context(services.gem_store.load()),
    )

    start = time.perf_counter()
    try:
        result = await services.generator.generate_ui_image(prompt)
    except Exception as exc:
        return generation_failure_response(
            exc,
            services=services,
            kind=OperationKind.IMAGE,
            tool_name="generate_ui_design",
            request_id=request_id,
        )
    elapsed_ms = (time.perf_counter() - start) * 1000

    images: List[Dict[str, str]] = [
        {"mime_type": image.mime_type, "data_uri": image.to_data_uri()}
        for image in result.images
    ]
    sections = list(result.text_parts)
    sections.extend(
        f"\n\n![Generated UI Design]({image['data_uri']})\n\n" for image in images
    )
    warnings: List[str] = []
    if not images:
        sections.append(f"\n\n{NO_IMAGE_NOTE}\n")
        warnings.append("The model returned no image; only the design specification is included")

    return asdict(
        success_response(
            data={
                "design": "".join(sections),
                "specification": result.text,
                "images": images,
                "has_image": bool(images),
                "model": result.model,
            },
            warnings=warnings,
            telemetry={"duration_ms": round(elapsed_ms, 2)},
            request_id=request_id,
        )
    )


async def handle_design_to_code(
    services: DesignServices,
    *,
    image: str,
    target_framework: str,
    styling: str,
    include_accessibility: bool = True,
) -> dict:
    request_id = build_request_id("design_to_code")
    for field, value, remediation in (
        ("image", image, _IMAGE_REMEDIATION),
        ("target_framework", target_framework, "e.g. react, vue, html-css"),
        ("styling", styling, "e.g. tailwind, css-modules, styled-components"),
    ):
        err = require_text(value, field, request_id=request_id, remediation=remediation)
        if err:
            return err

    prompt = build_design_to_code_prompt(
        target_framework, styling, include_accessibility=include_accessibility
    )
    return await _run_image_prompt(
        services,
        prompt,
        image,
        tool_name="design_to_code",
        request_id=request_id,
        extra={"target_framework": target_framework, "styling": styling},
    )


async def handle_analyze_design(
    services: DesignServices,
    *,
    image: str,
    analysis_type: str,
) -> dict:
    request_id = build_request_id("analyze_design")
    for field, value, remediation in (
        ("image", image, _IMAGE_REMEDIATION),
        ("analysis_type", analysis_type, "e.g. accessibility, layout, colors"),
    ):
        err = require_text(value, field, request_id=request_id, remediation=remediation)
        if err:
            return err

    prompt = build_analysis_prompt(analysis_type.strip())
    return await _run_image_prompt(
        services,
        prompt,
        image,
        tool_name="analyze_design",
        request_id=request_id,
        extra={"analysis_type": analysis_type.strip()},
    )


async def handle_generate_component(
    services: DesignServices,
    *,
    component_type: str,
    framework: str,
    styling: str,
    props: Optional[Dict[str, Any]] = None,
) -> dict:
    request_id = build_request_id("generate_component")
    for field, value, remediation in (
        ("component_type", component_type, "e.g. button, card, navbar"),
        ("framework", framework, "e.g. react, vue, svelte"),
        ("styling", styling, "e.g. tailwind, css, emotion"),
    ):
        err = require_text(value, field, request_id=request_id, remediation=remediation)
        if err:
            return err

    prompt = build_component_prompt(component_type, framework, styling, props)

    start = time.perf_counter()
    try:
        result = await services.generator.generate_text(prompt)
    except Exception as exc:
        return generation_failure_response(
            exc,
            services=services,
            kind=OperationKind.TEXT,
            tool_name="generate_component",
            request_id=request_id,
        )
    elapsed_ms = (time.perf_counter() - start) * 1000

    return asdict(
        success_response(
            data={
                "content": result.text,
                "model": result.model,
                "component_type": component_type,
                "framework": framework,
                "styling": styling,
            },
            telemetry={"duration_ms": round(elapsed_ms, 2)},
            request_id=request_id,
        )
    )


async def _run_image_prompt(
    services: DesignServices,
    prompt: str,
    image_reference: str,
    *,
    tool_name: str,
    request_id: str,
    extra: Dict[str, Any],
) -> dict:
    start = time.perf_counter()
    try:
        image = await resolve_image(
            image_reference,
            base_dir=services.workspace.root,
            http_client=services.http_client,
        )
        result = await services.generator.generate_with_image(prompt, image)
    except Exception as exc:
        return generation_failure_response(
            exc,
            services=services,
            kind=OperationKind.IMAGE,
            tool_name=tool_name,
            request_id=request_id,
        )
    elapsed_ms = (time.perf_counter() - start) * 1000

    return asdict(
        success_response(
            data={"content": result.text, "model": result.model, **extra},
            telemetry={"duration_ms": round(elapsed_ms, 2)},
            request_id=request_id,
        )
    )


def register_design_tools(mcp: FastMCP, services: DesignServices) -> None:
    """Register the design tools."""

    @canonical_tool(
        mcp,
        canonical_name="generate_ui_design",
        description="Generate UI design mockup and recommendations based on description",
    )
    async def generate_ui_design(
        description: str,
        style: str = "modern",
        color_scheme: str = "light",
        framework: str = "generic",
    ) -> dict:
        """Generate a UI mockup image plus a design specification.

        Args:
            description: Description of the UI to design
            style: Design style (modern, minimal, glassmorphism, material, ...)
            color_scheme: Color scheme preference (light, dark, high-contrast, ...)
            framework: UI framework preference (generic, material-ui, chakra-ui, ...)
        """
        return await handle_generate_ui_design(
            services,
            description=description,
            style=style,
            color_scheme=color_scheme,
            framework=framework,
        )

    @canonical_tool(
        mcp,
        canonical_name="design_to_code",
        description="Convert design screenshot or mockup to production-ready code",
    )
    async def design_to_code(
        image: str,
        target_framework: str,
        styling: str,
        include_accessibility: bool = True,
    ) -> dict:
        """Convert a design image to code.

        Args:
            image: Image file path, image URL, data URI or base64 image data
            target_framework: Target framework (html-css, react, vue, svelte, ...)
            styling: Styling approach (css, tailwind, styled-components, ...)
            include_accessibility: Include ARIA labels and accessibility attributes
        """
        return await handle_design_to_code(
            services,
            image=image,
            target_framework=target_framework,
            styling=styling,
            include_accessibility=include_accessibility,
        )

    @canonical_tool(
        mcp,
        canonical_name="analyze_design",
        description="Analyze design for accessibility, design system compliance, or specific aspects",
    )
    async def analyze_design(image: str, analysis_type: str) -> dict:
        """Analyze a design image.

        Args:
            image: Image file path, image URL, data URI or base64 image data
            analysis_type: accessibility, design-system, layout, colors,
                typography, spacing, performance, or any other focus
        """
        return await handle_analyze_design(
            services, image=image, analysis_type=analysis_type
        )

    @canonical_tool(
        mcp,
        canonical_name="generate_component",
        description="Generate a specific UI component with code",
    )
    async def generate_component(
        component_type: str,
        framework: str,
        styling: str,
        props: Optional[Dict[str, Any]] = None,
    ) -> dict:
        """Generate a reusable UI component.

        Args:
            component_type: Type of component (button, card, form, navbar, ...)
            framework: Framework to use (react, vue, nextjs, svelte, ...)
            styling: Styling approach (css, tailwind, css-modules, ...)
            props: Component properties and configuration
        """
        return await handle_generate_component(
            services,
            component_type=component_type,
            framework=framework,
            styling=styling,
            props=props,
        )

    logger.debug("Registered design tools")


__all__ = [
    "handle_analyze_design",
    "handle_design_to_code",
    "handle_generate_component",
    "handle_generate_ui_design",
    "register_design_tools",
]
