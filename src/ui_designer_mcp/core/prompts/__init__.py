"""Prompt builders for the design and Gem tools."""

from ui_designer_mcp.core.prompts.design import (
    ANALYSIS_PROMPTS,
    NO_IMAGE_NOTE,
    build_analysis_prompt,
    build_component_prompt,
    build_design_to_code_prompt,
    build_project_context,
    build_ui_design_prompt,
)
from ui_designer_mcp.core.prompts.gem import build_gem_prompt, default_gem_name

__all__ = [
    "ANALYSIS_PROMPTS",
    "NO_IMAGE_NOTE",
    "build_analysis_prompt",
    "build_component_prompt",
    "build_design_to_code_prompt",
    "build_gem_prompt",
    "build_project_context",
    "build_ui_design_prompt",
    "default_gem_name",
]
