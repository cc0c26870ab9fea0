"""
Prompt templates for the design tools.

Builders return plain strings; the optional project context block comes from
the saved Gem configuration (see :func:`build_project_context`).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from ui_designer_mcp.core.gem.store import GemConfig

# =============================================================================
# UI design generation
# =============================================================================

_UI_DESIGN_TEMPLATE = """Create a professional UI design mockup for:

{description}

Style: {style}
Color Scheme: {color_scheme}
Framework: {framework}
{project_context}

Generate a high-fidelity UI mockup image showing:
- Complete layout with all UI components
- Proper spacing and alignment
- Color scheme applied
- Typography hierarchy
- Interactive elements (buttons, forms, navigation)
- Responsive design considerations

Also provide a detailed design specification including:
1. Layout structure and component hierarchy
2. Color palette with hex codes
3. Typography recommendations
4. Spacing and sizing guidelines
5. Interactive element states
6. Accessibility considerations"""

NO_IMAGE_NOTE = (
    "*Note: Image generation was not available. "
    "The design specifications above describe the intended UI.*"
)


def build_project_context(config: Optional[GemConfig]) -> str:
    """Render the saved Gem config as a project context section ("" if none)."""
    if config is None:
        return ""

    lines = ["", "", "## Project Context", f"Project: {config.project_name or 'Unknown'}"]
    if config.design_system_files:
        lines.append(
            f"Design System Files: {len(config.design_system_files)} files detected"
        )
    if config.codebase_examples:
        lines.append(
            f"Component Examples: {len(config.codebase_examples)} files detected"
        )
    if config.custom_instructions:
        lines.extend(["", "Custom Instructions:", config.custom_instructions])
    return "\n".join(lines) + "\n"


def build_ui_design_prompt(
    description: str,
    *,
    style: str = "modern",
    color_scheme: str = "light",
    framework: str = "generic",
    project_context: str = "",
) -> str:
    return _UI_DESIGN_TEMPLATE.format(
        description=description,
        style=style or "modern",
        color_scheme=color_scheme or "light",
        framework=framework or "generic",
        project_context=project_context,
    )


# =============================================================================
# Design to code
# =============================================================================


def build_design_to_code_prompt(
    target_framework: str, styling: str, *, include_accessibility: bool = True
) -> str:
    requirements = [
        "Generate clean, production-ready code",
        "Use semantic HTML elements",
    ]
    if include_accessibility:
        requirements.append("Include ARIA labels and accessibility attributes")
    requirements.extend(
        [
            "Match the design pixel-perfect",
            "Extract and use design tokens (colors, spacing, typography)",
            "Make it responsive",
            "Include comments explaining key decisions",
        ]
    )
    bullet_list = "\n".join(f"- {item}" for item in requirements)
    return (
        f"You are an expert frontend developer. Convert this design to "
        f"{target_framework} code using {styling}.\n\n"
        f"Requirements:\n{bullet_list}\n\n"
        "Provide the complete code with file structure."
    )


# =============================================================================
# Design analysis
# =============================================================================

ANALYSIS_PROMPTS: Dict[str, str] = {
    "accessibility": (
        "Analyze this design for WCAG 2.1 AA compliance. Check color contrast, "
        "text sizing, interactive element sizing, keyboard navigation, screen "
        "reader compatibility, and provide specific recommendations."
    ),
    "design-system": (
        "Analyze this design and identify the design system patterns used. "
        "Extract design tokens, component patterns, and suggest improvements "
        "for consistency."
    ),
    "layout": (
        "Analyze the layout structure, grid system, spacing patterns, and "
        "responsive design considerations. Provide recommendations for improvement."
    ),
    "colors": (
        "Extract the color palette, analyze color harmony, contrast ratios, and "
        "suggest improvements or alternatives."
    ),
    "typography": (
        "Analyze typography choices including font families, sizes, weights, line "
        "heights, and hierarchy. Provide recommendations."
    ),
    "spacing": (
        "Analyze spacing patterns, padding, margins, and white space usage. "
        "Identify the spacing scale and suggest improvements."
    ),
    "performance": (
        "Analyze the design for performance considerations including image "
        "optimization, lazy loading opportunities, and rendering efficiency."
    ),
}


def build_analysis_prompt(analysis_type: str) -> str:
    """Predefined prompt for known analysis types, else a focused generic one."""
    prompt = ANALYSIS_PROMPTS.get(analysis_type)
    if prompt is not None:
        return prompt
    return (
        f"Analyze this design focusing on: {analysis_type}. "
        "Provide detailed insights and recommendations."
    )


# =============================================================================
# Component generation
# =============================================================================

_COMPONENT_TEMPLATE = """Generate a {component_type} component in {framework} using {styling}.

Component specifications:
{props}

Requirements:
- Follow {framework} best practices
- Use TypeScript if applicable
- Include prop types/interfaces
- Make it reusable and customizable
- Add JSDoc comments
- Include usage examples
- Consider accessibility
- Make it responsive

Provide complete, production-ready code."""


def build_component_prompt(
    component_type: str,
    framework: str,
    styling: str,
    props: Optional[Dict[str, Any]] = None,
) -> str:
    rendered_props = json.dumps(props, indent=2, default=str) if props else "{}"
    return _COMPONENT_TEMPLATE.format(
        component_type=component_type,
        framework=framework,
        styling=styling,
        props=rendered_props,
    )
