"""Prompt for generating a custom Gem configuration guide."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:
    from ui_designer_mcp.core.gem.workspace import SourceDocument

DEFAULT_GEM_NAME_PREFIX = "UI Designer Pro"

_GEM_TEMPLATE = """You are an AI assistant helping to create a custom Gemini Gem configuration for UI design and code generation.

Based on the following information, generate a comprehensive Gem configuration including:
1. System instructions for the Gem
2. Training examples (prompt/response pairs)
3. Knowledge base content
4. Recommended settings

**Gem Name:** {gem_name}

**Steering Files (Best Practices):**
{steering}

**Design System Files:**
{design_system}

**Codebase Examples:**
{codebase}

**Custom Instructions:**
{custom_instructions}

**Auto-detected files:**
- Design system files: {design_system_list}
- Code examples: {codebase_list}

Generate a complete Gem configuration that includes:

1. **System Instructions**: Comprehensive instructions for the Gem that incorporate the steering files, design system, and coding patterns from the examples.

2. **Training Examples**: At least 5 example prompt/response pairs that demonstrate:
   - Generating UI designs in the user's style
   - Converting designs to code using their patterns
   - Analyzing designs according to their standards
   - Generating components following their conventions

3. **Knowledge Base**: Structured knowledge from the steering files and design system.

4. **Implementation Guide**: Step-by-step instructions for creating this Gem in Google AI Studio.

5. **Testing Prompts**: 5 prompts to test the Gem after creation.

Format the output as a comprehensive guide that the user can follow to create their custom Gem."""


def default_gem_name(project_name: str) -> str:
    return f"{DEFAULT_GEM_NAME_PREFIX} - {project_name}"


def render_steering(documents: Sequence[SourceDocument]) -> str:
    return "".join(
        f"\n\n## {doc.path} (from {doc.origin})\n\n{doc.content}" for doc in documents
    )


def render_design_system(documents: Sequence[SourceDocument]) -> str:
    return "".join(f"\n\n## {doc.path}\n\n{doc.content}" for doc in documents)


def render_codebase(documents: Sequence[SourceDocument]) -> str:
    return "".join(
        f"\n\n## {doc.path}\n\n```\n{doc.content}\n```" for doc in documents
    )


def build_gem_prompt(
    gem_name: str,
    *,
    steering: Sequence[SourceDocument] = (),
    design_system: Sequence[SourceDocument] = (),
    codebase: Sequence[SourceDocument] = (),
    design_system_files: Sequence[str] = (),
    codebase_examples: Sequence[str] = (),
    custom_instructions: Optional[str] = None,
) -> str:
    return _GEM_TEMPLATE.format(
        gem_name=gem_name,
        steering=render_steering(steering),
        design_system=render_design_system(design_system)
        or "No design system files provided",
        codebase=render_codebase(codebase) or "No codebase examples provided",
        custom_instructions=custom_instructions or "None provided",
        design_system_list=", ".join(design_system_files) or "none",
        codebase_list=", ".join(codebase_examples) or "none",
    )
