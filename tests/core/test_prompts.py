"""Tests for prompt builders."""

from ui_designer_mcp.core.gem import GemConfig, SourceDocument
from ui_designer_mcp.core.prompts import (
    ANALYSIS_PROMPTS,
    build_analysis_prompt,
    build_component_prompt,
    build_design_to_code_prompt,
    build_gem_prompt,
    build_project_context,
    build_ui_design_prompt,
    default_gem_name,
)


class TestUiDesignPrompt:
    def test_fields_rendered(self):
        prompt = build_ui_design_prompt(
            "Checkout page", style="minimal", color_scheme="dark", framework="react"
        )

        assert prompt.startswith("Create a professional UI design mockup for:\n\nCheckout page")
        assert "Style: minimal" in prompt
        assert "Color Scheme: dark" in prompt
        assert "Framework: react" in prompt
        assert "## Project Context" not in prompt

    def test_blank_options_use_defaults(self):
        prompt = build_ui_design_prompt("Login", style="", color_scheme="", framework="")

        assert "Style: modern" in prompt
        assert "Color Scheme: light" in prompt
        assert "Framework: generic" in prompt

    def test_project_context_included(self):
        config = GemConfig(
            gem_name="G",
            project_name="acme-web",
            design_system_files=["a.md", "b.md"],
            codebase_examples=["Button.tsx"],
            custom_instructions="Rounded corners everywhere",
        )

        prompt = build_ui_design_prompt("Login", project_context=build_project_context(config))

        assert "## Project Context\nProject: acme-web" in prompt
        assert "Design System Files: 2 files detected" in prompt
        assert "Component Examples: 1 files detected" in prompt
        assert "Custom Instructions:\nRounded corners everywhere" in prompt


class TestProjectContext:
    def test_empty_without_config(self):
        assert build_project_context(None) == ""

    def test_counts_omitted_when_empty(self):
        context = build_project_context(GemConfig(gem_name="G", project_name="p"))

        assert "Project: p" in context
        assert "files detected" not in context
        assert "Custom Instructions" not in context


class TestDesignToCodePrompt:
    def test_accessibility_requirement_toggles(self):
        with_a11y = build_design_to_code_prompt("react", "tailwind")
        without = build_design_to_code_prompt("vue", "css", include_accessibility=False)

        assert "Convert this design to react code using tailwind." in with_a11y
        assert "ARIA labels" in with_a11y
        assert "ARIA labels" not in without
        assert without.endswith("Provide the complete code with file structure.")


class TestAnalysisPrompt:
    def test_known_types(self):
        assert set(ANALYSIS_PROMPTS) == {
            "accessibility",
            "design-system",
            "layout",
            "colors",
            "typography",
            "spacing",
            "performance",
        }
        assert "WCAG 2.1 AA" in build_analysis_prompt("accessibility")

    def test_unknown_type_gets_generic_prompt(self):
        assert build_analysis_prompt("motion") == (
            "Analyze this design focusing on: motion. "
            "Provide detailed insights and recommendations."
        )


class TestComponentPrompt:
    def test_props_rendered_as_json(self):
        prompt = build_component_prompt(
            "button", "react", "tailwind", {"variant": "primary", "size": "lg"}
        )

        assert prompt.startswith("Generate a button component in react using tailwind.")
        assert '"variant": "primary"' in prompt
        assert "- Follow react best practices" in prompt

    def test_missing_props(self):
        assert "Component specifications:\n{}" in build_component_prompt("card", "vue", "css")


class TestGemPrompt:
    def test_sections(self):
        prompt = build_gem_prompt(
            default_gem_name("acme"),
            steering=[SourceDocument("rules.md", "Be consistent", origin="/p/steering")],
            design_system=[SourceDocument("tokens.md", "blue")],
            codebase=[SourceDocument("Button.tsx", "export {}")],
            design_system_files=["tokens.md"],
            codebase_examples=["Button.tsx"],
        )

        assert "**Gem Name:** UI Designer Pro - acme" in prompt
        assert "## rules.md (from /p/steering)\n\nBe consistent" in prompt
        assert "## Button.tsx\n\n```\nexport {}\n```" in prompt
        assert "**Custom Instructions:**\nNone provided" in prompt
        assert "- Design system files: tokens.md" in prompt

    def test_empty_inputs(self):
        prompt = build_gem_prompt("G")

        assert "- Design system files: none" in prompt
        assert "- Code examples: none" in prompt
