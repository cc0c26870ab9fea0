"""Tests for the custom Gem tool handlers."""

import json

import pytest

from ui_designer_mcp.tools.gem import (
    handle_create_custom_gem,
    handle_regenerate_gem,
    handle_show_gem_config,
)


@pytest.fixture
def design_system(workspace_root):
    design = workspace_root / "design-system"
    design.mkdir()
    (design / "tokens.md").write_text("# Tokens")
    components = workspace_root / "src" / "components"
    components.mkdir(parents=True)
    (components / "Button.tsx").write_text("export const Button = () => null;")
    return workspace_root


class TestCreateCustomGem:
    @pytest.mark.asyncio
    async def test_generates_and_saves(self, services, gemini, design_system):
        response = await handle_create_custom_gem(services, custom_instructions="Be bold")

        assert response["success"] is True
        data = response["data"]
        assert data["gem_name"] == "UI Designer Pro - acme-web"
        assert data["project_name"] == "acme-web"
        assert data["response"] == "generate_text output"
        assert data["files_analyzed"] == {
            "steering": False,
            "design_system": 1,
            "code_examples": 1,
        }
        assert data["saved"] is True
        assert data["config_path"] == str(design_system.resolve() / ".kiro" / "gem-config.json")

        saved = json.loads((design_system / ".kiro" / "gem-config.json").read_text())
        assert saved["customInstructions"] == "Be bold"
        assert saved["designSystemFiles"] == ["design-system/tokens.md"]
        assert gemini.calls[0]["model"] == "gemini-2.5-flash"

    @pytest.mark.asyncio
    async def test_explicit_name_and_no_detection(self, services, design_system):
        response = await handle_create_custom_gem(
            services, gem_name="Acme Gem", auto_detect=False
        )

        assert response["data"]["gem_name"] == "Acme Gem"
        assert response["data"]["files_analyzed"]["design_system"] == 0

    @pytest.mark.asyncio
    async def test_generation_failure_is_reported(self, services, gemini):
        gemini.script(ValueError("bad prompt"))

        response = await handle_create_custom_gem(services)

        assert response["success"] is False
        assert services.gem_store.load() is None


class TestRegenerateGem:
    @pytest.mark.asyncio
    async def test_requires_saved_config(self, services, gemini):
        response = await handle_regenerate_gem(services)

        assert response["success"] is False
        assert response["data"]["error_code"] == "NOT_FOUND"
        assert "create_custom_gem" in response["data"]["remediation"]
        assert gemini.calls == []

    @pytest.mark.asyncio
    async def test_regenerates_from_saved_inputs(self, services, design_system):
        await handle_create_custom_gem(services, gem_name="Acme Gem")
        (design_system / "design-system" / "spacing.md").write_text("# Spacing")

        response = await handle_regenerate_gem(services, reason="rebranding")

        assert response["success"] is True
        data = response["data"]
        assert data["gem_name"] == "Acme Gem"
        assert data["reason"] == "rebranding"
        assert data["files_analyzed"]["design_system"] == 1
        assert data["previous_generated_at"] <= data["generated_at"]

    @pytest.mark.asyncio
    async def test_default_reason(self, services):
        await handle_create_custom_gem(services)

        response = await handle_regenerate_gem(services)

        assert response["data"]["reason"] == "Manual regeneration"


class TestShowGemConfig:
    def test_not_found(self, services):
        response = handle_show_gem_config(services)

        assert response["success"] is False
        assert response["data"]["error_code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_shows_saved_config(self, services, design_system):
        await handle_create_custom_gem(services)

        response = handle_show_gem_config(services)

        assert response["success"] is True
        data = response["data"]
        assert data["config"]["gemName"] == "UI Designer Pro - acme-web"
        assert data["design_system_count"] == 1
        assert data["code_examples_count"] == 1
        assert data["age_seconds"] >= 0
