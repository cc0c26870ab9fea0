"""Build and persist a custom Gem configuration for a workspace."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional, Sequence

from ui_designer_mcp.core.gem.store import GemConfig, GemConfigStore
from ui_designer_mcp.core.gem.workspace import Workspace
from ui_designer_mcp.core.prompts import build_gem_prompt, default_gem_name

if TYPE_CHECKING:
    from ui_designer_mcp.core.generation import DesignGenerator

logger = logging.getLogger(__name__)


@dataclass
class GemGenerationResult:
    """Outcome of one Gem generation."""

    response: str
    gem_name: str
    config: GemConfig
    steering_found: bool
    design_system_count: int
    code_examples_count: int
    saved: bool


class GemGenerator:
    """Gathers workspace inputs, asks Gemini for a Gem guide, saves the inputs."""

    def __init__(
        self,
        generator: "DesignGenerator",
        workspace: Workspace,
        store: Optional[GemConfigStore] = None,
    ) -> None:
        self.generator = generator
        self.workspace = workspace
        self.store = store or GemConfigStore(workspace.root)

    async def generate(
        self,
        *,
        design_system_files: Optional[Sequence[str]] = None,
        codebase_examples: Optional[Sequence[str]] = None,
        custom_instructions: Optional[str] = None,
        gem_name: Optional[str] = None,
        auto_detect: bool = True,
    ) -> GemGenerationResult:
        """Generate the Gem guide.

        Explicit file lists win; auto-detection only fills lists left empty.
        """
        design_files: List[str] = list(design_system_files or [])
        code_files: List[str] = list(codebase_examples or [])

        if auto_detect:
            detected = self.workspace.detect_files()
            if not design_files:
                design_files = detected.design_system_files
            if not code_files:
                code_files = detected.codebase_examples

        project_name = self.workspace.project_name()
        name = gem_name or default_gem_name(project_name)

        steering = self.workspace.read_steering_files()
        prompt = build_gem_prompt(
            name,
            steering=steering,
            design_system=self.workspace.read_files(design_files),
            codebase=self.workspace.read_files(code_files),
            design_system_files=design_files,
            codebase_examples=code_files,
            custom_instructions=custom_instructions,
        )

        result = await self.generator.generate_text(prompt)

        config = GemConfig(
            gem_name=name,
            project_name=project_name,
            design_system_files=design_files,
            codebase_examples=code_files,
            custom_instructions=custom_instructions,
            generated_at=datetime.now(timezone.utc),
        )
        saved = self.store.save(config)

        return GemGenerationResult(
            response=result.text,
            gem_name=name,
            config=config,
            steering_found=bool(steering),
            design_system_count=len(design_files),
            code_examples_count=len(code_files),
            saved=saved,
        )

    async def regenerate(self, previous: GemConfig) -> GemGenerationResult:
        """Re-run generation from a saved config, re-detecting new files."""
        return await self.generate(
            design_system_files=previous.design_system_files,
            codebase_examples=previous.codebase_examples,
            custom_instructions=previous.custom_instructions,
            gem_name=previous.gem_name,
            auto_detect=True,
        )
