"""Custom Gem support: workspace discovery, generation and saved configuration."""

from ui_designer_mcp.core.gem.generator import GemGenerationResult, GemGenerator
from ui_designer_mcp.core.gem.store import GemConfig, GemConfigStore
from ui_designer_mcp.core.gem.workspace import (
    DetectedFiles,
    SourceDocument,
    Workspace,
)

__all__ = [
    "DetectedFiles",
    "GemConfig",
    "GemConfigStore",
    "GemGenerationResult",
    "GemGenerator",
    "SourceDocument",
    "Workspace",
]
