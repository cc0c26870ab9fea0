"""Persistence of the Gem configuration under ``.kiro/gem-config.json``."""

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from ui_designer_mcp.core.errors import GemConfigError

logger = logging.getLogger(__name__)

GEM_CONFIG_DIR = ".kiro"
GEM_CONFIG_FILENAME = "gem-config.json"


class GemConfig(BaseModel):
    """Inputs of the last Gem generation, saved for regeneration.

    Serialized with camelCase keys (``gemName``, ``generatedAt`` ...).
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    gem_name: str
    project_name: str = "Project"
    design_system_files: List[str] = Field(default_factory=list)
    codebase_examples: List[str] = Field(default_factory=list)
    custom_instructions: Optional[str] = None
    generated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @field_validator("generated_at")
    @classmethod
    def _assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class GemConfigStore:
    """Reads and writes the Gem config for one workspace root."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.path = Path(root) / GEM_CONFIG_DIR / GEM_CONFIG_FILENAME

    def save(self, config: GemConfig) -> bool:
        """Write ``config`` atomically.

        Failures are logged rather than raised so a finished generation is
        still returned to the caller.

        Returns:
            True if the file was written.
        """
        payload = config.model_dump_json(by_alias=True, indent=2)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_path = tempfile.mkstemp(
                dir=self.path.parent, prefix=".gem-config.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    f.write(payload)
                os.replace(temp_path, self.path)
            except OSError:
                try:
                    os.unlink(temp_path)
                except OSError:
                    pass
                raise
        except OSError as exc:
            logger.error("Error saving gem config to %s: %s", self.path, exc)
            return False

        logger.debug("Saved gem config to %s", self.path)
        return True

    def load(self) -> Optional[GemConfig]:
        """Return the saved config, or None if missing or unreadable."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError:
            return None
        try:
            return GemConfig.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("Ignoring invalid gem config %s: %s", self.path, exc)
            return None

    def require(self) -> GemConfig:
        """Return the saved config.

        Raises:
            GemConfigError: If no usable config is saved.
        """
        config = self.load()
        if config is None:
            raise GemConfigError(f"No Gem configuration found at {self.path}")
        return config
