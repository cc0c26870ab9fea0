"""Domain-specific configuration dataclasses.

``GeminiSettings`` holds credentials and model ids. Resilience tuning is
``ResilienceConfig`` from the resilience package, re-exported here so all
config sections can be imported from one place.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ui_designer_mcp.core.resilience.models import ResilienceConfig

DEFAULT_TEXT_MODEL = "gemini-2.5-flash"
DEFAULT_FALLBACK_TEXT_MODEL = "gemini-2.0-flash-exp"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"
DEFAULT_FALLBACK_IMAGE_MODEL = "gemini-3-pro-image-preview"


@dataclass
class GeminiSettings:
    """Gemini credentials and model selection.

    Attributes:
        api_key: Gemini API key (required to start the server)
        gem_id: Custom Gem id; replaces the primary text and image models
        text_model: Primary model for text-only generation
        image_model: Primary model for image and multimodal generation
        fallback_text_model: Used once when the text model is overloaded
        fallback_image_model: Used once when the image model is overloaded
    """

    api_key: Optional[str] = None
    gem_id: Optional[str] = None
    text_model: str = DEFAULT_TEXT_MODEL
    image_model: str = DEFAULT_IMAGE_MODEL
    fallback_text_model: str = DEFAULT_FALLBACK_TEXT_MODEL
    fallback_image_model: str = DEFAULT_FALLBACK_IMAGE_MODEL

    @classmethod
    def from_toml_dict(
        cls, data: Dict[str, Any], base: Optional["GeminiSettings"] = None
    ) -> "GeminiSettings":
        """Create settings from TOML dict (typically [gemini] section).

        Keys missing from ``data`` keep their value from ``base`` (or the
        defaults), so a section can be layered over a lower-priority file.
        """
        base = base or cls()
        return cls(
            api_key=data.get("api_key") or base.api_key,
            gem_id=data.get("gem_id") or base.gem_id,
            text_model=str(data.get("text_model", base.text_model)),
            image_model=str(data.get("image_model", base.image_model)),
            fallback_text_model=str(
                data.get("fallback_text_model", base.fallback_text_model)
            ),
            fallback_image_model=str(
                data.get("fallback_image_model", base.fallback_image_model)
            ),
        )

    @property
    def primary_text_model(self) -> str:
        return self.gem_id or self.text_model

    @property
    def primary_image_model(self) -> str:
        return self.gem_id or self.image_model

    def to_public_dict(self) -> Dict[str, Any]:
        """Settings safe to show to a client (no API key)."""
        return {
            "gem_id": self.gem_id,
            "text_model": self.primary_text_model,
            "image_model": self.primary_image_model,
            "fallback_text_model": self.fallback_text_model,
            "fallback_image_model": self.fallback_image_model,
            "api_key_configured": bool(self.api_key),
        }


__all__ = [
    "DEFAULT_FALLBACK_IMAGE_MODEL",
    "DEFAULT_FALLBACK_TEXT_MODEL",
    "DEFAULT_IMAGE_MODEL",
    "DEFAULT_TEXT_MODEL",
    "GeminiSettings",
    "ResilienceConfig",
]
