"""Primary and fallback model selection per operation kind."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, Mapping, Optional, Union

from ui_designer_mcp.core.resilience.models import OperationKind

if TYPE_CHECKING:
    from ui_designer_mcp.config.domains import GeminiSettings


@dataclass(frozen=True)
class ResourceSelection:
    """Models used for one operation kind."""

    primary: str
    fallback: str


class ResourceSelector:
    """Read-only mapping from operation kind to its models."""

    def __init__(self, selections: Mapping[OperationKind, ResourceSelection]) -> None:
        missing = [kind.value for kind in OperationKind if kind not in selections]
        if missing:
            raise ValueError(f"No model selection for: {', '.join(missing)}")
        self._selections: Dict[OperationKind, ResourceSelection] = dict(selections)

    @classmethod
    def from_settings(cls, settings: "GeminiSettings") -> "ResourceSelector":
        """Build the selector from Gemini settings.

        A configured Gem id replaces the primary model for both kinds.
        """
        return cls(
            {
                OperationKind.TEXT: ResourceSelection(
                    primary=settings.primary_text_model, fallback=settings.fallback_text_model
                ),
                OperationKind.IMAGE: ResourceSelection(
                    primary=settings.primary_image_model, fallback=settings.fallback_image_model
                ),
            }
        )

    def selection_for(self, kind: Union[OperationKind, str]) -> ResourceSelection:
        return self._selections[OperationKind(kind)]

    def resolve(
        self, kind: Union[OperationKind, str], preferred: Optional[str] = None
    ) -> str:
        """Return ``preferred`` when given, else the primary model for ``kind``."""
        if preferred:
            return preferred
        return self.selection_for(kind).primary

    def fallback_for(self, kind: Union[OperationKind, str]) -> str:
        return self.selection_for(kind).fallback

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            kind.value: {"primary": sel.primary, "fallback": sel.fallback}
            for kind, sel in self._selections.items()
        }
