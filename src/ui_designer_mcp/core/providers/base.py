"""Normalized results returned by generative providers."""

import base64
from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class GeneratedImage:
    """Inline image returned by the model."""

    data: bytes
    mime_type: str = "image/png"

    def to_data_uri(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass
class GenerationResult:
    """Text and image parts of one model response, in response order.

    Attributes:
        model: Model id that produced the response
        text_parts: Text parts of the first candidate(s)
        images: Inline images returned alongside the text
    """

    model: str
    text_parts: List[str] = field(default_factory=list)
    images: List[GeneratedImage] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(self.text_parts)

    @property
    def has_image(self) -> bool:
        return bool(self.images)
