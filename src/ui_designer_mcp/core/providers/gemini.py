"""
Gemini client built on the google-genai SDK.

Each method performs exactly one ``generate_content`` call against the given
model. SDK exceptions are not wrapped: ``google.genai.errors.APIError``
carries ``code`` and ``status`` fields that the resilience layer classifies.
"""

import logging
from typing import Any, Optional

from google import genai
from google.genai import types

from ui_designer_mcp.core.providers.base import GeneratedImage, GenerationResult

logger = logging.getLogger(__name__)

# Settings used for UI mockup generation
IMAGE_GENERATION_CONFIG = {
    "response_modalities": ["TEXT", "IMAGE"],
    "candidate_count": 1,
    "temperature": 1.0,
    "max_output_tokens": 8192,
}


class GeminiClient:
    """Async wrapper around ``genai.Client`` for the design tools."""

    def __init__(self, api_key: Optional[str] = None, *, client: Any = None) -> None:
        if client is None:
            if not api_key:
                raise ValueError("A Gemini API key is required")
            client = genai.Client(api_key=api_key)
        self._client = client

    async def generate_text(self, model: str, prompt: str) -> GenerationResult:
        """Generate a text-only response."""
        logger.debug("Gemini text request: model=%s, prompt_chars=%d", model, len(prompt))
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
        )
        return parse_response(response, model)

    async def generate_image(self, model: str, prompt: str) -> GenerationResult:
        """Generate a response that may contain inline images."""
        logger.debug("Gemini image request: model=%s", model)
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=prompt,
            config=types.GenerateContentConfig(**IMAGE_GENERATION_CONFIG),
        )
        return parse_response(response, model)

    async def generate_with_image(
        self, model: str, prompt: str, image_data: bytes, mime_type: str
    ) -> GenerationResult:
        """Generate a text response about an input image."""
        logger.debug(
            "Gemini multimodal request: model=%s, image_bytes=%d, mime=%s",
            model,
            len(image_data),
            mime_type,
        )
        contents = [
            types.Content(
                role="user",
                parts=[
                    types.Part.from_text(text=prompt),
                    types.Part.from_bytes(data=image_data, mime_type=mime_type),
                ],
            )
        ]
        response = await self._client.aio.models.generate_content(
            model=model,
            contents=contents,
        )
        return parse_response(response, model)


def parse_response(response: Any, model: str) -> GenerationResult:
    """Collect text and inline image parts from a ``generate_content`` response."""
    result = GenerationResult(model=model)
    for candidate in getattr(response, "candidates", None) or []:
        content = getattr(candidate, "content", None)
        for part in getattr(content, "parts", None) or []:
            text = getattr(part, "text", None)
            if text:
                result.text_parts.append(text)
            inline = getattr(part, "inline_data", None)
            if inline is not None and getattr(inline, "data", None):
                result.images.append(
                    GeneratedImage(
                        data=inline.data,
                        mime_type=getattr(inline, "mime_type", None) or "image/png",
                    )
                )
    return result
