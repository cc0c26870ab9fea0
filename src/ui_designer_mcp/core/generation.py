"""Gemini operations used by the tools, routed through the shared executor."""

import logging
from typing import Optional

from ui_designer_mcp.core.images import ImageInput
from ui_designer_mcp.core.providers import GeminiClient, GenerationResult
from ui_designer_mcp.core.resilience import OperationKind, ResilientExecutor

logger = logging.getLogger(__name__)


class DesignGenerator:
    """Text, image and multimodal generation with resilience applied.

    Every method builds a one-shot call for the executor, so pacing,
    fallback and rate-limit retries apply uniformly.
    """

    def __init__(
        self,
        client: GeminiClient,
        executor: ResilientExecutor,
        *,
        image_timeout: Optional[float] = None,
    ) -> None:
        self.client = client
        self.executor = executor
        self.image_timeout = image_timeout

    async def generate_text(
        self, prompt: str, *, preferred_model: Optional[str] = None
    ) -> GenerationResult:
        return await self.executor.execute(
            OperationKind.TEXT,
            lambda model: self.client.generate_text(model, prompt),
            preferred_model,
            operation_name="Text generation",
        )

    async def generate_ui_image(
        self, prompt: str, *, preferred_model: Optional[str] = None
    ) -> GenerationResult:
        """Generate a mockup under the image-generation deadline."""
        return await self.executor.execute(
            OperationKind.IMAGE,
            lambda model: self.client.generate_image(model, prompt),
            preferred_model,
            deadline=self.image_timeout,
            operation_name="Image generation",
        )

    async def generate_with_image(
        self,
        prompt: str,
        image: ImageInput,
        *,
        preferred_model: Optional[str] = None,
    ) -> GenerationResult:
        return await self.executor.execute(
            OperationKind.IMAGE,
            lambda model: self.client.generate_with_image(
                model, prompt, image.data, image.mime_type
            ),
            preferred_model,
            operation_name="Image analysis",
        )
