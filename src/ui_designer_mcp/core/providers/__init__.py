"""
Generative provider for ui-designer-mcp.

Example usage:
    from ui_designer_mcp.core.providers import GeminiClient

    client = GeminiClient(api_key)
    result = await client.generate_text("gemini-2.5-flash", prompt)
    print(result.text)
"""

from ui_designer_mcp.core.providers.base import GeneratedImage, GenerationResult
from ui_designer_mcp.core.providers.gemini import GeminiClient, parse_response

__all__ = [
    "GeminiClient",
    "GeneratedImage",
    "GenerationResult",
    "parse_response",
]
