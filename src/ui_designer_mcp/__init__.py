"""MCP server exposing Gemini-backed UI design tools."""

__version__ = "0.3.0"
