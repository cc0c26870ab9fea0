"""Core building blocks for ui-designer-mcp: resilience, providers, prompts."""
