"""Configuration package for ui-designer-mcp.

Sub-modules:
    parsing    – Boolean, log level and millisecond parsing helpers
    domains    – GeminiSettings, ResilienceConfig, default model ids
    server     – ServerConfig dataclass, get_config/set_config globals
    loader     – ServerConfig loading/validation mixin (_ServerConfigLoader)
"""

from ui_designer_mcp.config.domains import (  # noqa: F401
    DEFAULT_FALLBACK_IMAGE_MODEL,
    DEFAULT_FALLBACK_TEXT_MODEL,
    DEFAULT_IMAGE_MODEL,
    DEFAULT_TEXT_MODEL,
    GeminiSettings,
    ResilienceConfig,
)
from ui_designer_mcp.config.parsing import _parse_bool  # noqa: F401
from ui_designer_mcp.config.server import (  # noqa: F401
    _PACKAGE_VERSION,
    ServerConfig,
    get_config,
    set_config,
)
