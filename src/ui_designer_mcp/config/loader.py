"""ServerConfig loading and validation logic.

Provides ``_ServerConfigLoader``, a mixin class whose methods are inherited by
``ServerConfig`` (defined in ``server.py``).
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional, cast

if TYPE_CHECKING:
    from ui_designer_mcp.config.server import ServerConfig

try:
    import tomllib
except ImportError:
    import tomli as tomllib  # Python < 3.11 fallback

from ui_designer_mcp.config.domains import GeminiSettings, ResilienceConfig
from ui_designer_mcp.config.parsing import (
    _normalize_log_level,
    _parse_bool,
    _parse_millis,
    _parse_non_negative_int,
)

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV_VAR = "UI_DESIGNER_MCP_CONFIG_FILE"
PROJECT_CONFIG_NAMES = ("ui-designer-mcp.toml", ".ui-designer-mcp.toml")
USER_CONFIG_NAME = ".ui-designer-mcp.toml"

# Millisecond env vars -> ResilienceConfig attribute (seconds)
_MILLIS_ENV_VARS = {
    "GEMINI_MIN_REQUEST_INTERVAL": "min_request_interval",
    "GEMINI_INITIAL_RETRY_DELAY": "initial_retry_delay",
    "GEMINI_TIMEOUT": "timeout",
    "GEMINI_IMAGE_TIMEOUT": "image_timeout",
}

_MODEL_ENV_VARS = {
    "GEMINI_MODEL": "text_model",
    "GEMINI_IMAGE_MODEL": "image_model",
    "GEMINI_FALLBACK_MODEL": "fallback_text_model",
    "GEMINI_FALLBACK_IMAGE_MODEL": "fallback_image_model",
}


class _ServerConfigLoader:
    """Mixin providing config-loading methods for ``ServerConfig``.

    At runtime ``self`` is always a ``ServerConfig`` instance.
    """

    if TYPE_CHECKING:
        workspace_root: Optional[Path]
        log_level: str
        structured_logging: bool
        server_name: str
        server_version: str
        gemini: GeminiSettings
        resilience: ResilienceConfig
        startup_warnings: List[str]

        def _add_startup_warning(self, message: str) -> None: ...

    @classmethod
    def from_env(cls, config_file: Optional[str] = None) -> "ServerConfig":
        """
        Create configuration from environment variables and optional TOML file.

        Priority (highest to lowest):
        1. Environment variables
        2. Project TOML config (./ui-designer-mcp.toml or ./.ui-designer-mcp.toml)
        3. User TOML config (~/.ui-designer-mcp.toml)
        4. XDG config (~/.config/ui-designer-mcp/config.toml)
        5. Default values
        """
        config = cls()

        toml_path = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        if toml_path:
            config._load_toml(Path(toml_path))
        else:
            xdg_config_home = os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
            xdg_config = Path(xdg_config_home) / "ui-designer-mcp" / "config.toml"
            if xdg_config.exists():
                config._load_toml(xdg_config)
                logger.debug(f"Loaded XDG config from {xdg_config}")

            home_config = Path.home() / USER_CONFIG_NAME
            if home_config.exists():
                config._load_toml(home_config)
                logger.debug(f"Loaded user config from {home_config}")

            for name in PROJECT_CONFIG_NAMES:
                project_config = Path(name)
                if project_config.exists():
                    config._load_toml(project_config)
                    logger.debug(f"Loaded project config from {project_config}")
                    break

        config._load_env()
        config._validate_startup_configuration()
        return cast("ServerConfig", config)

    def _load_toml(self, path: Path) -> None:
        """Load configuration from TOML file."""
        if not path.exists():
            logger.warning(f"Config file not found: {path}")
            return

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)

            if "workspace" in data:
                ws = data["workspace"]
                if "root" in ws:
                    self.workspace_root = Path(ws["root"])

            if "logging" in data:
                log = data["logging"]
                if "level" in log:
                    self.log_level = _normalize_log_level(
                        log["level"], self._add_startup_warning
                    )
                if "structured" in log:
                    self.structured_logging = _parse_bool(log["structured"])

            if "server" in data:
                srv = data["server"]
                if "name" in srv:
                    self.server_name = srv["name"]
                if "version" in srv:
                    self.server_version = srv["version"]

            if "gemini" in data:
                self.gemini = GeminiSettings.from_toml_dict(
                    data["gemini"], base=self.gemini
                )

            if "resilience" in data:
                self.resilience = ResilienceConfig.from_toml_dict(
                    data["resilience"], base=self.resilience
                )

        except Exception as e:
            logger.error(f"Error loading config file {path}: {e}")
            self._add_startup_warning(f"Error loading config file {path}: {e}")

    def _load_env(self) -> None:
        """Load configuration from environment variables."""
        if root := os.environ.get("UI_DESIGNER_MCP_WORKSPACE_ROOT"):
            self.workspace_root = Path(root)

        if level := os.environ.get("UI_DESIGNER_MCP_LOG_LEVEL"):
            self.log_level = _normalize_log_level(level, self._add_startup_warning)

        if structured := os.environ.get("UI_DESIGNER_MCP_STRUCTURED_LOGGING"):
            self.structured_logging = _parse_bool(structured)

        # API key: GEMINI_API_KEY wins over GOOGLE_API_KEY
        if api_key := os.environ.get("GEMINI_API_KEY") or os.environ.get("GOOGLE_API_KEY"):
            self.gemini.api_key = api_key

        if gem_id := os.environ.get("GEMINI_GEM_ID"):
            self.gemini.gem_id = gem_id.strip()

        for env_var, attr in _MODEL_ENV_VARS.items():
            if model := os.environ.get(env_var):
                setattr(self.gemini, attr, model.strip())

        for env_var, attr in _MILLIS_ENV_VARS.items():
            raw = os.environ.get(env_var)
            if raw is None or not raw.strip():
                continue
            seconds = _parse_millis(env_var, raw, self._add_startup_warning)
            if seconds is not None:
                setattr(self.resilience, attr, seconds)

        if retries := os.environ.get("GEMINI_MAX_RETRIES"):
            parsed = _parse_non_negative_int(
                "GEMINI_MAX_RETRIES", retries, self._add_startup_warning
            )
            if parsed is not None:
                self.resilience.max_retries = parsed

    def _validate_startup_configuration(self) -> None:
        """Record warnings for settings that will not work as configured."""
        if not self.gemini.api_key:
            self._add_startup_warning(
                "No Gemini API key configured; set GEMINI_API_KEY or GOOGLE_API_KEY"
            )

    def require_api_key(self) -> str:
        """Return the API key or raise ``ValueError`` when none is configured."""
        if not self.gemini.api_key:
            raise ValueError(
                "GEMINI_API_KEY environment variable is required "
                "(GOOGLE_API_KEY is accepted as well)"
            )
        return self.gemini.api_key
