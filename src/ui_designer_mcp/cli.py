"""Command-line entry point: ``ui-designer-mcp``."""

import logging
from pathlib import Path
from typing import Optional

import click

from ui_designer_mcp import __version__
from ui_designer_mcp.config.server import ServerConfig, set_config

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.command("ui-designer-mcp")
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False),
    help="TOML config file (overrides the layered lookup).",
)
@click.option(
    "--log-level",
    type=click.Choice(_LOG_LEVELS, case_sensitive=False),
    help="Log level for stderr output.",
)
@click.option(
    "--workspace",
    type=click.Path(file_okay=False),
    help="Project directory to scan for design-system and Gem files.",
)
@click.version_option(version=__version__, prog_name="ui-designer-mcp")
def main(
    config_file: Optional[str], log_level: Optional[str], workspace: Optional[str]
) -> None:
    """Run the UI designer MCP server over stdio."""
    config = ServerConfig.from_env(config_file)
    if log_level:
        config.log_level = log_level.upper()
    if workspace:
        config.workspace_root = Path(workspace)
    config.setup_logging()
    set_config(config)

    if not config.gemini.api_key:
        raise click.ClickException(
            "GEMINI_API_KEY environment variable is required "
            "(GOOGLE_API_KEY is accepted as well)"
        )

    from ui_designer_mcp.server import create_server

    mcp = create_server(config)
    logger.info("UI Designer MCP server running on stdio")
    mcp.run()


if __name__ == "__main__":
    main()
