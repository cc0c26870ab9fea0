"""FastMCP server assembly.

One ``ResilientExecutor`` (and with it one request scheduler) is created per
server and shared by every tool.
"""

import logging
from typing import Optional

import httpx
from mcp.server.fastmcp import FastMCP

from ui_designer_mcp.config.server import ServerConfig, get_config
from ui_designer_mcp.core.gem import GemConfigStore, GemGenerator, Workspace
from ui_designer_mcp.core.generation import DesignGenerator
from ui_designer_mcp.core.providers import GeminiClient
from ui_designer_mcp.core.resilience import ResilientExecutor, ResourceSelector
from ui_designer_mcp.tools import (
    DesignServices,
    register_design_tools,
    register_gem_tools,
    register_status_tools,
)

logger = logging.getLogger(__name__)

SERVER_INSTRUCTIONS = (
    "Generative UI design tools backed by Google Gemini: mockup generation, "
    "design-to-code, design analysis, component generation and custom Gem "
    "configuration. Calls are queued and paced; expect image generation to "
    "take tens of seconds."
)


def build_services(
    config: ServerConfig,
    *,
    client: Optional[GeminiClient] = None,
    executor: Optional[ResilientExecutor] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> DesignServices:
    """Wire the client, shared executor and workspace helpers together."""
    if executor is None:
        selector = ResourceSelector.from_settings(config.gemini)
        executor = ResilientExecutor.from_config(config.resilience, selector)
    if client is None:
        client = GeminiClient(config.require_api_key())

    generator = DesignGenerator(
        client, executor, image_timeout=config.resilience.image_timeout
    )
    workspace = Workspace(config.get_workspace_root())
    gem_store = GemConfigStore(workspace.root)

    return DesignServices(
        config=config,
        executor=executor,
        generator=generator,
        workspace=workspace,
        gem_store=gem_store,
        gem_generator=GemGenerator(generator, workspace, gem_store),
        http_client=http_client,
    )


def create_server(
    config: Optional[ServerConfig] = None,
    *,
    client: Optional[GeminiClient] = None,
    executor: Optional[ResilientExecutor] = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> FastMCP:
    """Create the FastMCP app with every tool registered.

    Raises:
        ValueError: If no client is given and no API key is configured.
    """
    config = config or get_config()
    services = build_services(
        config, client=client, executor=executor, http_client=http_client
    )

    mcp = FastMCP(config.server_name, instructions=SERVER_INSTRUCTIONS)
    register_design_tools(mcp, services)
    register_gem_tools(mcp, services)
    register_status_tools(mcp, services)

    for warning in config.startup_warnings:
        logger.warning(warning)

    selection = services.executor.selector.to_dict()
    logger.info(
        "Server %s %s ready (text model %s, image model %s, workspace %s)",
        config.server_name,
        config.server_version,
        selection["text"]["primary"],
        selection["image"]["primary"],
        services.workspace.root,
    )
    return mcp
