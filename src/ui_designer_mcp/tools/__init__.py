"""MCP tool registration for ui-designer-mcp."""

from ui_designer_mcp.tools.common import DesignServices
from ui_designer_mcp.tools.design import register_design_tools
from ui_designer_mcp.tools.gem import register_gem_tools
from ui_designer_mcp.tools.status import register_status_tools

__all__ = [
    "DesignServices",
    "register_design_tools",
    "register_gem_tools",
    "register_status_tools",
]
