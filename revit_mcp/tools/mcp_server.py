# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server (ALL Revit tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Exposes every ToolSpec in the catalog as an MCP tool.  The tools are
#   declared as data (tools/catalog.py), so instead of one decorated function
#   per tool we register one RevitCommandTool object per spec.
#
# HOW IT WORKS (the flow):
#   1. An MCP client (a desktop assistant, an agent) lists the tools and
#      reads each name, description and JSON schema
#   2. It calls a tool by name, e.g. "create_grid"
#   3. FastMCP routes the call to RevitCommandTool.run()
#   4. ToolDispatcher validates, builds the payload, asks Revit, formats
#   5. The client receives one TextContent block per output segment
#
# VALIDATION LIVES IN OUR LAYER:
#   The advertised schema is generated from the same pydantic models the
#   dispatcher validates against.  Bad arguments come back as readable text
#   ("Operation failed: invalid arguments: data.action: ..."), never as a
#   protocol error.
#
# RUNNING THIS SERVER:
#   a) Installed script:  revit-mcp-server
#   b) From the checkout: python main.py
#   c) As a module:       python -m revit_mcp.tools.mcp_server
# =============================================================================

import logging
import sys
from typing import Any, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.tools import Tool, ToolResult
from mcp.types import TextContent

from revit_mcp.core.config import Settings
from revit_mcp.core.connection import ConnectionProvider, RevitConnectionManager
from revit_mcp.tools.catalog import build_registry
from revit_mcp.tools.registry import ToolDispatcher, ToolRegistry, ToolSpec

SERVER_NAME = "revit-mcp"

logger = logging.getLogger(__name__)


# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because with the stdio transport STDOUT carries the MCP
# JSON stream.  A log line on stdout would corrupt the protocol.
# =============================================================================
def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


# =============================================================================
# RevitCommandTool: one MCP tool backed by one ToolSpec
# =============================================================================
class RevitCommandTool(Tool):
    """MCP tool that forwards its arguments to the shared dispatcher."""

    def __init__(self, spec: ToolSpec, dispatcher: ToolDispatcher):
        super().__init__(
            name=spec.name,
            description=spec.description,
            parameters=spec.input_schema(),
        )
        self._spec = spec
        self._dispatcher = dispatcher

    def __repr__(self) -> str:
        return f"RevitCommandTool(name={self.name!r}, command={self._spec.command!r})"

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        segments = await self._dispatcher.invoke(self._spec.name, arguments)
        return ToolResult(
            content=[TextContent(type=segment.type, text=segment.text) for segment in segments]
        )


# =============================================================================
# Server assembly
# =============================================================================
def create_server(
    registry: Optional[ToolRegistry] = None,
    connections: Optional[ConnectionProvider] = None,
    settings: Optional[Settings] = None,
) -> FastMCP:
    """Build a FastMCP server with every tool in ``registry`` registered once.

    Tests pass their own ``connections``; in production the connection
    manager is built from ``settings`` (or the environment).
    """
    registry = registry if registry is not None else build_registry()
    if connections is None:
        settings = settings or Settings.from_env()
        connections = RevitConnectionManager.from_settings(settings)

    dispatcher = ToolDispatcher(registry, connections)
    mcp = FastMCP(SERVER_NAME)
    for spec in registry:
        mcp.add_tool(RevitCommandTool(spec, dispatcher))
    logger.info(f"Registered {len(registry)} Revit tools: {', '.join(registry.names())}")
    return mcp


def main() -> None:
    load_dotenv()
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logger.info(f"Revit plugin at {settings.revit_host}:{settings.revit_port}, "
                f"timeout {settings.revit_timeout:g}s")
    mcp = create_server(settings=settings)
    mcp.run(transport=settings.transport)


if __name__ == "__main__":
    main()
