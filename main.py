# =============================================================================
# main.py  —  Entry Point for the Revit MCP tool server
# =============================================================================
#
# HOW TO RUN:
#   uv run python main.py
#
# WHAT HAPPENS:
#   1. Loads .env (REVIT_HOST, REVIT_PORT, REVIT_TIMEOUT, MCP_LOG_LEVEL, ...)
#   2. Builds the tool registry (revit_mcp/tools/catalog.py)
#   3. Registers every tool with FastMCP (revit_mcp/tools/mcp_server.py)
#   4. Serves MCP over stdio until the client disconnects
#
#   Each tool call opens its own socket to the Revit plugin, sends one
#   command, and closes the socket again.
# =============================================================================

from revit_mcp.tools.mcp_server import main

if __name__ == "__main__":
    main()
