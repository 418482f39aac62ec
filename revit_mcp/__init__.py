# =============================================================================
# revit_mcp  —  MCP tool server for Autodesk Revit
# =============================================================================
#
# PACKAGE LAYOUT:
#   core/   argument contracts, payload builders, reply formatters and the
#           socket client for the Revit plugin.  No FastMCP imports.
#   tools/  the tool catalog, the shared dispatcher and the FastMCP server.
# =============================================================================

__version__ = "0.1.0"
