# =============================================================================
# tools/__init__.py
# =============================================================================
# This package turns the core/ pieces into MCP tools.
#
# ARCHITECTURAL ROLE:
#   catalog.py     the eight tools, each a ToolSpec (data, not code)
#   registry.py    ToolRegistry + ToolDispatcher, the one pipeline every
#                  tool call runs through
#   mcp_server.py  the FastMCP server that advertises and serves the specs
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT decide what to build (that's the agent's job)
#   - They do NOT touch the Revit API (that's the plugin's job)
#   - They do NOT hold state between calls
#
# TOOL CONTRACT QUALITY:
#   The description and the argument schema are all the agent sees.  A
#   clear description with units and defaults gets called correctly; a
#   vague one gets misused or ignored.
# =============================================================================
