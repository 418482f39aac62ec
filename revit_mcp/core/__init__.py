# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains everything a Revit tool needs EXCEPT the MCP binding:
#
#   schemas.py      what the agent may send (pydantic models + defaults)
#   normalizers.py  validated arguments → the payload Revit expects
#   connection.py   one JSON-RPC round trip to the Revit plugin
#   formatters.py   Revit's reply → text segments for the agent
#   models.py, errors.py, config.py   shared data, exceptions, settings
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP.  Every module here can be
#   exercised in a bare test process against a fake connection.
# =============================================================================
