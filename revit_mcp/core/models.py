# =============================================================================
# core/models.py  —  Data Models (what flows between the agent and Revit)
# =============================================================================
#
# These dataclasses define the shape of the per-call data that flows through
# the system.  They carry almost no behavior.
#
#   CommandReply   what Revit sends back for one command
#   OutputSegment  one block of text handed back to the agent
#
# The agent-facing argument contracts live in core/schemas.py (pydantic
# models, because they validate).  The wire payloads are plain dicts built
# by core/normalizers.py.
#
# LIFECYCLE:
#   Every object in this file is created for a single tool invocation and
#   thrown away when the invocation returns.  Nothing here is cached.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional

from revit_mcp.core.errors import TransportError


# -----------------------------------------------------------------------------
# Wire sentinels
# -----------------------------------------------------------------------------
# The Revit plugin reads an id of -1 as "no filter / use the default" and an
# empty category list as "all categories".  Inside Python the same idea is
# spelled None; the normalizers translate on the way out.
# -----------------------------------------------------------------------------
UNSET_ID = -1


# -----------------------------------------------------------------------------
# CommandReply: Revit's answer to one command
# -----------------------------------------------------------------------------
# On the wire the plugin uses PascalCase keys:
#   {"Success": true, "Response": [...], "Message": ""}
#
# Response is only meaningful when Success is true.  Message is the whole
# explanation when Success is false.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class CommandReply:
    """Structured reply from the Revit plugin."""

    success: bool
    response: Any = None
    message: Optional[str] = None

    @classmethod
    def from_wire(cls, raw: Any) -> "CommandReply":
        """Build a reply from the decoded JSON-RPC ``result``.

        A result that is not an object with a boolean ``Success`` means the
        reply itself is unreadable, which is a transport problem rather than
        a Revit-side rejection.
        """
        if not isinstance(raw, dict) or not isinstance(raw.get("Success"), bool):
            raise TransportError(f"Malformed reply from Revit: {raw!r}")
        message = raw.get("Message")
        return cls(
            success=raw["Success"],
            response=raw.get("Response"),
            message=message if message is None else str(message),
        )


# -----------------------------------------------------------------------------
# OutputSegment: one text block returned to the agent
# -----------------------------------------------------------------------------
# Tools return an ORDERED list of these: summary first, full data last.
# The MCP binding turns each one into a TextContent block.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OutputSegment:
    """A single typed block of tool output."""

    text: str
    type: str = field(default="text")


def text_segments(*texts: str) -> list[OutputSegment]:
    """Wrap plain strings as text segments, keeping their order."""
    return [OutputSegment(text=t) for t in texts]
