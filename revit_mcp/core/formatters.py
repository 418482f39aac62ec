# =============================================================================
# core/formatters.py  —  Revit replies → text the agent can reason about
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Turns a CommandReply (or a failure that prevented one) into an ordered
#   list of OutputSegments.
#
# THE SHAPES:
#   failure (any kind)    → exactly ONE segment, prefixed with the operation
#   success, list result  → summary with a count, then the full JSON
#   success, id list      → one line: count + ids
#   success, free-form    → the object as indented JSON, no hand-built summary
#
#   An empty list is a normal result: "Found 0 element(s)..." has the same
#   shape as "Found 12 element(s)...".
# =============================================================================

import json
from typing import Any, Callable

from pydantic import BaseModel

from revit_mcp.core.errors import ArgumentValidationError, TransportError
from revit_mcp.core.models import CommandReply, OutputSegment, text_segments
from revit_mcp.core.schemas import OperateElementArgs

# (reply, validated args) -> segments; only called when reply.success is True
SuccessFormatter = Callable[[CommandReply, BaseModel], list[OutputSegment]]


def to_json(value: Any) -> str:
    """Indented JSON, the machine-readable echo appended to summaries."""
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def _first(item: Any, *keys: str) -> Any:
    if not isinstance(item, dict):
        return None
    for key in keys:
        value = item.get(key)
        if value not in (None, ""):
            return value
    return None


# =============================================================================
# Failure rendering (shared by every tool)
# =============================================================================
def render_remote_failure(prefix: str, reply: CommandReply) -> list[OutputSegment]:
    message = reply.message if reply.message is not None else "Revit returned no message"
    return text_segments(f"{prefix}: {message}")


def render_transport_failure(prefix: str, tool_name: str, error: TransportError) -> list[OutputSegment]:
    return text_segments(f"{prefix}: Revit command {tool_name} did not complete: {error.message}")


def render_validation_failure(prefix: str, error: ArgumentValidationError) -> list[OutputSegment]:
    return text_segments(f"{prefix}: invalid arguments: {error.message}")


def render_reply(
    reply: CommandReply,
    args: BaseModel,
    *,
    prefix: str,
    on_success: SuccessFormatter,
) -> list[OutputSegment]:
    """Branch on the reply's success flag."""
    if not reply.success:
        return render_remote_failure(prefix, reply)
    return on_success(reply, args)


# =============================================================================
# Success formatters
# =============================================================================
def _as_list(response: Any) -> list:
    """A missing response is no items; a single object is one item."""
    if response is None:
        return []
    if isinstance(response, list):
        return response
    return [response]


def format_element_list(reply: CommandReply, args: BaseModel) -> list[OutputSegment]:
    elements = _as_list(reply.response)
    summary = f"Found {len(elements)} element(s) matching filter criteria.\n\n"
    if elements:
        summary += "Elements:\n"
        for index, element in enumerate(elements, start=1):
            element_id = _first(element, "id", "Id")
            category = _first(element, "category") or "N/A"
            type_name = _first(element, "typeName", "elementTypeName") or "N/A"
            if element_id is None:
                element_id = "N/A"
            summary += f"{index}. ID: {element_id}, Category: {category}, Type: {type_name}\n"

    return text_segments(summary, f"Full JSON response:\n{to_json(reply.response)}")


def format_operation(reply: CommandReply, args: OperateElementArgs) -> list[OutputSegment]:
    data = args.data
    message = (
        f"Successfully performed {data.action} operation on "
        f"{len(data.elementIds)} element(s)."
    )
    if data.action == "SetColor":
        r, g, b = data.colorValue
        message += f" Applied color RGB({r}, {g}, {b})."
    elif data.action == "SetTransparency":
        message += f" Applied transparency: {data.transparencyValue}%."
    if isinstance(reply.response, list):
        message += f" Revit reported {len(reply.response)} affected element(s)."
    return text_segments(message)


def created_ids(noun: str) -> SuccessFormatter:
    """One-line summary for commands that answer with a list of new ids."""

    def format_created(reply: CommandReply, args: BaseModel) -> list[OutputSegment]:
        ids = _as_list(reply.response)
        joined = ", ".join(str(element_id) for element_id in ids)
        return text_segments(f"Successfully created {len(ids)} {noun}(s). Element IDs: {joined}")

    return format_created


def json_echo(noun: str = "item") -> SuccessFormatter:
    """Render the reply payload as indented JSON.

    A list payload is preceded by a count line, so an empty result still
    reads as "Found 0 ...".
    """

    def format_echo(reply: CommandReply, args: BaseModel) -> list[OutputSegment]:
        payload = reply.response
        if payload is None:
            return text_segments(reply.message or "Revit reported success with no data.")
        if isinstance(payload, list):
            return text_segments(f"Found {len(payload)} {noun}(s).", to_json(payload))
        return text_segments(to_json(payload))

    return format_echo
