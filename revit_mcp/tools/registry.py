# =============================================================================
# tools/registry.py  —  Tool table + the one dispatch engine every tool shares
# =============================================================================
#
# WHAT THIS FILE DOES:
#   A tool is DATA here, not a hand-written function:
#
#     ToolSpec = name + description + schema + normalizer + formatter
#
#   ToolRegistry holds the specs (names are unique).  ToolDispatcher runs
#   any spec through the same pipeline:
#
#     raw arguments
#       → validate + fill defaults      (core/schemas.py)
#       → build the command payload     (core/normalizers.py)
#       → one round trip to Revit       (core/connection.py)
#       → render text segments          (core/formatters.py)
#
# THE BOUNDARY RULE:
#   ToolDispatcher.invoke() never raises.  Bad arguments, a dead socket,
#   Revit saying "Success: false", even a bug in a formatter: each ends as
#   text the agent can read.  A failing call never takes the server down.
# =============================================================================

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from pydantic import BaseModel

from revit_mcp.core.connection import ConnectionProvider, send_command
from revit_mcp.core.errors import ArgumentValidationError, TransportError
from revit_mcp.core.formatters import (
    SuccessFormatter,
    render_reply,
    render_transport_failure,
    render_validation_failure,
)
from revit_mcp.core.models import OutputSegment, text_segments
from revit_mcp.core.schemas import validate_arguments

logger = logging.getLogger(__name__)

# =============================================================================
# Request/response logging
# =============================================================================
# Colored lines on stderr make tool calls easy to follow in a terminal:
#   CYAN    incoming tool call and its arguments
#   YELLOW  intermediate status
#   GREEN   the text handed back to the agent
# =============================================================================
_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RESET = "\033[0m"


def _log_request(tool_name: str, arguments: Any) -> None:
    logger.info(f"{_CYAN}{tool_name} called with: {json.dumps(arguments, default=str)}{_RESET}")


def _log_status(message: str) -> None:
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, segments: list[OutputSegment]) -> list[OutputSegment]:
    first = segments[0].text.splitlines()[0] if segments and segments[0].text else ""
    logger.info(f"{_GREEN}  ← {tool_name} response ({len(segments)} segment(s)): {first}{_RESET}")
    return segments


# =============================================================================
# ToolSpec
# =============================================================================
@dataclass(frozen=True)
class ToolSpec:
    """Everything needed to expose and run one Revit command as a tool.

    Invariants:
      - ``name`` is the MCP tool name and, verbatim, the Revit command name.
      - ``normalize`` is pure: same validated model, same payload.
      - ``format_success`` is only called for replies with Success true.
    """

    name: str
    description: str
    schema: type[BaseModel]
    normalize: Callable[[Any], dict[str, Any]]
    format_success: SuccessFormatter
    failure_prefix: str

    @property
    def command(self) -> str:
        return self.name

    def input_schema(self) -> dict[str, Any]:
        """JSON schema advertised to the agent."""
        return self.schema.model_json_schema()

    def build_payload(self, arguments: Any) -> tuple[BaseModel, dict[str, Any]]:
        """Validate ``arguments`` and normalize them into a command payload.

        Raises:
            ArgumentValidationError: before anything is sent anywhere.
        """
        validated = validate_arguments(self.schema, arguments)
        return validated, self.normalize(validated)


# =============================================================================
# ToolRegistry
# =============================================================================
class ToolRegistry:
    """Process-wide table of tools, built once at startup."""

    def __init__(self, specs: Optional[list[ToolSpec]] = None) -> None:
        self._specs: dict[str, ToolSpec] = {}
        for spec in specs or []:
            self.register(spec)

    def register(self, spec: ToolSpec) -> ToolSpec:
        if spec.name in self._specs:
            raise ValueError(f"Tool {spec.name!r} is already registered")
        self._specs[spec.name] = spec
        return spec

    def get(self, name: str) -> Optional[ToolSpec]:
        return self._specs.get(name)

    def names(self) -> list[str]:
        return list(self._specs)

    def __iter__(self) -> Iterator[ToolSpec]:
        return iter(list(self._specs.values()))

    def __len__(self) -> int:
        return len(self._specs)

    def __contains__(self, name: object) -> bool:
        return name in self._specs


# =============================================================================
# ToolDispatcher
# =============================================================================
class ToolDispatcher:
    """Runs tool invocations against Revit.

    Holds references to the registry and the connection provider only; it
    keeps no per-call state, so concurrent invocations do not interact.
    """

    def __init__(self, registry: ToolRegistry, connections: ConnectionProvider) -> None:
        self.registry = registry
        self.connections = connections

    async def invoke(self, name: str, arguments: Any = None) -> list[OutputSegment]:
        _log_request(name, arguments)
        spec = self.registry.get(name)
        if spec is None:
            return _log_response(name, text_segments(f"Unknown tool: {name}"))
        return _log_response(name, await self.run(spec, arguments))

    async def run(self, spec: ToolSpec, arguments: Any) -> list[OutputSegment]:
        try:
            validated, payload = spec.build_payload(arguments)
        except ArgumentValidationError as exc:
            _log_status(f"rejected arguments: {exc.message}")
            return render_validation_failure(spec.failure_prefix, exc)
        except Exception as exc:
            logger.exception("could not build payload for %s", spec.name)
            return text_segments(f"{spec.failure_prefix}: unexpected error: {exc}")

        try:
            reply = await send_command(self.connections, spec.command, payload)
        except TransportError as exc:
            _log_status(f"transport error: {exc.message}")
            return render_transport_failure(spec.failure_prefix, spec.name, exc)
        except Exception as exc:
            logger.exception("unexpected error while sending %s", spec.command)
            return text_segments(f"{spec.failure_prefix}: unexpected error: {exc}")

        _log_status(f"Revit replied Success={reply.success}")
        try:
            return render_reply(
                reply,
                validated,
                prefix=spec.failure_prefix,
                on_success=spec.format_success,
            )
        except Exception as exc:
            logger.exception("could not format reply for %s", spec.name)
            return text_segments(f"{spec.failure_prefix}: unexpected error: {exc}")
