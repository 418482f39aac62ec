# =============================================================================
# core/connection.py  —  Talking to the Revit MCP plugin
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Sends one command to Revit and waits for one reply.
#
#   The Revit plugin listens on a TCP socket (localhost:8080 by default) and
#   speaks JSON-RPC 2.0:
#
#     → {"jsonrpc": "2.0", "method": "create_grid", "params": {...}, "id": "..."}
#     ← {"jsonrpc": "2.0", "result": {"Success": true, "Response": ...}, "id": "..."}
#
#   The reply is not newline-delimited: we keep reading until the buffer
#   parses as one JSON document.
#
# SCOPED ACQUISITION:
#   RevitConnectionManager.connect() is an async context manager.  Each use
#   opens a fresh socket, and the socket is closed on EVERY exit path
#   (success, Revit error, timeout, cancellation).  Nothing is pooled and
#   nothing is shared between tool calls.
#
# FAILURE MODEL:
#   Everything that stops the round trip from completing becomes a
#   TransportError.  A reply with "Success": false is NOT a transport error;
#   it comes back as a normal CommandReply.
# =============================================================================

import asyncio
import json
import logging
import uuid
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Any, AsyncIterator, Protocol

from revit_mcp.core.config import Settings
from revit_mcp.core.errors import TransportError
from revit_mcp.core.models import CommandReply

logger = logging.getLogger(__name__)

_READ_CHUNK = 64 * 1024


class CommandClient(Protocol):
    async def send_command(self, command: str, params: dict[str, Any]) -> Any: ...


class ConnectionProvider(Protocol):
    """Anything that can lend out a CommandClient for one round trip."""

    def connect(self) -> AbstractAsyncContextManager[CommandClient]: ...


class RevitClient:
    """One open socket to the Revit plugin."""

    def __init__(
        self,
        reader: asyncio.StreamReader,
        writer: asyncio.StreamWriter,
        timeout: float,
    ) -> None:
        self._reader = reader
        self._writer = writer
        self._timeout = timeout

    async def send_command(self, command: str, params: dict[str, Any]) -> Any:
        """Send ``command`` and return the JSON-RPC ``result`` of the reply."""
        request_id = uuid.uuid4().hex
        try:
            message = json.dumps({
                "jsonrpc": "2.0",
                "method": command,
                "params": params,
                "id": request_id,
            })
        except (TypeError, ValueError) as exc:
            raise TransportError(f"Could not serialize {command} payload: {exc}", cause=exc) from exc

        logger.debug("→ %s id=%s", command, request_id)
        try:
            reply = await asyncio.wait_for(
                self._round_trip(message.encode("utf-8")), timeout=self._timeout
            )
        except asyncio.TimeoutError as exc:
            raise TransportError(
                f"Command {command} timed out after {self._timeout:g} seconds", cause=exc
            ) from exc
        except OSError as exc:
            raise TransportError(f"Connection to Revit failed during {command}: {exc}", cause=exc) from exc

        logger.debug("← %s id=%s", command, request_id)
        return self._unwrap(reply, request_id)

    async def _round_trip(self, message: bytes) -> Any:
        # write and read share one deadline
        self._writer.write(message)
        await self._writer.drain()
        return await self._read_reply()

    async def _read_reply(self) -> Any:
        buffer = b""
        while True:
            chunk = await self._reader.read(_READ_CHUNK)
            if not chunk:
                if buffer:
                    raise TransportError("Revit closed the connection mid-reply")
                raise TransportError("Revit closed the connection without replying")
            buffer += chunk
            try:
                return json.loads(buffer.decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError):
                # incomplete document, keep reading
                continue

    @staticmethod
    def _unwrap(reply: Any, request_id: str) -> Any:
        if not isinstance(reply, dict):
            raise TransportError(f"Malformed JSON-RPC reply from Revit: {reply!r}")
        if reply.get("id") != request_id:
            raise TransportError(
                f"Reply id {reply.get('id')!r} does not match request id {request_id!r}"
            )
        error = reply.get("error")
        if error:
            message = error.get("message") if isinstance(error, dict) else None
            raise TransportError(message or "Unknown error from Revit")
        return reply.get("result")


class RevitConnectionManager:
    """Opens a new socket to Revit for every acquisition."""

    def __init__(
        self,
        host: str = "localhost",
        port: int = 8080,
        timeout: float = 120.0,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "RevitConnectionManager":
        return cls(settings.revit_host, settings.revit_port, settings.revit_timeout)

    @asynccontextmanager
    async def connect(self) -> AsyncIterator[RevitClient]:
        address = f"{self.host}:{self.port}"
        try:
            reader, writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port), timeout=self.timeout
            )
        except asyncio.TimeoutError as exc:
            raise TransportError(f"Timed out connecting to Revit at {address}", cause=exc) from exc
        except OSError as exc:
            raise TransportError(
                f"Cannot connect to Revit at {address} ({exc}). "
                "Is Revit running with the MCP plugin enabled?",
                cause=exc,
            ) from exc

        logger.debug("connected to Revit at %s", address)
        try:
            yield RevitClient(reader, writer, self.timeout)
        finally:
            writer.close()
            try:
                await writer.wait_closed()
            except OSError as exc:
                logger.debug("socket to %s closed with error: %s", address, exc)
            logger.debug("released connection to %s", address)


# =============================================================================
# Dispatch adapter
# =============================================================================
async def send_command(
    connections: ConnectionProvider,
    command: str,
    payload: dict[str, Any],
) -> CommandReply:
    """Acquire a connection, run exactly one round trip, release it.

    Raises:
        TransportError: if the round trip could not be completed.
    """
    async with connections.connect() as client:
        raw = await client.send_command(command, payload)
    return CommandReply.from_wire(raw)
