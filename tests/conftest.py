"""
Shared fixtures for the Revit tool tests.

FakeConnections stands in for the Revit plugin: it records every command,
counts acquisitions and releases, and answers from a script.
"""

from contextlib import asynccontextmanager
from typing import Any

import pytest

from revit_mcp.tools.catalog import build_registry
from revit_mcp.tools.registry import ToolDispatcher


class FakeClient:
    def __init__(self, owner: "FakeConnections"):
        self._owner = owner

    async def send_command(self, command: str, params: dict[str, Any]) -> Any:
        self._owner.sent.append((command, params))
        if self._owner.error is not None:
            raise self._owner.error
        return self._owner.reply


class FakeConnections:
    """Connection provider that never touches the network."""

    def __init__(self, reply: Any = None, error: BaseException = None):
        self.reply = reply if reply is not None else {"Success": True, "Response": []}
        self.error = error
        self.sent: list[tuple[str, dict[str, Any]]] = []
        self.acquired = 0
        self.released = 0

    def reply_with(self, success: bool = True, response: Any = None, message: str = None):
        self.reply = {"Success": success, "Response": response, "Message": message}
        return self

    @asynccontextmanager
    async def connect(self):
        self.acquired += 1
        try:
            yield FakeClient(self)
        finally:
            self.released += 1


@pytest.fixture
def connections():
    return FakeConnections()


@pytest.fixture
def registry():
    return build_registry()


@pytest.fixture
def dispatcher(registry, connections):
    return ToolDispatcher(registry, connections)
