# =============================================================================
# core/config.py  —  Runtime settings read from the environment
# =============================================================================
#
# Every knob is an environment variable.  main() calls load_dotenv() first,
# so a .env file next to the project works too:
#
#   REVIT_HOST=localhost      where the Revit MCP plugin listens
#   REVIT_PORT=8080           its TCP port
#   REVIT_TIMEOUT=120         seconds allowed for one command round trip
#   MCP_LOG_LEVEL=INFO        stderr log level
#   MCP_TRANSPORT=stdio       FastMCP transport ("stdio", "http", "sse")
# =============================================================================

import math
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8080
DEFAULT_TIMEOUT_SECONDS = 120.0


def _number(env: Mapping[str, str], name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = cast(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ValueError(f"{name} must be a positive finite number, got {raw!r}")
    return value


@dataclass(frozen=True)
class Settings:
    """Connection and server settings."""

    revit_host: str = DEFAULT_HOST
    revit_port: int = DEFAULT_PORT
    revit_timeout: float = DEFAULT_TIMEOUT_SECONDS
    log_level: str = "INFO"
    transport: str = "stdio"

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if env is None else env
        return cls(
            revit_host=env.get("REVIT_HOST") or DEFAULT_HOST,
            revit_port=_number(env, "REVIT_PORT", DEFAULT_PORT, int),
            revit_timeout=_number(env, "REVIT_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, float),
            log_level=(env.get("MCP_LOG_LEVEL") or "INFO").upper(),
            transport=env.get("MCP_TRANSPORT") or "stdio",
        )
