# =============================================================================
# core/config.py  —  Process-wide Server Configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the environment exactly once at startup and freezes it into a
#   ServerConfig.  Every other component receives that object; nothing
#   downstream calls os.getenv() while handling a request.
#
# ENVIRONMENT VARIABLES:
#   VAPI_API_KEY   required   Bearer token for api.vapi.ai
#   ANDY           optional   assistant id (defaults to the Andy assistant)
#   HOST           optional   push transport bind address (default 0.0.0.0)
#   PORT           optional   push transport port (default 3000)
#   MCP_API_KEY    optional   shared secret gating the /sse endpoint
#   VAPI_BASE_URL  optional   provider base URL (default https://api.vapi.ai)
#
# .env FILES:
#   `.env.local` is loaded first, then `.env`.  python-dotenv never overrides
#   a variable that is already set, so the real environment always wins.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from dotenv import load_dotenv

SERVER_NAME = "vapi-mcp-server"
SERVER_VERSION = "1.0.0"

DEFAULT_ASSISTANT_ID = "cde00b8a-3ebf-4d4f-8587-7e8fec8e5fda"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000
DEFAULT_VAPI_BASE_URL = "https://api.vapi.ai"


class ConfigurationError(Exception):
    """Fatal startup problem; the process must not start serving."""


@dataclass(frozen=True)
class ServerConfig:
    """Immutable settings shared by the dispatcher and both transports."""

    vapi_api_key: str = field(repr=False)
    assistant_id: str = DEFAULT_ASSISTANT_ID
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    mcp_api_key: Optional[str] = field(default=None, repr=False)
    vapi_base_url: str = DEFAULT_VAPI_BASE_URL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build a config from `environ` (defaults to os.environ).

        Raises ConfigurationError when VAPI_API_KEY is missing or PORT is
        not an integer.
        """
        env = os.environ if environ is None else environ

        vapi_api_key = env.get("VAPI_API_KEY", "").strip()
        if not vapi_api_key:
            raise ConfigurationError("VAPI_API_KEY environment variable is required")

        raw_port = env.get("PORT", "").strip() or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigurationError(f"PORT must be an integer, got {raw_port!r}") from None

        return cls(
            vapi_api_key=vapi_api_key,
            assistant_id=env.get("ANDY", "").strip() or DEFAULT_ASSISTANT_ID,
            host=env.get("HOST", "").strip() or DEFAULT_HOST,
            port=port,
            mcp_api_key=env.get("MCP_API_KEY", "").strip() or None,
            vapi_base_url=(env.get("VAPI_BASE_URL", "").strip() or DEFAULT_VAPI_BASE_URL).rstrip("/"),
        )

    @property
    def call_url(self) -> str:
        return f"{self.vapi_base_url}/call"


def load_config() -> ServerConfig:
    """Load .env files, then read the process environment."""
    load_dotenv(".env.local")
    load_dotenv()
    return ServerConfig.from_env()
