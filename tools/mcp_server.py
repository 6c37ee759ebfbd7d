# =============================================================================
# tools/mcp_server.py  —  FastMCP Server for the Vapi call tool
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the FastMCP server both transports share.  It is a thin layer:
#   the catalog (core/catalog.py) says WHAT is listed, the dispatcher
#   (core/dispatcher.py) says WHAT HAPPENS on a call.  This file only wires
#   the two into FastMCP and adds logging.
#
# HOW A CALL FLOWS:
#   1. The MCP client sends tools/call {name, arguments}
#   2. FastMCP finds the DispatchedTool registered under that name
#   3. DispatchedTool.run() hands the RAW arguments to CallDispatcher.invoke
#   4. The returned envelope becomes exactly one TextContent block
#
#   Names that are not in the catalog never reach us: FastMCP answers them
#   itself with an error result whose only text block is "Unknown tool: <name>".
#
# WHY A Tool SUBCLASS AND NOT @mcp.tool()?
#   The decorator derives the input schema from a Python signature and
#   validates arguments before our code runs.  We want the catalog's schema
#   advertised verbatim and the dispatcher's own validation messages
#   ("Phone number is required") returned to the caller.
#
# HTTP ROUTES (push transport only):
#   GET /health   liveness probe
#   GET /         static descriptor of this server
#   GET /sse      MCP stream, see tools/sse_gate.py for the shared-secret gate
# =============================================================================

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Optional

from fastmcp import FastMCP
from fastmcp.tools import Tool
from fastmcp.tools.tool import ToolResult
from mcp.types import TextContent
from pydantic import Field
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from core.catalog import list_tools, tool_names
from core.config import SERVER_NAME, SERVER_VERSION, ServerConfig
from core.dispatcher import PHONE_ARGUMENT, CallDispatcher
from core.models import ResponseEnvelope
from tools.sse_gate import SharedSecretGate

SSE_PATH = "/sse"

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR.  In stdio mode STDOUT carries the MCP JSON-RPC frames,
# and a stray log line there would corrupt the stream.
#
# Colors: CYAN for incoming calls, YELLOW for status, GREEN for successful
# responses and RED for error envelopes.
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def mask_phone_number(value: Any) -> Any:
    """Hide all but the last four characters of a phone number."""
    if not isinstance(value, str):
        return value
    return "*" * max(len(value) - 4, 0) + value[-4:]


def _log_request(tool_name: str, params: dict) -> None:
    """Log an incoming tool call with its parameters in CYAN.

    `params` is the raw argument dict; it is never splatted, since callers
    may send any keys.
    """
    shown = {k: mask_phone_number(v) if k == PHONE_ARGUMENT else v for k, v in params.items()}
    param_str = ", ".join(f"{k}={v!r}" for k, v in shown.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(
    tool_name: str, envelope: ResponseEnvelope, phone_number: Any = None
) -> ResponseEnvelope:
    """Log the envelope as compact JSON, then return it."""
    color = _GREEN if envelope.ok else _RED
    body = json.dumps(envelope.to_dict(), separators=(',', ':'))
    if isinstance(phone_number, str) and phone_number:
        body = body.replace(phone_number, mask_phone_number(phone_number))
    logging.info(f"{color}  ← {tool_name} response: {body}{_RESET}")
    return envelope


class DispatchedTool(Tool):
    """A catalog tool whose calls are answered by the CallDispatcher."""

    dispatcher: Any = Field(exclude=True)

    async def run(self, arguments: dict[str, Any]) -> ToolResult:
        arguments = arguments or {}
        _log_request(self.name, arguments)
        envelope = await self.dispatcher.invoke(self.name, arguments)
        if not envelope.ok:
            _log_status("invocation failed, reporting in content")
        _log_response(self.name, envelope, arguments.get(PHONE_ARGUMENT))
        return ToolResult(content=[TextContent(type="text", text=envelope.text)])


def health_payload(config: ServerConfig) -> dict:
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z"),
        "assistantId": config.assistant_id,
        "server": SERVER_NAME,
    }


def info_payload(config: ServerConfig) -> dict:
    return {
        "name": "Vapi MCP Server",
        "version": SERVER_VERSION,
        "description": "MCP server for triggering Vapi outbound calls",
        "transport": "SSE (Server-Sent Events)",
        "endpoint": SSE_PATH,
        "assistantId": config.assistant_id,
        "tools": tool_names(),
    }


def build_server(config: ServerConfig, dispatcher: Optional[CallDispatcher] = None) -> FastMCP:
    """Create the FastMCP server with every catalog tool and the HTTP routes.

    The custom routes are only served when the server runs over HTTP; the
    stdio transport ignores them.
    """
    dispatcher = dispatcher or CallDispatcher(config)
    mcp = FastMCP(SERVER_NAME)

    for descriptor in list_tools():
        mcp.add_tool(
            DispatchedTool(
                name=descriptor.name,
                description=descriptor.description,
                parameters=descriptor.input_schema,
                dispatcher=dispatcher,
            )
        )

    @mcp.custom_route("/health", methods=["GET"])
    async def health(request: Request) -> JSONResponse:
        return JSONResponse(health_payload(config))

    @mcp.custom_route("/", methods=["GET"])
    async def info(request: Request) -> JSONResponse:
        return JSONResponse(info_payload(config))

    return mcp


def create_sse_app(config: ServerConfig, mcp: Optional[FastMCP] = None):
    """ASGI app for the push transport: SSE stream, messages and routes."""
    mcp = mcp or build_server(config)
    return mcp.http_app(
        path=SSE_PATH,
        transport="sse",
        middleware=[Middleware(SharedSecretGate, path=SSE_PATH, secret=config.mcp_api_key)],
    )
