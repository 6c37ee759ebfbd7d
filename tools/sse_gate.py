# =============================================================================
# tools/sse_gate.py  —  Shared-secret gate and SSE headers for /sse
# =============================================================================
#
# WHAT THIS FILE DOES:
#   A plain ASGI middleware in front of the FastMCP SSE app.  It only looks
#   at requests for the SSE path; everything else passes straight through.
#
#   When MCP_API_KEY is set, the client must present it either as
#       Authorization: Bearer <secret>
#   or as the `apiKey` query parameter.  A missing or wrong key gets
#       401 {"error": "Invalid API key"}
#   and the request never reaches the MCP runtime, so no session is opened.
#
#   On an accepted stream the response headers are normalized to what
#   browser-based MCP clients expect (no-cache, keep-alive, wildcard CORS).
# =============================================================================

import hmac
from typing import Optional

from starlette.datastructures import MutableHeaders
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Message, Receive, Scope, Send

SSE_HEADERS = {
    "content-type": "text/event-stream",
    "cache-control": "no-cache",
    "connection": "keep-alive",
    "access-control-allow-origin": "*",
    "access-control-allow-headers": "Cache-Control",
}


def presented_key(request: Request) -> str:
    """Credential offered by the client.

    A non-empty Authorization header wins over the query parameter, even
    when it does not match.
    """
    auth_header = request.headers.get("authorization", "")
    if auth_header:
        return auth_header.replace("Bearer ", "", 1)
    return request.query_params.get("apiKey", "")


class SharedSecretGate:
    def __init__(self, app: ASGIApp, path: str = "/sse", secret: Optional[str] = None) -> None:
        self.app = app
        self.path = path
        self.secret = secret

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["path"] != self.path:
            await self.app(scope, receive, send)
            return

        if self.secret:
            key = presented_key(Request(scope))
            if not hmac.compare_digest(key.encode(), self.secret.encode()):
                response = JSONResponse({"error": "Invalid API key"}, status_code=401)
                await response(scope, receive, send)
                return

        async def send_with_sse_headers(message: Message) -> None:
            if message["type"] == "http.response.start" and message["status"] == 200:
                headers = MutableHeaders(scope=message)
                for name, value in SSE_HEADERS.items():
                    headers[name] = value
            await send(message)

        await self.app(scope, receive, send_with_sse_headers)
