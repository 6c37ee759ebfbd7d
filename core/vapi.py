# =============================================================================
# core/vapi.py  —  Vapi REST Client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Places an outbound call through Vapi's REST API:
#
#     POST https://api.vapi.ai/call
#     Authorization: Bearer <VAPI_API_KEY>
#     Content-Type: application/json
#     {"assistantId": "...", "customer": {"number": "+1..."}}
#
#   and parses the JSON answer into a CallResponse.
#
# ASYNC WITHOUT BLOCKING:
#   urllib is synchronous, so the request runs in a worker thread via
#   asyncio.to_thread().  The event loop keeps serving other sessions while
#   the round trip is in flight.
#
# TIMEOUTS:
#   None is set here.  The request waits as long as the socket layer does.
#
# ERRORS:
#   - Non-2xx answers raise VapiApiError carrying the status and raw body.
#   - Network failures (URLError) and malformed JSON propagate unchanged.
#   The dispatcher turns all of them into a text envelope.
# =============================================================================

import asyncio
import json
import urllib.error
import urllib.request
from typing import Callable

from core.models import CallRequest, CallResponse


class VapiApiError(Exception):
    """Vapi answered with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"Vapi API error: {status} - {body}")
        self.status = status
        self.body = body


class VapiClient:
    """Thin wrapper around the one Vapi endpoint this server needs."""

    def __init__(
        self,
        api_key: str,
        call_url: str,
        opener: Callable = urllib.request.urlopen,
    ) -> None:
        self._api_key = api_key
        self._call_url = call_url
        self._opener = opener

    async def place_call(self, request: CallRequest, assistant_id: str) -> CallResponse:
        """POST the call and return Vapi's view of it.

        Exactly one HTTP attempt is made; there are no retries.
        """
        body = json.dumps(request.to_payload(assistant_id)).encode()
        status, text = await asyncio.to_thread(self._post, body)
        if not 200 <= status < 300:
            raise VapiApiError(status, text)
        return CallResponse.from_json(json.loads(text))

    def _post(self, body: bytes) -> tuple[int, str]:
        req = urllib.request.Request(
            self._call_url,
            data=body,
            method="POST",
            headers={
                "Authorization": f"Bearer {self._api_key}",
                "Content-Type": "application/json",
            },
        )
        try:
            with self._opener(req) as response:
                return response.status, response.read().decode()
        except urllib.error.HTTPError as e:
            # urllib raises for 4xx/5xx; the body is still readable.
            return e.code, e.read().decode(errors="replace")
