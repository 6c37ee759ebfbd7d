# =============================================================================
# core/dispatcher.py  —  CallDispatcher: validate, call Vapi, build envelope
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Owns the whole life of one tool invocation:
#     1. Check the tool name against the catalog
#     2. Validate the raw arguments into a CallRequest
#     3. Place the call through VapiClient (one attempt, no retries)
#     4. Map the outcome to a ResponseEnvelope
#
#   Both transports (SSE and stdio) go through the same dispatcher, so they
#   answer identically.
#
# TWO ERROR CHANNELS:
#   Startup problems (missing API key) are ConfigurationError and stop the
#   process before a dispatcher exists.  Everything that can go wrong during
#   an invocation is caught here and becomes an error envelope.  invoke()
#   does not raise.
# =============================================================================

from typing import Any, Optional

from core.catalog import TRIGGER_VAPI_CALL
from core.config import ServerConfig
from core.models import CallRequest, CallResponse, ResponseEnvelope
from core.vapi import VapiClient

ERROR_PREFIX = "Error triggering Vapi call"
PHONE_ARGUMENT = "phoneNumber"


class InvalidArguments(ValueError):
    """The caller's arguments cannot be turned into a CallRequest."""


def parse_call_request(arguments: Any) -> CallRequest:
    """Validate raw tool arguments.

    Non-mapping arguments, a missing key, a non-string value and a blank
    string are all reported the same way.
    """
    phone_number = arguments.get(PHONE_ARGUMENT) if isinstance(arguments, dict) else None
    if not isinstance(phone_number, str) or not phone_number.strip():
        raise InvalidArguments("Phone number is required")
    return CallRequest(phone_number=phone_number)


def format_success(request: CallRequest, result: CallResponse, assistant_id: str) -> str:
    text = (
        "Successfully triggered Vapi call!\n\n"
        f"Call ID: {result.id}\n"
        f"Status: {result.status}\n"
        f"Phone Number: {request.phone_number}\n"
        f"Assistant ID: {assistant_id}"
    )
    if result.message:
        text += f"\nMessage: {result.message}"
    return text


class CallDispatcher:
    """Routes tool invocations to Vapi and always answers with an envelope."""

    def __init__(self, config: ServerConfig, client: Optional[VapiClient] = None) -> None:
        self._assistant_id = config.assistant_id
        self._client = client or VapiClient(
            api_key=config.vapi_api_key,
            call_url=config.call_url,
        )

    @property
    def assistant_id(self) -> str:
        return self._assistant_id

    async def invoke(self, tool_name: str, arguments: Any) -> ResponseEnvelope:
        if tool_name != TRIGGER_VAPI_CALL:
            return ResponseEnvelope.error(f"Unknown tool: {tool_name}")
        return await self.trigger_call(arguments)

    async def trigger_call(self, arguments: Any) -> ResponseEnvelope:
        try:
            request = parse_call_request(arguments)
            result = await self._client.place_call(request, self._assistant_id)
        except Exception as e:
            return ResponseEnvelope.error(f"{ERROR_PREFIX}: {e}")
        return ResponseEnvelope(text=format_success(request, result, self._assistant_id))
