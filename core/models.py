# =============================================================================
# core/models.py  —  Data Models for the Vapi Call Adapter
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Defines the small set of data shapes that flow through the adapter:
#     - CallRequest       what the MCP caller asks for (a phone number)
#     - CallResponse      what Vapi answers when a call is queued
#     - ResponseEnvelope  what we hand back to the MCP runtime
#     - ToolDescriptor    how a tool is advertised in tools/list
#
# LIFETIME:
#   Every object here is transient.  It is built for one invocation and
#   dropped when the response has been written.  Nothing is persisted.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class CallRequest:
    """Arguments for a single outbound call."""

    phone_number: str                  # "+15551234567", country code included

    def to_payload(self, assistant_id: str) -> dict:
        """Body for POST /call."""
        return {
            "assistantId": assistant_id,
            "customer": {"number": self.phone_number},
        }


@dataclass(frozen=True)
class CallResponse:
    """The subset of Vapi's call object we report back."""

    id: str
    status: str
    message: Optional[str] = None

    @classmethod
    def from_json(cls, payload: Any) -> "CallResponse":
        if not isinstance(payload, dict):
            raise ValueError("Unexpected response body from Vapi API")
        message = payload.get("message")
        return cls(
            id=str(payload.get("id", "")),
            status=str(payload.get("status", "")),
            message=str(message) if message else None,
        )


# -----------------------------------------------------------------------------
# ResponseEnvelope: the uniform result of every tool invocation
# -----------------------------------------------------------------------------
# Success and failure share one shape: exactly one text block.  The `ok`
# flag never leaves the process; it only decides how the call is logged.
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class ResponseEnvelope:
    """Single text block summarizing the outcome of an invocation."""

    text: str
    ok: bool = True

    @classmethod
    def error(cls, text: str) -> "ResponseEnvelope":
        return cls(text=text, ok=False)

    def to_dict(self) -> dict:
        return {"content": [{"type": "text", "text": self.text}]}


@dataclass(frozen=True)
class ToolDescriptor:
    """One entry in the tools/list response."""

    name: str
    description: str
    input_schema: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": self.input_schema,
        }
