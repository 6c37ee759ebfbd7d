# =============================================================================
# core/catalog.py  —  The Tool Catalog
# =============================================================================
# The single source of truth for which tools exist and what they accept.
# tools/mcp_server.py advertises exactly what list_tools() returns, and the
# dispatcher refuses any name that is not listed here.
# =============================================================================

from core.models import ToolDescriptor

TRIGGER_VAPI_CALL = "trigger_vapi_call"

_TOOLS = (
    ToolDescriptor(
        name=TRIGGER_VAPI_CALL,
        description="Trigger an outbound phone call using Vapi AI assistant (Andy)",
        input_schema={
            "type": "object",
            "properties": {
                "phoneNumber": {
                    "type": "string",
                    "description": "Phone number to call (include country code, e.g., +1234567890)",
                },
            },
            "required": ["phoneNumber"],
        },
    ),
)


def list_tools() -> list[ToolDescriptor]:
    """Return every invocable tool, in advertising order."""
    return list(_TOOLS)


def tool_names() -> list[str]:
    return [tool.name for tool in _TOOLS]
