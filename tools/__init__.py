# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP wiring.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between MCP and core/:
#     1. mcp_server.py registers the catalog's tools with FastMCP and routes
#        every call to core.dispatcher.CallDispatcher
#     2. sse_gate.py guards the SSE endpoint of the push transport
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT talk to Vapi (that's core/vapi.py)
#   - They do NOT validate arguments (that's core/dispatcher.py)
#   - They do NOT read the environment (the entry points pass a ServerConfig)
# =============================================================================
