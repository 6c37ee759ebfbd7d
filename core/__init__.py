# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL business logic for the Vapi call adapter:
# configuration, the tool catalog, the Vapi client and the dispatcher.
#
# ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Starlette or uvicorn.  The
#   transports in tools/ and the entry points are wiring; this is the engine.
# =============================================================================
