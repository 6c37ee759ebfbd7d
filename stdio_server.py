# =============================================================================
# stdio_server.py  —  Entry Point for the Vapi MCP Server (stdio transport)
# =============================================================================
#
# HOW TO RUN:
#   VAPI_API_KEY=... uv run python stdio_server.py
#
#   Meant to be spawned by an MCP host (Claude Desktop, an agent runtime...)
#   that talks JSON-RPC over our stdin/stdout.  There is no network
#   listener and no authentication: whoever spawned us is trusted.
#
#   STDOUT is reserved for protocol frames.  All logging goes to STDERR
#   (configured in tools/mcp_server.py).
# =============================================================================

import logging
import sys

from core.config import ConfigurationError, load_config
from tools.mcp_server import build_server


def main() -> None:
    try:
        config = load_config()
    except ConfigurationError as e:
        logging.error(f"Server error: {e}")
        sys.exit(1)

    mcp = build_server(config)
    logging.info("Vapi MCP Server running on stdio")

    try:
        mcp.run(transport="stdio")
    except Exception as e:
        logging.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
