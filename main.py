# =============================================================================
# main.py  —  Entry Point for the Vapi MCP Server (SSE push transport)
# =============================================================================
#
# HOW TO RUN:
#   VAPI_API_KEY=... uv run python main.py
#
# WHAT HAPPENS:
#   1. .env.local / .env are loaded and frozen into a ServerConfig
#   2. The FastMCP server is built (core dispatcher + catalog tools)
#   3. Its SSE app is wrapped with the shared-secret gate
#   4. uvicorn serves it on HOST:PORT until the process is stopped
#
# ENDPOINTS:
#   GET  /health     liveness
#   GET  /           server descriptor
#   GET  /sse        MCP event stream (MCP_API_KEY required when set)
#   POST /messages/  MCP client → server messages for an open stream
#
# Without VAPI_API_KEY the process logs the problem and exits with code 1
# before binding the port.
# =============================================================================

import logging
import sys

import uvicorn

from core.config import ConfigurationError, load_config
from tools.mcp_server import SSE_PATH, create_sse_app


def main() -> None:
    try:
        config = load_config()
    except ConfigurationError as e:
        logging.error(f"Server error: {e}")
        sys.exit(1)

    app = create_sse_app(config)

    base_url = f"http://localhost:{config.port}"
    logging.info(f"Vapi MCP Server running on port {config.port}")
    logging.info(f"Assistant ID: {config.assistant_id}")
    logging.info(f"MCP SSE endpoint: {base_url}{SSE_PATH}")
    logging.info(f"Health check: {base_url}/health")
    if config.mcp_api_key:
        logging.info("SSE endpoint requires MCP_API_KEY")

    try:
        uvicorn.run(app, host=config.host, port=config.port, log_config=None)
    except Exception as e:
        logging.exception(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
