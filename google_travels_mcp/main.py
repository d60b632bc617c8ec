"""
Google Travels MCP server - entry point
"""

import argparse
import logging
import sys
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from google_travels_mcp.core.config import Transport, get_global_settings, setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcp-google-travels",
        description="Google Travels MCP server - flight and hotel search via SerpAPI"
    )
    parser.add_argument(
        "--transport",
        choices=[t.value for t in Transport],
        default=None,
        help="Transport type: 'stdio' for local clients, 'http' for the streamable HTTP endpoint (default: MCP_TRANSPORT)"
    )
    parser.add_argument("--host", default=None, help="Host for the HTTP transport (default: API_HOST)")
    parser.add_argument("--port", type=int, default=None, help="Port for the HTTP transport (default: API_PORT)")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = get_global_settings()
    except ValidationError as e:
        setup_logging("ERROR")
        for error in e.errors():
            logger.error(f"Configuration error: {error.get('msg')}")
        logger.error("Set SERPAPI_API_KEY in your .env file or pass it via environment variables")
        return 1

    setup_logging("DEBUG" if args.debug else settings.LOG_LEVEL)
    logger.debug(f"Loaded settings: {settings.mask_sensitive_data()}")

    server_config = settings.get_server_config()
    transport = args.transport or server_config["transport"]

    # Imported after logging is configured so module loggers pick it up
    if transport == Transport.HTTP:
        from google_travels_mcp.http_app import create_app

        host = args.host or server_config["host"]
        port = args.port or server_config["port"]
        logger.info(f"MCP Google Travels server listening on http://{host}:{port}/mcp")
        uvicorn.run(create_app(), host=host, port=port, log_level="debug" if args.debug else "info")
    else:
        from google_travels_mcp.server import mcp

        logger.info("MCP Google Travels server running on stdio")
        mcp.run(transport="stdio")

    return 0


if __name__ == "__main__":
    sys.exit(main())
