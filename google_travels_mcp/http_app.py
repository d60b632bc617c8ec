"""
HTTP host for the Google Travels MCP server.

Serves the MCP streamable-HTTP endpoint at /mcp next to plain service routes.
"""

import logging

from fastapi import FastAPI, Request

from google_travels_mcp import __version__
from google_travels_mcp.core.error_handler import ErrorCode, error_handler
from google_travels_mcp.server import SERVER_NAME, mcp

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Build the FastAPI application with the MCP endpoint mounted."""
    mcp_app = mcp.http_app(path="/mcp")

    # The MCP session manager starts and stops with the host application
    app = FastAPI(
        title="Google Travels MCP",
        version=__version__,
        description="Flight, hotel and vacation rental search tools over MCP",
        lifespan=mcp_app.lifespan,
    )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle general exceptions with consistent error response format."""
        logger.error(f"Unhandled Exception: {type(exc).__name__}: {str(exc)} - URL: {request.url}", exc_info=True)
        return error_handler.create_json_response(ErrorCode.INTERNAL_ERROR)

    @app.get("/")
    async def root():
        """Root endpoint with service information"""
        return {
            "message": "Google Travels MCP server",
            "version": __version__,
            "mcp_endpoint": "/mcp",
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "service": SERVER_NAME}

    # Mounted last so the routes above take precedence
    app.mount("/", mcp_app)

    return app
