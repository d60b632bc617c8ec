"""Google Travels MCP server: flight and hotel search tools backed by SerpAPI."""

__version__ = "1.0.0"
