"""
Centralized error handling for the Google Travels MCP server.

Tool failures are reported to the MCP client as a tool error whose text is a
JSON ErrorResponse; the HTTP host uses the same payload with a status code.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any, Optional, Tuple
from enum import Enum

import httpx
from fastapi.responses import JSONResponse
from fastmcp.exceptions import ToolError
from pydantic import ValidationError

from google_travels_mcp.models.responses import ErrorResponse
from google_travels_mcp.services.http_client import SerpApiError


class ErrorCode(str, Enum):
    """Enumeration of error codes for different failure scenarios."""

    # Caller errors
    INVALID_HOTEL_ID = "INVALID_HOTEL_ID"

    # Server-side errors
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Aggregator errors
    UPSTREAM_HTTP_ERROR = "UPSTREAM_HTTP_ERROR"
    UPSTREAM_UNREACHABLE = "UPSTREAM_UNREACHABLE"
    UPSTREAM_TIMEOUT = "UPSTREAM_TIMEOUT"
    UPSTREAM_AUTH_FAILED = "UPSTREAM_AUTH_FAILED"
    RATE_LIMITED = "RATE_LIMITED"


class ErrorHandler:
    """
    Centralized error handling class with consistent error response formatting.

    Classifies aggregator, configuration and unexpected failures, logs them with
    context and turns them into ErrorResponse payloads.
    """

    # Error code to HTTP status code mapping
    ERROR_STATUS_MAPPING: Dict[ErrorCode, int] = {
        ErrorCode.INVALID_HOTEL_ID: 400,
        ErrorCode.CONFIGURATION_ERROR: 500,
        ErrorCode.INTERNAL_ERROR: 500,
        ErrorCode.UPSTREAM_HTTP_ERROR: 502,
        ErrorCode.UPSTREAM_UNREACHABLE: 502,
        ErrorCode.UPSTREAM_TIMEOUT: 504,
        ErrorCode.UPSTREAM_AUTH_FAILED: 502,
        ErrorCode.RATE_LIMITED: 429,
    }

    # Error code to default message mapping
    ERROR_MESSAGES: Dict[ErrorCode, str] = {
        ErrorCode.INVALID_HOTEL_ID: "Invalid hotelId/property_token",
        ErrorCode.CONFIGURATION_ERROR: "Server is not configured correctly",
        ErrorCode.INTERNAL_ERROR: "An unexpected error occurred",
        ErrorCode.UPSTREAM_HTTP_ERROR: "SerpAPI request failed",
        ErrorCode.UPSTREAM_UNREACHABLE: "Unable to reach SerpAPI",
        ErrorCode.UPSTREAM_TIMEOUT: "SerpAPI request timeout exceeded",
        ErrorCode.UPSTREAM_AUTH_FAILED: "SerpAPI rejected the API key",
        ErrorCode.RATE_LIMITED: "SerpAPI rate limit or search quota exceeded",
    }

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the ErrorHandler.

        Args:
            logger: Optional logger instance. If not provided, creates a new logger.
        """
        self.logger = logger or logging.getLogger(__name__)

    def create_error_response(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> ErrorResponse:
        """
        Create a standardized error response.

        Args:
            error_code: The error code enum value
            message: Optional custom error message. If not provided, uses default message.
            details: Optional additional error details

        Returns:
            ErrorResponse: Standardized error response object
        """
        final_message = message or self.ERROR_MESSAGES.get(error_code, "Unknown error")

        if details:
            final_message = f"{final_message}. Details: {details}"

        return ErrorResponse(
            error=error_code.value,
            message=final_message,
            timestamp=datetime.now(timezone.utc)
        )

    def log_error(
        self,
        error_code: ErrorCode,
        message: str,
        exception: Optional[Exception] = None,
        tool_name: Optional[str] = None,
        additional_context: Optional[Dict[str, Any]] = None
    ) -> None:
        """
        Log error with context information.

        Args:
            error_code: The error code enum value
            message: Error message
            exception: Optional exception that caused the error
            tool_name: Optional name of the MCP tool being executed
            additional_context: Optional additional context information
        """
        context = {
            "error_code": error_code.value,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

        if tool_name:
            context["tool"] = tool_name

        if additional_context:
            context.update(additional_context)

        log_message = f"{error_code.value}: {message}"

        # Full traceback only for failures we did not anticipate
        self.logger.error(
            log_message,
            extra={"context": context},
            exc_info=exception is not None and error_code == ErrorCode.INTERNAL_ERROR
        )

    def classify_error(self, error: Exception) -> Tuple[ErrorCode, str]:
        """
        Map an exception raised while serving a tool call to an error code and message.

        Args:
            error: The exception

        Returns:
            Tuple of (ErrorCode, error_message)
        """
        if isinstance(error, SerpApiError):
            status = error.status_code
            if status is None:
                if isinstance(error.__cause__, httpx.TimeoutException):
                    return ErrorCode.UPSTREAM_TIMEOUT, error.message
                return ErrorCode.UPSTREAM_UNREACHABLE, error.message
            if status in (401, 403):
                return ErrorCode.UPSTREAM_AUTH_FAILED, error.message
            if status == 429:
                return ErrorCode.RATE_LIMITED, error.message
            return ErrorCode.UPSTREAM_HTTP_ERROR, error.message

        if isinstance(error, ValidationError):
            # Settings validation (e.g. missing SERPAPI_API_KEY) surfaces here
            messages = "; ".join(str(item.get("msg", "")) for item in error.errors())
            return ErrorCode.CONFIGURATION_ERROR, f"Configuration validation failed: {messages}"

        return ErrorCode.INTERNAL_ERROR, f"{type(error).__name__}: {error}"

    def to_tool_error(self, error: Exception, tool_name: str) -> ToolError:
        """
        Classify, log and convert an exception into an MCP tool error.

        Args:
            error: The exception raised while executing the tool
            tool_name: Name of the MCP tool

        Returns:
            ToolError whose message is the JSON encoded ErrorResponse
        """
        error_code, message = self.classify_error(error)

        self.log_error(
            error_code=error_code,
            message=message,
            exception=error,
            tool_name=tool_name,
            additional_context={"error_type": type(error).__name__}
        )

        error_response = self.create_error_response(error_code, message)
        return ToolError(json.dumps(error_response.model_dump(mode='json'), indent=2))

    def create_json_response(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> JSONResponse:
        """
        Create a JSON response for an error.

        Args:
            error_code: The error code enum value
            message: Optional custom error message
            details: Optional additional error details

        Returns:
            JSONResponse: FastAPI JSON response with appropriate status code
        """
        error_response = self.create_error_response(error_code, message, details)
        status_code = self.ERROR_STATUS_MAPPING.get(error_code, 500)

        return JSONResponse(
            status_code=status_code,
            content=error_response.model_dump(mode='json')
        )


# Global error handler instance
error_handler = ErrorHandler()
