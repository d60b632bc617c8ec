"""
Configuration settings for the Google Travels MCP server
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings


class Environment(str, Enum):
    """Supported environment types"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Supported log levels"""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class Transport(str, Enum):
    """MCP transports the server can run on"""
    STDIO = "stdio"
    HTTP = "http"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with validation"""

    # Server Configuration
    SERVER_NAME: str = Field(default="mcp-google-travels", description="MCP server name")
    MCP_TRANSPORT: Transport = Field(default=Transport.STDIO, description="MCP transport")
    API_HOST: str = Field(default="127.0.0.1", description="Host for the HTTP transport")
    API_PORT: int = Field(default=8000, ge=1, le=65535, description="Port for the HTTP transport")

    # Security Configuration (declared before the key so its validator can read it)
    API_KEY_MIN_LENGTH: int = Field(
        default=32,
        description="Minimum required length for the SerpAPI key"
    )

    # SerpAPI Configuration
    SERPAPI_API_KEY: str = Field(
        default="",
        validate_default=True,
        description="SerpAPI key used for Google Flights and Google Hotels searches"
    )
    SERPAPI_BASE_URL: str = Field(
        default="https://serpapi.com/search",
        description="SerpAPI search endpoint"
    )
    REQUEST_TIMEOUT: int = Field(
        default=30,
        ge=5,
        le=300,
        description="Outbound request timeout in seconds"
    )

    # Response shaping
    UNIFY_HOTEL_IDENTIFIERS: bool = Field(
        default=False,
        description="Copy a synthesized hotelId into propertyToken when the provider omits the token"
    )

    # Logging Configuration
    LOG_LEVEL: LogLevel = Field(
        default=LogLevel.INFO,
        description="Logging level"
    )

    # Environment Configuration
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment"
    )

    @field_validator('SERPAPI_API_KEY')
    @classmethod
    def validate_serpapi_api_key(cls, v: str, info) -> str:
        """Validate SerpAPI key presence and length"""
        v = v.strip()
        if not v:
            raise ValueError("SERPAPI_API_KEY is required and cannot be empty")

        min_length = info.data.get('API_KEY_MIN_LENGTH', 32)
        if len(v) < min_length:
            raise ValueError("SERPAPI_API_KEY appears to be invalid (too short)")

        return v

    @field_validator('LOG_LEVEL', mode='before')
    @classmethod
    def validate_log_level(cls, v) -> str:
        """Validate and normalize log level"""
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator('MCP_TRANSPORT', mode='before')
    @classmethod
    def validate_transport(cls, v) -> str:
        """Normalize transport name"""
        if isinstance(v, str):
            return v.lower()
        return v

    @model_validator(mode='after')
    def validate_environment_specific_settings(self) -> 'Settings':
        """Validate environment-specific configuration"""
        if self.ENVIRONMENT == Environment.PRODUCTION:
            if self.LOG_LEVEL == LogLevel.DEBUG:
                logging.warning(
                    "DEBUG log level detected in production environment. "
                    "Consider using INFO or WARNING for production."
                )

            # Binding every interface is only expected behind a proxy
            if self.MCP_TRANSPORT == Transport.HTTP and self.API_HOST == "0.0.0.0":
                logging.warning(
                    "HTTP transport bound to 0.0.0.0 in production. "
                    "Make sure the endpoint is not publicly reachable without auth."
                )

        return self

    def get_http_config(self) -> Dict[str, Any]:
        """Get outbound HTTP client configuration"""
        return {
            'base_url': self.SERPAPI_BASE_URL,
            'timeout': self.REQUEST_TIMEOUT,
        }

    def get_server_config(self) -> Dict[str, Any]:
        """Get MCP server run configuration"""
        return {
            'name': self.SERVER_NAME,
            'transport': self.MCP_TRANSPORT,
            'host': self.API_HOST,
            'port': self.API_PORT,
        }

    def mask_sensitive_data(self) -> Dict[str, Any]:
        """Get configuration with sensitive data masked for logging"""
        config = self.model_dump()

        if config.get('SERPAPI_API_KEY'):
            config['SERPAPI_API_KEY'] = f"{config['SERPAPI_API_KEY'][:6]}***"

        return config

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "case_sensitive": True,
        "validate_assignment": True,
        "use_enum_values": True,
        "env_parse_none_str": "None",
    }


def get_settings() -> Settings:
    """Get validated settings instance"""
    return Settings()


# Global settings instance - will be initialized when first accessed
settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create global settings instance"""
    global settings
    if settings is None:
        settings = get_settings()
    return settings


def setup_logging(level: str = "INFO") -> None:
    """Send log records to stderr; stdout carries the stdio MCP stream."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )
