"""Configuration management for the Open Library MCP Server.

Settings are read from the environment (``OPEN_LIBRARY_`` prefix) or a local
``.env`` file:
1. Protocol Metadata - server name and version for the MCP handshake
2. Upstream Endpoints - Open Library API and covers hosts
3. HTTP Client - timeout and User-Agent for outbound requests
4. Logging and Tracing - log level and logfire switch
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """MCP server configuration.

    MCP servers MUST provide a name and version for the protocol
    handshake. Everything else here configures the single outbound
    HTTP client and the ambient logging/tracing setup.
    """

    model_config = SettingsConfigDict(
        # Use OPEN_LIBRARY_ prefix for all env vars
        env_prefix="OPEN_LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Server Metadata (Required by MCP Protocol) ===

    server_name: str = Field(
        default="open-library-server",
        description="MCP server name used in protocol handshake",
        pattern=r"^[a-z0-9-]+$",
    )

    server_version: str = Field(
        default="0.1.0",
        description="Server version for capability negotiation",
        pattern=r"^\d+\.\d+\.\d+(-[a-zA-Z0-9.]+)?$",
    )

    transport: str = Field(
        default="stdio",
        description="Primary transport mechanism",
        pattern=r"^(stdio|streamable_http)$",
    )

    # === Upstream Configuration ===

    api_base_url: str = Field(
        default="https://openlibrary.org",
        description="Base address of the Open Library JSON API",
        pattern=r"^https?://",
    )

    covers_base_url: str = Field(
        default="https://covers.openlibrary.org",
        description="Base address used to build cover and author photo URLs",
        pattern=r"^https?://",
    )

    # === HTTP Client Configuration ===

    http_timeout: float = Field(
        default=5.0,
        description="Timeout in seconds for requests to Open Library",
        gt=0,
    )

    user_agent: str = Field(
        default="open-library-mcp/0.1.0",
        description="User-Agent header sent with every upstream request",
        min_length=1,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging for protocol messages",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    enable_tracing: bool = Field(
        default=False,
        description="Configure logfire tracing for tool calls at startup",
    )

    # === Validation Methods ===

    @field_validator("server_name")
    @classmethod
    def validate_server_name(cls, v: str) -> str:
        """Validate server name meets MCP naming conventions."""
        if len(v) < 3:
            raise ValueError("Server name must be at least 3 characters")
        if len(v) > 50:
            raise ValueError("Server name must not exceed 50 characters")
        return v

    @field_validator("api_base_url", "covers_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """URL templates append their own leading slash."""
        return v.rstrip("/")


# === Global Configuration Instance ===


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: ServerConfig | None = None


def get_config() -> ServerConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = ServerConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
