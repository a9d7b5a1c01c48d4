"""Configuration management for wirechat."""

from typing import Any, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3000


class Settings(BaseSettings):
    """Client settings."""

    model_config = SettingsConfigDict(
        env_prefix="WIRECHAT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default=DEFAULT_HOST, description="Server host name or IPv4 address")
    port: int = Field(default=DEFAULT_PORT, description="Server TCP port")
    connect_timeout: Optional[float] = Field(None, description="Optional timeout for the TCP handshake in seconds")

    # Framing
    chunk_size: int = Field(default=4095, gt=0, description="Maximum bytes requested per read")
    idle_timeout: float = Field(default=1.0, gt=0, description="Seconds without data that end a multi-chunk response")
    max_input_size: int = Field(default=1023, gt=0, description="Maximum encoded length of one outbound line")

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")


def resolve_port(port: Optional[int], default: int = DEFAULT_PORT) -> int:
    """Return ``port`` if it is a usable TCP port, otherwise ``default``."""
    if port is None or port <= 0 or port > 65535:
        return default
    return port


def get_settings(**overrides: Any) -> Settings:
    """Get client settings.

    Args:
        **overrides: Values that take precedence over the environment.
            ``None`` values are ignored so unset CLI options fall through.

    Returns:
        Settings instance
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    return Settings(**values)
