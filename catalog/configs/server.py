"""
HTTP server configuration settings.

Dependencies: pydantic, pydantic_settings
System role: uvicorn bind address and reload behaviour
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from catalog.configs.base import BaseSettings


class ServerSettings(BaseSettings):
    """uvicorn server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SERVER_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = Field(default="localhost", description="Bind host")
    port: int = Field(default=8082, description="Bind port")
    reload: bool = Field(default=False, description="Enable uvicorn auto-reload")
