"""
Shared settings for the course catalog service.

Every settings group inherits the .env loading rules and the runtime
fields below. Database and server groups add their own env prefixes.

Dependencies: pydantic_settings
System role: Root of the catalog configuration tree
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Settings common to every catalog config group."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="local",
        description="Deployment the catalog runs in (local, test, production)",
    )
    debug: bool = Field(
        default=False,
        description="Expose FastAPI debug tracebacks",
    )
    log_level: str = Field(
        default="INFO",
        description="Root level passed to configure_logging at startup",
    )
