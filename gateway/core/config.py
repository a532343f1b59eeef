"""
Configuration management for the API gateway.
"""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Host to bind the server")
    port: int = Field(
        default=8080,
        validation_alias=AliasChoices("API_GATEWAY_PORT", "PORT"),
        description="Port to bind the server",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")
    shutdown_timeout_seconds: int = Field(
        default=15,
        ge=0,
        description="Time allowed for in-flight requests to drain on shutdown",
    )

    # Application
    app_name: str = Field(default="API Gateway")
    app_version: str = Field(default="0.1.0")

    # Backend microservices
    students_service_url: str = Field(default="http://localhost:50052")
    staff_service_url: str = Field(default="http://localhost:50055")
    courses_service_url: str = Field(default="http://localhost:50054")
    grades_service_url: str = Field(default="http://localhost:50051")
    backend_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="HTTP timeout applied to every backend call",
    )

    # Tools
    tool_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Default deadline for a single tool invocation",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
