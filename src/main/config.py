"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import EnumEnvironment, EnumLogLevel, EnumTopologySource
from src.shared.env import load_secret_file_variables  # noqa: F401


class ServerSettings(BaseSettings):
    """HTTP server configuration settings."""

    title: str = Field(default="Service State Calculator", description="API title")
    description: str = Field(
        default="Aggregates host component states into service states",
        description="API description",
    )
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class AmbariSettings(BaseSettings):
    """Ambari server connection settings."""

    url: str = Field(default="http://localhost:8080", description="Ambari server URL")
    username: str = Field(default="admin", description="Ambari user")
    password: SecretStr = Field(
        default=SecretStr("admin"), description="Ambari password"
    )
    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify TLS certificates")

    model_config = SettingsConfigDict(
        env_prefix="AMBARI_", case_sensitive=False, extra="ignore"
    )


class TopologySettings(BaseSettings):
    """Where component topology is read from."""

    source: EnumTopologySource = Field(
        default=EnumTopologySource.AMBARI, description="Topology provider to use"
    )
    snapshot_path: Optional[str] = Field(
        default=None, description="JSON snapshot file, used by the snapshot source"
    )

    model_config = SettingsConfigDict(
        env_prefix="TOPOLOGY_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    server: ServerSettings = Field(default_factory=ServerSettings)
    ambari: AmbariSettings = Field(default_factory=AmbariSettings)
    topology: TopologySettings = Field(default_factory=TopologySettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
