"""
Configuration Settings.

This module defines the application configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATABASE_PATH = "wahlprogramm.sql"


def sqlite_url_for(path: str | Path) -> str:
    """Build a SQLAlchemy SQLite URL for a database file path."""
    return f"sqlite:///{Path(path)}"


# =====================================================================
# Grouped Configuration Models
# =====================================================================


class DatabaseConfig(BaseModel):
    """Resolved store location and connection string."""

    path: str = Field(
        default=DEFAULT_DATABASE_PATH, alias="WAHLPROGRAMM_DATABASE_PATH", description="Path of the store file"
    )
    url: Optional[str] = Field(
        default=None, alias="WAHLPROGRAMM_DATABASE_URL", description="Connection string for the store"
    )

    model_config = {"populate_by_name": True}

    @property
    def resolved_url(self) -> str:
        return self.url or sqlite_url_for(self.path)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", alias="WAHLPROGRAMM_LOG_LEVEL", description="Console log level")
    format: str = Field(
        default="detailed", alias="WAHLPROGRAMM_LOG_FORMAT", description="Log format (simple, detailed, json)"
    )
    file_dir: str = Field(default="logs", alias="WAHLPROGRAMM_LOG_FILE_DIR", description="Directory for log files")
    enable_file: bool = Field(
        default=False, alias="WAHLPROGRAMM_ENABLE_FILE_LOGGING", description="Whether to write a log file"
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Application settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    # =====================================================================
    # Database Configuration
    # =====================================================================
    database_path: str = Field(
        default=DEFAULT_DATABASE_PATH,
        description="Location of the embedded store file",
        alias="WAHLPROGRAMM_DATABASE_PATH",
    )
    database_url: Optional[str] = Field(
        default=None,
        description="Connection string; derived from the store path when unset",
        alias="WAHLPROGRAMM_DATABASE_URL",
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="WAHLPROGRAMM_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Logging format (simple, detailed, json)",
        alias="WAHLPROGRAMM_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory the log file is written to",
        alias="WAHLPROGRAMM_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Whether to write a log file next to console output",
        alias="WAHLPROGRAMM_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def database(self) -> DatabaseConfig:
        """Get database configuration from environment variables."""
        return DatabaseConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def logging(self) -> LoggingConfig:
        """Get logging configuration from environment variables."""
        return LoggingConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
