"""12-factor configuration adapter using environment variables and TOML config."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Logging level for the application")

    # Darwin gateway configuration
    darwin_base_url: str = Field(
        default="https://huxley2.azurewebsites.net",
        description="Base URL of the Huxley2-compatible Darwin JSON gateway",
    )
    darwin_token: str = Field(
        default="",
        description="OpenLDBWS token used by widgets that do not set their own",
    )
    darwin_timeout_seconds: int = Field(
        default=10, description="Timeout for Darwin gateway requests in seconds"
    )

    # Display configuration
    title: str = Field(default="UK Rail Departures", description="Page title")
    page_refresh_seconds: int = Field(
        default=30, description="Seconds between browser refreshes of the dashboard page"
    )

    # TOML config file path for widget instances
    config_file: str | None = Field(
        default="config.example.toml",
        description="Path to TOML configuration file with [[widgets]] tables",
    )

    @classmethod
    def for_testing(cls, **overrides: Any) -> "AppConfig":
        """Build a config that ignores the .env file."""
        return cls(_env_file=None, **overrides)  # type: ignore[call-arg]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("page_refresh_seconds", "darwin_timeout_seconds")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate intervals are positive."""
        if v < 1:
            raise ValueError("value must be at least 1")
        return v

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    def _load_toml_data(self) -> dict[str, Any]:
        """Load and parse TOML file, updating display settings."""
        if not self.config_file:
            raise ValueError("config_file must be set to load widgets configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update display and gateway settings from TOML if present
        display = toml_data.get("display", {})
        if isinstance(display, dict):
            if "title" in display:
                self.title = display["title"]
            if "page_refresh_seconds" in display:
                self.page_refresh_seconds = display["page_refresh_seconds"]

        darwin = toml_data.get("darwin", {})
        if isinstance(darwin, dict):
            if "base_url" in darwin:
                self.darwin_base_url = darwin["base_url"]
            if "timeout_seconds" in darwin:
                self.darwin_timeout_seconds = darwin["timeout_seconds"]
            if "token" in darwin and not self.darwin_token:
                self.darwin_token = darwin["token"]

        return toml_data

    def get_widgets_config(self) -> list[dict[str, Any]]:
        """Parse and return widget configurations as a list of dicts from the TOML file.

        Raises ValueError if ``widgets`` is not a list of tables.
        """
        toml_data = self._load_toml_data()

        widgets = toml_data.get("widgets", [])
        if not isinstance(widgets, list):
            raise ValueError("TOML config 'widgets' must be a list")
        return [w for w in widgets if isinstance(w, dict)]
