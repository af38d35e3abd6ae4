"""Define configuration for the project."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import Field, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "settings"]


_app_config_path = Path(__file__).parent / "resources" / "app.toml"

with Path.open(_app_config_path, "rb") as f:
    _config = tomllib.load(f)
    _app_config = _config.get("app", {})
    _server_config = _app_config.get("server", {})
    _posts_config = _app_config.get("posts", {})
    _db_config = _app_config.get("db", {})
    _log_config = _app_config.get("logging", {})


class Settings(BaseSettings):
    """Application configuration settings."""

    # Environment configuration
    app_env: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Current application environment determining behavior.",
        validation_alias="ENV",
    )

    # Server configuration
    host_binding: str = Field(
        default=_server_config.get("host_binding", "127.0.0.1"),
        description="Host address the server binds to.",
        validation_alias="SERVER_HOST",
    )

    port: int = Field(
        default=_server_config.get("port", 8080),
        description="Network port the server listens on.",
        validation_alias="SERVER_PORT",
    )

    version: str = Field(
        default=_server_config.get("version", "0.1.0"),
        description="Version of the application.",
    )

    allow_origin: list[str] = Field(
        default=_server_config.get("allow_origin", ["http://localhost:3000"]),
        description="CORS allowed origins for cross-origin requests.",
    )

    # Post listing configuration
    posts_per_page: int = Field(
        default=_posts_config.get("posts_per_page", 12),
        description="Default page size when the client does not send a limit.",
        validation_alias="POSTS_PER_PAGE",
        ge=0,
    )

    query_timeout: float = Field(
        default=_posts_config.get("query_timeout", 10.0),
        description="Deadline in seconds for a single paged fetch.",
        validation_alias="QUERY_TIMEOUT",
        gt=0,
    )

    seed_batch_size: int = Field(
        default=_posts_config.get("seed_batch_size", 10),
        description="Number of sample posts inserted by the seed endpoint.",
        ge=1,
    )

    seed_on_start_count: int = Field(
        default=_posts_config.get("seed_on_start_count", 25),
        description="Number of sample posts inserted at startup when seeding.",
        ge=0,
    )

    seed_db_on_start: bool = Field(
        default=False,
        validation_alias="SEED_DB_ON_START",
        description="Whether to insert sample posts into an empty database on start.",
    )

    # Database configuration
    db_url: str = Field(
        default="sqlite+aiosqlite:///app.db",
        description="Database connection URL.",
        validation_alias="DATABASE_URL",
    )

    db_logging: bool = Field(
        default=_db_config.get("logging", False),
        description="Whether to enable SQL query logging.",
    )

    db_future: bool = Field(
        default=_db_config.get("future", True),
        description="Whether to use future SQLAlchemy features.",
    )

    db_timeout: int = Field(
        default=_db_config.get("timeout", 30),
        description="Timeout for database operations in seconds.",
    )

    db_pool_size: int = Field(
        default=_db_config.get("pool_size", 5),
        description="Size of the database connection pool.",
    )

    db_max_overflow: int = Field(
        default=_db_config.get("max_overflow", 10),
        description="Maximum number of connections to create beyond the pool size.",
    )

    db_pool_timeout: int = Field(
        default=_db_config.get("pool_timeout", 30),
        description="Timeout for acquiring a connection from the pool.",
    )

    db_pool_recycle: int = Field(
        default=_db_config.get("pool_recycle", 300),
        description="Time in seconds to recycle a connection.",
    )

    db_pool_pre_ping: bool = Field(
        default=_db_config.get("pool_pre_ping", True),
        description="Whether to check if a connection is alive before using it.",
    )

    clear_db_on_restart: bool = Field(
        default=False,
        validation_alias="CLEAR_DB_ON_RESTART",
        description="Whether to clear the database on application restart.",
    )

    # Log configuration
    log_dir: str = Field(
        default=_log_config.get("log_dir", "log"),
        description="Directory for storing log files.",
    )

    log_file: str = Field(
        default=_log_config.get("log_file", "app.log"),
        description="Name of the log file.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level (e.g., DEBUG, INFO, WARNING, ERROR).",
    )

    rotation: str = Field(
        default=_log_config.get("rotation", "1 MB"),
        description="Log rotation strategy (time or size-based).",
    )

    loki_url: str | None = Field(
        default=_log_config.get("loki_url"),
        validation_alias="LOKI_URL",
        description="Loki push endpoint for production logs, disabled when unset.",
    )

    @computed_field
    @property
    def log_path(self) -> Path:
        """Path where application logs are stored."""
        return Path(self.log_dir) / self.log_file

    @computed_field
    @property
    def reload(self) -> bool:
        """Whether to enable auto-reload on code changes."""
        return bool(_server_config.get("reload")) and self.app_env == "development"

    @model_validator(mode="after")
    def validate_log_level(self) -> "Settings":
        """Adjust log level based on environment."""
        if self.app_env == "production" and self.log_level == "DEBUG":
            self.log_level = "INFO"
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )


# Create a single instance of Settings to use throughout the application
settings = Settings()
