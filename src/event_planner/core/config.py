"""
Application configuration management using Pydantic Settings.

This module centralizes all environment-based configuration for the application,
providing type-safe access to configuration values with validation.
"""

from typing import List, Optional
from functools import lru_cache
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL, make_url

from event_planner.core.exceptions import ConfigurationException

logger = logging.getLogger('CORE_CONFIG')


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Name of the application
        debug: Debug mode flag (exposes the OpenAPI docs)
        host: Interface the HTTP server binds to
        port: Port the HTTP server listens on (required to serve)

        # Database Configuration
        db_driver: SQLAlchemy dialect/driver name, e.g. ``postgresql``
        db_host: Database host
        db_port: Database port (driver default when unset)
        db_user: Database username
        db_password: Database password
        db_name: Database name
        database_url: Complete database URL (if provided directly)

        # Connection Pool Settings
        db_pool_size: Database connection pool size
        db_max_overflow: Maximum overflow connections
        db_pool_timeout: Pool checkout timeout in seconds
        db_pool_recycle: Connection recycle time in seconds

        # Connection Retry Settings
        connect_retry_delay: Seconds to wait before the first reconnect attempt
        connect_retry_backoff: Multiplier applied to the delay after each failure
        connect_max_attempts: Attempts before giving up (0 retries forever)

        shutdown_timeout: Seconds to wait for in-flight requests on shutdown
        cors_origins: Origins allowed by the CORS middleware
        log_level: Level for the application loggers
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Settings
    app_name: str = "Event Planner API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: Optional[int] = None

    # Database Configuration
    db_driver: str = "postgresql"
    db_host: Optional[str] = None
    db_port: Optional[int] = None
    db_user: Optional[str] = None
    db_password: Optional[str] = None
    db_name: Optional[str] = None
    database_url: Optional[str] = None

    # Connection Pool Settings
    db_pool_size: int = 5
    db_max_overflow: int = 10
    db_pool_timeout: int = 30
    db_pool_recycle: int = 3600
    db_pool_pre_ping: bool = True
    db_echo: bool = False

    # Connection Retry Settings
    connect_retry_delay: float = 5.0
    connect_retry_backoff: float = 1.0
    connect_max_attempts: int = 60

    shutdown_timeout: int = 10
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    def get_database_url(self) -> str:
        """
        Construct the database URL from components or return direct URL.

        Returns:
            str: SQLAlchemy database URL

        Raises:
            ConfigurationException: If required configuration is missing
        """
        if self.database_url:
            return self.database_url

        missing = []
        if not self.db_host:
            missing.append("DB_HOST")
        if not self.db_user:
            missing.append("DB_USER")
        if self.db_password is None:
            missing.append("DB_PASSWORD")
        if not self.db_name:
            missing.append("DB_NAME")

        if missing:
            raise ConfigurationException(
                f"Database configuration incomplete. Missing: {', '.join(missing)}",
                {"missing": missing},
            )

        url = URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )
        return url.render_as_string(hide_password=False)

    def get_safe_database_url(self) -> str:
        """Database URL with the password masked, for logging."""
        return make_url(self.get_database_url()).render_as_string(hide_password=True)


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings object
    """
    return Settings()
