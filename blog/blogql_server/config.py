"""
Configuration management for the BlogQL server.

All configuration is done via environment variables with the BLOGQL_
prefix - no config files. Uses pydantic-settings for loading and type
coercion.

Invariants:
    - All settings have sensible defaults for local development
    - validate_settings() runs before any app is built (create_app calls it)

How to change safely:
    - Add new settings with defaults that keep existing deployments working
    - Include every new setting in log_config()
"""

from __future__ import annotations

import logging

from pydantic import Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("json", "text")


class Settings(BaseSettings):
    """Server configuration loaded from environment."""

    # HTTP listener
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=4000, description="Bind port")

    # GraphQL endpoint
    graphql_path: str = Field(default="/graphql", description="Mount path of the GraphQL router")
    graphiql: bool = Field(default=True, description="Serve the GraphiQL IDE on GET")

    # Data
    seed_demo_data: bool = Field(default=True, description="Load demo users, posts and comments")

    # CORS
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins",
    )

    # Observability
    log_level: str = Field(default="INFO", description="DEBUG, INFO, WARNING, ERROR")
    log_format: str = Field(default="json", description="json or text")

    model_config = {"env_prefix": "BLOGQL_"}

    def validate_settings(self) -> None:
        """Validate configuration consistency.

        Raises:
            ValueError: If configuration is invalid.
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid BLOGQL_LOG_LEVEL '{self.log_level}'. "
                f"Must be one of: {', '.join(LOG_LEVELS)}"
            )
        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Invalid BLOGQL_LOG_FORMAT '{self.log_format}'. Must be one of: json, text"
            )
        if not self.graphql_path.startswith("/"):
            raise ValueError("BLOGQL_GRAPHQL_PATH must start with '/'")

    def log_config(self) -> None:
        """Log the loaded configuration."""
        logger.info(
            "Server configuration loaded",
            extra={
                "bind": f"{self.host}:{self.port}",
                "graphql_path": self.graphql_path,
                "graphiql": self.graphiql,
                "seed_demo_data": self.seed_demo_data,
                "log_level": self.log_level,
            },
        )
