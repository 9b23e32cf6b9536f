"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a default, so the facade starts without any
environment configured.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Declared versions validated at load time, not at first query

Usage:
    from src.core.config import settings

    settings.public_api_versions   # ["1.0.0", "1.0.1", "2.0.0"]
    settings.public_api_namespace  # "host.public"

Environment Variables:
    PUBLIC_API_VERSIONS=1.0.0,1.0.1,2.0.0
    PUBLIC_API_NAMES=cache,log,request
    PUBLIC_API_NAMESPACE=myhost.public
"""

from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from src.core.enums import Environment
from src.core.result import Failure

DEFAULT_PUBLIC_API_VERSIONS = ["1.0.0", "1.0.1", "2.0.0"]

DEFAULT_PUBLIC_API_NAMES = [
    "cache",
    "configuration",
    "ctx",
    "dao",
    "db",
    "dns",
    "http",
    "ipc",
    "log",
    "request",
    "response",
    "shm",
    "timers",
    "utils",
    "upstream",
    "upstream.response",
]


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Loads configuration from environment variables.

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Product identity
    product_name: str = Field(
        default="host",
        description='Host product name; error messages read "<name> public api"',
    )
    product_version: str = Field(
        default="0.1.0",
        description="Host product version (dotted numeric, components <= 99)",
    )

    # Public API declaration
    public_api_namespace: str = Field(
        default="host.public",
        description="Dotted package prefix of every public API module path",
    )
    public_api_versions: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_PUBLIC_API_VERSIONS),
        description="Declared public API versions, registered in this order (comma-separated)",
    )
    public_api_names: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: list(DEFAULT_PUBLIC_API_NAMES),
        description="API names resolved at every declared version (comma-separated)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Level name.

        Returns:
            str: Uppercase level name.

        Raises:
            ValueError: If the level is not a standard level name.
        """
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"log_level must be a standard level name, got {v!r}")
        return level

    @field_validator("public_api_versions", "public_api_names", mode="before")
    @classmethod
    def split_comma_separated(cls, v: object) -> object:
        """
        Parse comma-separated environment values into lists.

        Args:
            v: Raw value (str from the environment, or a list).

        Returns:
            list[str] for string input, otherwise the value unchanged.
        """
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    @field_validator("public_api_versions")
    @classmethod
    def validate_versions(cls, v: list[str]) -> list[str]:
        """
        Validate every declared version.

        Args:
            v: Declared version strings.

        Returns:
            list[str]: The declared versions, unchanged.

        Raises:
            ValueError: If the list is empty, a version does not parse, or a
                component exceeds the two-digit encoding.
        """
        if not v:
            raise ValueError("public_api_versions cannot be empty")
        for text in v:
            _validate_version_text(text)
        return v

    @field_validator("product_version")
    @classmethod
    def validate_product_version(cls, v: str) -> str:
        """
        Validate the host product version.

        Args:
            v: Product version string.

        Returns:
            str: The version, unchanged.
        """
        _validate_version_text(v)
        return v

    @field_validator("public_api_namespace")
    @classmethod
    def validate_namespace(cls, v: str) -> str:
        """
        Remove surrounding whitespace and trailing dots from the namespace.

        Args:
            v: Dotted namespace.

        Returns:
            str: Normalized namespace.
        """
        namespace = v.strip().rstrip(".")
        if not namespace:
            raise ValueError("public_api_namespace cannot be empty")
        return namespace

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


def _validate_version_text(text: str) -> None:
    from src.domain.versioning import encode_version, parse_version

    result = parse_version(text)
    if isinstance(result, Failure):
        raise ValueError(result.error.message)
    encode_version(result.value)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
