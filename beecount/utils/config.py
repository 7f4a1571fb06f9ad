"""Configuration management for environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

from beecount.utils.exceptions import ConfigurationError

DEFAULT_BEEMINDER_API_URL = "https://www.beeminder.com/api/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
DEFAULT_MAX_WORKERS = 8


def get_required_env(key: str) -> str:
    """Get required environment variable or raise error.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ConfigurationError: If variable is not set or empty
    """
    value = os.getenv(key)
    if not value:
        raise ConfigurationError(f"{key} environment variable is not set")
    return value


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Load configuration from .env file and environment."""
        # Load .env file if it exists
        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path)

        # Required configuration
        self.beeminder_api_key = get_required_env("BEEMINDER_API_KEY")

        # Optional configuration with defaults
        self.beeminder_api_url = (
            os.getenv("BEEMINDER_API_URL") or DEFAULT_BEEMINDER_API_URL
        ).rstrip("/")
        self.request_timeout = self._get_number(
            "BEEMINDER_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, float
        )
        self.max_workers = self._get_number("BEECOUNT_MAX_WORKERS", DEFAULT_MAX_WORKERS, int)
        self.log_level = os.getenv("LOG_LEVEL", "INFO")

        if self.request_timeout <= 0:
            raise ConfigurationError("BEEMINDER_TIMEOUT must be positive")
        if self.max_workers < 1:
            raise ConfigurationError("BEECOUNT_MAX_WORKERS must be at least 1")

    @staticmethod
    def _get_number(key: str, default: float, cast: type) -> float:
        """Read a numeric environment variable.

        Raises:
            ConfigurationError: If the value cannot be converted
        """
        raw = os.getenv(key)
        if raw is None or raw.strip() == "":
            return default
        try:
            return cast(raw)
        except ValueError as e:
            raise ConfigurationError(f"{key} must be a number, got {raw!r}") from e

    @staticmethod
    def get_optional(key: str, default: str | None = None) -> str | None:
        """Get optional environment variable with default value.

        Args:
            key: Environment variable name
            default: Default value if not set

        Returns:
            Environment variable value or default
        """
        return os.getenv(key, default)
