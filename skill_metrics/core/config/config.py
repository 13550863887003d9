"""
Configuration settings for the skill metrics reporter.
Loads configuration from environment variables with sensible defaults.
"""

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

from ...adapters.logger.standard_logger import StandardLogger
from ..domain.credentials import Credentials
from ..ports.exceptions import ConfigurationError


# Configure logging using our custom logger
logger: StandardLogger = StandardLogger("skill_metrics")


DEFAULT_LWA_TOKEN_URL = "https://api.amazon.com/auth/o2/token"
DEFAULT_SMAPI_BASE_URL = "https://api.amazonalexa.com"
DEFAULT_HTTP_TIMEOUT = 200.0


def _as_bool(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in ("1", "true", "yes", "on")


def _parse_timeout(value: Optional[str]) -> float:
    if not value:
        return DEFAULT_HTTP_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"HTTP timeout must be a number, got '{value}'", "HTTP_TIMEOUT")
    if timeout <= 0:
        raise ConfigurationError("HTTP timeout must be positive", "HTTP_TIMEOUT")
    return timeout


class Config:
    """Run configuration loaded from environment variables."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        env = os.environ if environ is None else environ

        # LWA credentials
        self.LWA_CLIENT_ID: str = env.get("lwa_client_id", "")
        self.LWA_CLIENT_SECRET: str = env.get("lwa_client_secret", "")
        self.LWA_REFRESH_TOKEN: str = env.get("lwa_refresh_token", "")

        # Skill and output
        self.SKILL_ID: str = env.get("custom_skill_id", "")
        self.DEPLOY_DIR: str = env.get("BITRISE_DEPLOY_DIR", "")

        # Remote endpoints
        self.LWA_TOKEN_URL: str = env.get("LWA_TOKEN_URL") or DEFAULT_LWA_TOKEN_URL
        self.SMAPI_BASE_URL: str = (env.get("SMAPI_BASE_URL") or DEFAULT_SMAPI_BASE_URL).rstrip("/")

        # HTTP client
        self.HTTP_TIMEOUT: float = _parse_timeout(env.get("HTTP_TIMEOUT"))

        # Behaviour
        self.METRICS_USE_UTC: bool = _as_bool(env.get("METRICS_USE_UTC"))
        self.LOG_LEVEL: str = env.get("LOG_LEVEL") or "info"

    @property
    def credentials(self) -> Credentials:
        return Credentials(
            client_id=self.LWA_CLIENT_ID,
            client_secret=self.LWA_CLIENT_SECRET,
            refresh_token=self.LWA_REFRESH_TOKEN
        )

    @property
    def deploy_path(self) -> Path:
        return Path(self.DEPLOY_DIR)

    def validate(self, require_deploy_dir: bool = True) -> None:
        """
        Check that every required value is present.

        Args:
            require_deploy_dir: Whether the chart output directory is required

        Raises:
            ConfigurationError: For the first missing value, in declaration order
        """
        required = [
            (self.LWA_CLIENT_ID, "LWA Client ID is required", "lwa_client_id"),
            (self.LWA_CLIENT_SECRET, "LWA Client secret is required", "lwa_client_secret"),
            (self.LWA_REFRESH_TOKEN, "LWA refresh token is required", "lwa_refresh_token"),
            (self.SKILL_ID, "Skill ID is required", "custom_skill_id"),
        ]
        if require_deploy_dir:
            required.append((self.DEPLOY_DIR, "Deploy directory not found", "BITRISE_DEPLOY_DIR"))

        for value, message, variable in required:
            if not value:
                raise ConfigurationError(message, variable)


def configure_logging(level_name: str) -> None:
    """Apply a level name such as 'info' or 'DEBUG' to the application logger."""
    level = logging.getLevelName(level_name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level '{level_name}'", "LOG_LEVEL")
    logger.set_level(level)
