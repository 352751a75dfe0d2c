"""
Configuration for the anime episode scraper.

Values are read from environment variables (a local .env file is loaded
first if present). Everything has a sensible default so the scraper works
without any configuration at all.
"""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

DEFAULT_USER_AGENT = (
    'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) '
    'AppleWebKit/537.36 (KHTML, like Gecko) '
    'Chrome/124.0.0.0 Safari/537.36'
)

VALID_LOG_LEVELS = ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigError(Exception):
    """Raised when an environment value cannot be used."""
    pass


class Config:
    """
    Settings for the HTTP client and logging.

    Attributes:
        request_timeout: HTTP timeout in seconds
        user_agent: User-Agent header sent with every request
        log_level: loguru level used by the command line entry point
    """

    def __init__(self, env_file: Optional[str] = None):
        load_dotenv(env_file)

        self.request_timeout = self._get_float('ANIME_EPISODES_TIMEOUT', 30.0)
        self.user_agent = os.getenv('ANIME_EPISODES_USER_AGENT') or DEFAULT_USER_AGENT
        self.log_level = (os.getenv('ANIME_EPISODES_LOG_LEVEL') or 'INFO').upper()

    def validate_log_level(self) -> str:
        """
        Check the log level before it is handed to loguru.

        Called by the command line entry point, not when the config is loaded.

        Raises:
            ConfigError: If the level is not a loguru level name
        """
        if self.log_level not in VALID_LOG_LEVELS:
            raise ConfigError(
                f"ANIME_EPISODES_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}, "
                f"got: {self.log_level}"
            )
        return self.log_level

    @staticmethod
    def _get_float(name: str, default: float) -> float:
        raw = os.getenv(name)
        if raw is None or raw.strip() == '':
            return default

        try:
            value = float(raw)
        except ValueError as e:
            raise ConfigError(f"{name} must be a number, got: {raw!r}") from e

        if value <= 0:
            raise ConfigError(f"{name} must be positive, got: {value}")
        return value


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Build the settings on first use and reuse them afterwards."""
    return Config()
