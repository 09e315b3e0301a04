"""
Application configuration
"""
import logging
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


def mask_sensitive_value(value: str, show_chars: int = 4) -> str:
    """
    Mask sensitive values for logging, showing only the last few characters.

    :param value: The sensitive value to mask
    :param show_chars: Number of characters to show at the end
    :return: Masked string like "***xyz"
    """
    if not value:
        return "[NOT SET]"
    if len(value) <= show_chars:
        return "*" * len(value)
    return "*" * (len(value) - show_chars) + value[-show_chars:]


class Settings(BaseSettings):
    """Application settings, read once at startup and never mutated"""

    # Database
    DB_SERVER: str
    DB_NAME: str
    DB_USER: str
    DB_PASS: str
    DB_PORT: int = 3306
    DB_SSL_CA: Optional[str] = None  # CA bundle path, system CAs when unset

    # HTTP
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # API
    API_TITLE: str = "Secure Feedback Service"
    API_VERSION: str = "1.0.0"
    API_DESCRIPTION: str = "Feedback form with validated, sanitized persistence"

    # Logging
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    def log_config_summary(self):
        """Log configuration summary with sensitive values masked."""
        logger.info("=" * 70)
        logger.info("Configuration Summary")
        logger.info("=" * 70)
        logger.info(f"Database Server: {self.DB_SERVER}:{self.DB_PORT}")
        logger.info(f"Database Name: {self.DB_NAME}")
        logger.info(f"Database User: {self.DB_USER}")
        logger.info(f"Database Password: {mask_sensitive_value(self.DB_PASS)}")
        logger.info(f"Database CA Bundle: {self.DB_SSL_CA or '[system default]'}")
        logger.info(f"Listen Address: {self.HOST}:{self.PORT}")
        logger.info("=" * 70)
