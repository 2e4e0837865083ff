"""Configuration settings for the converter service"""
import logging
from pydantic_settings import BaseSettings
from typing import List

from app.services.glide2wolken.types import FormType, EventType

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings.

    Priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values
    """

    # Service Identity
    SERVICE_NAME: str = "glide2wolken"
    SERVICE_PORT: int = 5002

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS - the converter form is usually served from another origin
    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    # Selections used when a request omits them
    DEFAULT_FORM_TYPE: FormType = FormType.REQUEST_FORM
    DEFAULT_EVENT_TYPE: str = EventType.ON_CHANGE.value

    # Indentation of the generated function body
    INDENT_UNIT: str = "    "

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Global settings instance
settings = Settings()


def log_settings():
    """Log the effective configuration. Called during application startup."""
    logger.info(f"Service: {settings.SERVICE_NAME}")
    logger.info(f"Port: {settings.SERVICE_PORT}")
    logger.info(f"Log level: {settings.LOG_LEVEL}")
    logger.info(f"CORS origins: {', '.join(settings.CORS_ALLOW_ORIGINS)}")
    logger.info(f"Default form type: {settings.DEFAULT_FORM_TYPE.value}")
    logger.info(f"Default event type: {settings.DEFAULT_EVENT_TYPE}")
    logger.info(f"Indent width: {len(settings.INDENT_UNIT)}")
