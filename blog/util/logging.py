"""Logging configuration for the application."""

import logging
import sys

from blog.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up log levels based on environment.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    # Configure root logger
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # uvicorn access logs duplicate the FastAPI spans
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    logging.getLogger("blog").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(
        f"Logging configured: environment={settings.environment}, level={logging.getLevelName(level)}"
    )
