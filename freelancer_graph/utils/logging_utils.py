"""Logging utilities for the freelancer graph pipeline."""

import logging
from typing import Any, Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(logging_settings: Optional[dict[str, Any]] = None) -> None:
    """Configure logging for the pipeline.

    Args:
        logging_settings: The ``logging`` section of the settings
            (keys: level, format, file). A missing or empty file disables
            the file handler.

    """
    logging_settings = logging_settings or {}
    level = str(logging_settings.get("level", "INFO"))
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    log_file = logging_settings.get("file")
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=logging_settings.get("format", DEFAULT_FORMAT),
        handlers=handlers,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance

    """
    return logging.getLogger(name)
