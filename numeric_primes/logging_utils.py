"""
Logging setup for applications embedding numeric_primes.

The library itself only creates module loggers; nothing is configured on
import. Call setup_logging() from an application entry point.
"""
import logging
from pathlib import Path
from typing import Optional

from .config import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Set up logging configuration from settings.

    Args:
        settings: Settings to use (default: get_settings())

    Returns:
        The numeric_primes package logger
    """
    if settings is None:
        settings = get_settings()

    handlers = [logging.StreamHandler()]
    if settings.log_file:
        log_file = Path(settings.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )

    logger = logging.getLogger('numeric_primes')
    logger.setLevel(getattr(logging, settings.log_level))
    return logger
