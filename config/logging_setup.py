"""
Logging bootstrap.
"""
import logging.config
from typing import Optional

from . import settings


def configure_logging(config: Optional[dict] = None) -> None:
    """Apply the dictConfig from settings, or an explicit override."""
    logging.config.dictConfig(config if config is not None else settings.LOGGING)
