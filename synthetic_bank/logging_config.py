"""
Process logging setup.

Modules log through logging.getLogger(__name__); this module
only decides where those records go and how they look.
"""

import logging.config

from synthetic_bank.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger for the application process."""
    level = level or get_settings().LOG_LEVEL
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s %(levelname)s [%(name)s] %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
            },
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
    })
