"""Logging configuration for the raccount command line."""

import logging
import logging.config
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s|%(levelname)s|%(name)s|%(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def resolve_log_level(level: Optional[str] = None) -> str:
    """Return the log level name from the argument, RACCOUNT_LOG_LEVEL, or WARNING."""
    if level is None:
        level = os.environ.get("RACCOUNT_LOG_LEVEL", "WARNING")
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level: '{level}'")
    return level


def setup_logging(level: Optional[str] = None) -> None:
    """Configure console logging for the raccount package.

    SQLAlchemy stays at WARNING unless DEBUG is requested.
    """
    level = resolve_log_level(level)
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "std": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stderr",
                "formatter": "std",
            },
        },
        "loggers": {
            "raccount": {
                "level": level,
                "handlers": ["console"],
                "propagate": False,
            },
            "sqlalchemy.engine": {
                "level": "INFO" if level == "DEBUG" else "WARNING",
                "handlers": ["console"],
                "propagate": False,
            },
        },
    })
