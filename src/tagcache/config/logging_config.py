"""Logging configuration for applications embedding tagcache.

The library only creates module loggers; handlers are installed by the
host application, optionally through ``configure_logging``.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Supported log formats."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}

# Third-party modules that should only log errors
ERROR_ONLY_MODULES = [
    "redis",
    "httpx",
    "httpcore",
]


def build_logging_config(level: str = "INFO", log_format: str = "simple") -> Dict[str, Any]:
    """Build a ``dictConfig`` mapping for the given level and format."""
    effective_level = LogLevel(level.upper()).value
    format_string = FORMAT_STRINGS[LogFormat(log_format.lower())]
    
    logging_config: Dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": format_string,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": effective_level,
                "formatter": "default",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {
            "level": effective_level,
            "handlers": ["console"],
        },
        "loggers": {
            "tagcache": {
                "level": effective_level,
                "propagate": True,
            },
        },
    }
    
    for module in ERROR_ONLY_MODULES:
        logging_config["loggers"][module] = {
            "level": "ERROR",
            "handlers": ["console"],
            "propagate": False,
        }
    
    return logging_config


def configure_logging(level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Configure logging, defaulting to ``CacheSettings`` values.
    
    Args:
        level: Log level name
        log_format: simple, detailed or json
    """
    if level is None or log_format is None:
        from ..entities.config import CacheSettings
        settings = CacheSettings()
        level = level or settings.log_level
        log_format = log_format or settings.log_format
    
    logging.config.dictConfig(build_logging_config(level, log_format))
    logging.getLogger(__name__).debug(f"Logging configured: level={level}, format={log_format}")
