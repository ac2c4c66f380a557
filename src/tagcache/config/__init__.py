"""Configuration helpers for tagcache."""

from .logging_config import configure_logging, build_logging_config, LogLevel, LogFormat

__all__ = ["configure_logging", "build_logging_config", "LogLevel", "LogFormat"]
