"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Leveled logger with prefix chaining
- LoggerBuilder: Builder pattern for logger construction
- LogLevel: Log level enumeration
- LoggerConfig: Configuration value and presets
"""

from prefix_logger.core.logger import Logger
from prefix_logger.core.logger_builder import LoggerBuilder
from prefix_logger.core.log_level import LogLevel
from prefix_logger.core.logger_config import LoggerConfig, DEFAULT_TIME_LAYOUT

__all__ = ["Logger", "LoggerBuilder", "LogLevel", "LoggerConfig", "DEFAULT_TIME_LAYOUT"]
