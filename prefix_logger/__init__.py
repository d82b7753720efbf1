"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Prefix Logger - a leveled, prefix-aware text logger
Lines carry an optional timestamp, a colored level tag, the caller's
file:line and a chain of prefixes, and go to a single byte sink.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from prefix_logger.core.logger import Logger
from prefix_logger.core.logger_builder import LoggerBuilder
from prefix_logger.core.log_level import LogLevel
from prefix_logger.core.logger_config import LoggerConfig, DEFAULT_TIME_LAYOUT

from prefix_logger import formatters
from prefix_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogLevel",
    "LoggerConfig",
    "DEFAULT_TIME_LAYOUT",
    "formatters",
    "writers",
]
