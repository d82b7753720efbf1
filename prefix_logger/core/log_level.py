"""
Log level enumeration

Levels are ordered by rank; gating compares ranks, never tags.
"""

from enum import IntEnum
from typing import Dict, Optional


class LogLevel(IntEnum):
    """
    Log level enumeration.

    FATAL is the highest rank, so fatal messages pass every configured level.
    """

    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # Logged as an error, then the process exits

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name or three-letter tag (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        key = level_str.strip().upper()
        if key in cls.__members__:
            return cls[key]
        if key in LEVEL_FROM_TAG:
            return LEVEL_FROM_TAG[key]
        raise ValueError(f"Invalid log level: {level_str}")

    @property
    def tag(self) -> Optional[str]:
        """Three-letter display tag, None for FATAL."""
        return LEVEL_TAGS.get(self)

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        return LEVEL_COLORS.get(self, RESET_CODE)

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return RESET_CODE


RESET_CODE = "\033[0m"

# FATAL has no tag or color of its own: fatal lines go through the error path
LEVEL_TAGS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "DBG",
    LogLevel.INFO: "INF",
    LogLevel.WARN: "WRN",
    LogLevel.ERROR: "ERR",
}

LEVEL_COLORS: Dict[LogLevel, str] = {
    LogLevel.DEBUG: "\033[36m",     # Cyan
    LogLevel.INFO: "\033[32m",      # Green
    LogLevel.WARN: "\033[33m",      # Yellow
    LogLevel.ERROR: "\033[31m",     # Red
}

# Reverse mapping
LEVEL_FROM_TAG: Dict[str, LogLevel] = {v: k for k, v in LEVEL_TAGS.items()}
