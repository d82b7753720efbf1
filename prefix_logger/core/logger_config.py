"""
Logger configuration management

A LoggerConfig is a finished value: it is consumed once by build() and
never changes afterwards.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable

from prefix_logger.core.log_level import LogLevel
from prefix_logger.writers.console_writer import ConsoleWriter

if TYPE_CHECKING:
    from prefix_logger.core.logger import Logger


DEFAULT_TIME_LAYOUT = "%m.%d.%Y %H:%M:%S"


def exit_process() -> None:
    """
    Terminate the process with status 1.

    Works from any thread and cannot be caught: standard streams are
    flushed, then the interpreter exits without unwinding.
    """
    for stream in (sys.stdout, sys.stderr):
        try:
            if stream is not None:
                stream.flush()
        except (OSError, ValueError):
            pass
    os._exit(1)


@dataclass(frozen=True)
class LoggerConfig:
    """
    Logger configuration.

    Fields map one-to-one to the options a Logger resolves at build time.
    """

    # Gating
    level: LogLevel = LogLevel.DEBUG

    # Decorations
    colored: bool = False
    print_caller: bool = False
    print_time: bool = False
    time_layout: str = DEFAULT_TIME_LAYOUT
    prefix: str = ""

    # Capabilities
    output: Any = field(default_factory=ConsoleWriter)
    clock: Callable[[], datetime] = datetime.now
    exit_func: Callable[[], None] = exit_process

    def __post_init__(self):
        """Validate configuration after initialization."""
        if isinstance(self.level, str):
            object.__setattr__(self, "level", LogLevel.from_string(self.level))
        elif not isinstance(self.level, LogLevel):
            object.__setattr__(self, "level", LogLevel(self.level))

        if not isinstance(self.time_layout, str) or not self.time_layout:
            raise ValueError("time_layout must be a non-empty string")
        try:
            datetime(2000, 1, 1).strftime(self.time_layout)
        except ValueError as e:
            # Unencodable characters raise UnicodeEncodeError here
            raise ValueError(f"invalid time_layout {self.time_layout!r}: {e}") from e
        if not isinstance(self.prefix, str):
            raise TypeError("prefix must be a string")
        if not callable(getattr(self.output, "write", None)):
            raise TypeError("output must provide a write(bytes) method")
        if not callable(self.clock):
            raise TypeError("clock must be callable")
        if not callable(self.exit_func):
            raise TypeError("exit_func must be callable")

    def build(self) -> "Logger":
        """Create a logger from this configuration."""
        from prefix_logger.core.logger import Logger

        return Logger(self)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def dev_config(cls) -> "LoggerConfig":
        """Create configuration for development: everything on."""
        return cls(
            level=LogLevel.DEBUG,
            colored=True,
            print_caller=True,
            print_time=True,
        )

    @classmethod
    def prod_config(cls) -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=LogLevel.INFO,
            colored=False,
            print_caller=False,
            print_time=True,
        )
