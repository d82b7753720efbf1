"""Logger builder pattern"""

from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, Optional, Union

from prefix_logger.core.logger import Logger
from prefix_logger.core.logger_config import LoggerConfig
from prefix_logger.core.log_level import LogLevel


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig()

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "LoggerBuilder":
        """
        Start from an existing configuration, e.g. a preset.

        Example:
            logger = (LoggerBuilder.from_config(LoggerConfig.dev_config())
                .with_color(False)
                .build())
        """
        return cls(config)

    def _set(self, **changes) -> "LoggerBuilder":
        self._config = replace(self._config, **changes)
        return self

    def with_level(self, level: Union[LogLevel, str]) -> "LoggerBuilder":
        """Set minimum log level."""
        return self._set(level=level)

    def with_color(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable colored level tags."""
        return self._set(colored=enabled)

    def with_caller(self, enabled: bool = True) -> "LoggerBuilder":
        """Enable/disable the file:line segment."""
        return self._set(print_caller=enabled)

    def with_time(self, enabled: bool = True, layout: Optional[str] = None) -> "LoggerBuilder":
        """Enable/disable the timestamp segment."""
        if layout is not None:
            return self._set(print_time=enabled, time_layout=layout)
        return self._set(print_time=enabled)

    def with_time_layout(self, layout: str) -> "LoggerBuilder":
        """Set strftime layout for the timestamp segment."""
        return self._set(time_layout=layout)

    def with_prefix(self, prefix: str) -> "LoggerBuilder":
        """Set prefix, written verbatim before every message."""
        return self._set(prefix=prefix)

    def with_output(self, output: Any) -> "LoggerBuilder":
        """
        Set the sink.

        Args:
            output: Any object with a write(bytes) method

        Returns:
            Self for method chaining
        """
        return self._set(output=output)

    def with_clock(self, clock: Callable[[], datetime]) -> "LoggerBuilder":
        """Set the time source used for the timestamp segment."""
        return self._set(clock=clock)

    def with_exit_func(self, exit_func: Callable[[], None]) -> "LoggerBuilder":
        """Set the operation invoked after a fatal message."""
        return self._set(exit_func=exit_func)

    @property
    def config(self) -> LoggerConfig:
        """Configuration built so far."""
        return self._config

    def build(self) -> Logger:
        """Build and return configured logger."""
        return self._config.build()
