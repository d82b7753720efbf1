"""
Main Logger class - synchronous leveled logger with prefix chaining

Every emission runs on the caller's thread:
gate -> lock -> reset buffer -> time -> [TAG] -> file:line -> prefix ->
message -> one write to the sink -> unlock.
"""

from __future__ import annotations

import threading
from dataclasses import replace
from typing import Any, Callable, Dict, Optional, Union

from prefix_logger.core.log_level import LogLevel
from prefix_logger.core.logger_config import LoggerConfig
from prefix_logger.formatters.message import render_println, render_printf
from prefix_logger.formatters.segments import (
    caller_segment,
    level_segment,
    time_segment,
)

PREFIX_SEPARATOR = ": "

# Frames between _log and user code: _log <- public method <- caller
_CALLER_DEPTH = 2

_ENCODING = "utf-8"


class Logger:
    """
    Leveled logger writing formatted lines to a single sink.

    Thread Safety:
        Calls on one Logger are serialized, so its lines never interleave.
        Loggers derived with with_prefix() have their own lock and only
        share the sink.
    """

    def __init__(self, config: Optional[LoggerConfig] = None):
        self._config = config or LoggerConfig.default()
        self._buffer = bytearray()
        self._lock = threading.Lock()
        self._metrics = {"written": 0, "write_errors": 0}

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def level(self) -> LogLevel:
        return self._config.level

    @property
    def prefix(self) -> str:
        return self._config.prefix

    @property
    def output(self) -> Any:
        return self._config.output

    def should_print(self, level: LogLevel) -> bool:
        """Check whether messages of ``level`` pass the configured minimum."""
        return level >= self._config.level

    def _append(self, text: str) -> None:
        self._buffer += text.encode(_ENCODING, errors="backslashreplace")

    def _flush_buffer(self) -> None:
        """Write the buffer to the sink. Caller must hold the lock."""
        try:
            self._config.output.write(bytes(self._buffer))
            self._metrics["written"] += 1
        except Exception:
            # Best effort: sink failures never reach the caller
            self._metrics["write_errors"] += 1

    def _log(
        self,
        level: Optional[LogLevel],
        tag_level: Optional[LogLevel],
        render: Callable[[], str],
    ) -> None:
        """
        Format one line and write it to the sink.

        Args:
            level: Level used for gating, None to always emit
            tag_level: Level whose tag is rendered, None for no tag
            render: Produces the message text
        """
        config = self._config
        if level is not None and level < config.level:
            return

        now = config.clock() if config.print_time else None

        with self._lock:
            del self._buffer[:]

            if now is not None:
                self._append(time_segment(now, config.time_layout))
            if tag_level is not None:
                self._append(level_segment(tag_level, config.colored))
            if config.print_caller:
                self._append(caller_segment(_CALLER_DEPTH))
            self._append(config.prefix)
            self._append(render())

            self._flush_buffer()

    # Leveled output

    def debug(self, *args: Any) -> None:
        """Log debug message. Values are joined by spaces, newline appended."""
        self._log(LogLevel.DEBUG, LogLevel.DEBUG, lambda: render_println(args))

    def debugf(self, fmt: str, *args: Any) -> None:
        """Log printf-style debug message. No newline is appended."""
        self._log(LogLevel.DEBUG, LogLevel.DEBUG, lambda: render_printf(fmt, args))

    def info(self, *args: Any) -> None:
        """Log info message."""
        self._log(LogLevel.INFO, LogLevel.INFO, lambda: render_println(args))

    def infof(self, fmt: str, *args: Any) -> None:
        """Log printf-style info message."""
        self._log(LogLevel.INFO, LogLevel.INFO, lambda: render_printf(fmt, args))

    def warn(self, *args: Any) -> None:
        """Log warning message."""
        self._log(LogLevel.WARN, LogLevel.WARN, lambda: render_println(args))

    def warnf(self, fmt: str, *args: Any) -> None:
        """Log printf-style warning message."""
        self._log(LogLevel.WARN, LogLevel.WARN, lambda: render_printf(fmt, args))

    def error(self, *args: Any) -> None:
        """Log error message."""
        self._log(LogLevel.ERROR, LogLevel.ERROR, lambda: render_println(args))

    def errorf(self, fmt: str, *args: Any) -> None:
        """Log printf-style error message."""
        self._log(LogLevel.ERROR, LogLevel.ERROR, lambda: render_printf(fmt, args))

    def fatal(self, *args: Any) -> None:
        """
        Log message with the error tag, then call the configured exit_func.

        Fatal messages pass every level. The exit happens after the lock is
        released and regardless of whether the sink accepted the line.
        """
        self._log(LogLevel.FATAL, LogLevel.FATAL, lambda: render_println(args))
        self._exit()

    def fatalf(self, fmt: str, *args: Any) -> None:
        """Log printf-style message with the error tag, then exit."""
        self._log(LogLevel.FATAL, LogLevel.FATAL, lambda: render_printf(fmt, args))
        self._exit()

    def _exit(self) -> None:
        """Flush the sink, then hand over to exit_func."""
        flush = getattr(self._config.output, "flush", None)
        if callable(flush):
            try:
                flush()
            except Exception:
                with self._lock:
                    self._metrics["write_errors"] += 1
        self._config.exit_func()

    # Raw output, never filtered by level

    def print(self, *args: Any) -> None:
        """Write message without level tag. Newline appended."""
        self._log(None, None, lambda: render_println(args))

    def printf(self, fmt: str, *args: Any) -> None:
        """Write printf-style message without level tag."""
        self._log(None, None, lambda: render_printf(fmt, args))

    def write(self, data: Union[bytes, bytearray, memoryview]) -> int:
        """
        Pass bytes through to the sink unchanged.

        No tag, prefix or newline is added, so a Logger can itself be used
        as a writer for another component.

        Returns:
            Number of bytes accepted
        """
        with self._lock:
            del self._buffer[:]
            self._buffer += data
            self._flush_buffer()
        return memoryview(data).nbytes

    def write_string(self, text: str) -> int:
        """Pass text through to the sink unchanged."""
        return self.write(text.encode(_ENCODING, errors="backslashreplace"))

    # Derivation

    def with_prefix(self, prefix: str) -> "Logger":
        """
        Derive a logger that shares the sink and options of this one.

        The new prefix is resolved now: parent prefix, ": " when the parent
        prefix does not already end with it, the segment, and a trailing
        ": ". ``with_prefix("A").with_prefix("B")`` prints ``"A: B: "``.

        Args:
            prefix: Segment to append

        Returns:
            New Logger with its own buffer and lock
        """
        parent = self._config.prefix
        if parent and not parent.endswith(PREFIX_SEPARATOR):
            parent += PREFIX_SEPARATOR
        return Logger(replace(self._config, prefix=parent + prefix + PREFIX_SEPARATOR))

    def get_metrics(self) -> Dict[str, int]:
        """Get counts of lines written and sink failures."""
        with self._lock:
            return self._metrics.copy()

    def __repr__(self) -> str:
        return f"Logger(level={self._config.level}, prefix={self._config.prefix!r})"
