"""
Formatters module

Helpers that render the segments of a log line and the message itself.
"""

from prefix_logger.formatters.segments import (
    caller_location,
    caller_segment,
    level_segment,
    time_segment,
)
from prefix_logger.formatters.message import render_println, render_printf

__all__ = [
    "caller_location",
    "caller_segment",
    "level_segment",
    "time_segment",
    "render_println",
    "render_printf",
]
