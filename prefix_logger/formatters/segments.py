"""
Line segment helpers

Each helper renders one decoration of a log line, including its trailing
space, or an empty string when there is nothing to render.
"""

import os
import sys
from datetime import datetime
from typing import Tuple

from prefix_logger.core.log_level import LogLevel


def time_segment(now: datetime, layout: str) -> str:
    """Render ``now`` with a strftime layout: ``"<time> "``."""
    return now.strftime(layout) + " "


def level_segment(level: LogLevel, colored: bool = False) -> str:
    """
    Render the bracketed level tag: ``"[ERR] "``.

    FATAL has no tag of its own and is rendered as ERROR.

    Args:
        level: Level of the message
        colored: Wrap the tag in the level's ANSI color

    Returns:
        Tag segment with trailing space
    """
    if level.tag is None:
        level = LogLevel.ERROR
    if colored:
        return f"{level.color_code}[{level.tag}]{level.reset_code} "
    return f"[{level.tag}] "


def caller_location(depth: int = 1) -> Tuple[str, int]:
    """
    Get the source location of a frame above the caller.

    Args:
        depth: Number of frames to go back from the caller of this function

    Returns:
        Tuple of (file basename, line number), ("", 0) if the stack is
        not that deep
    """
    try:
        frame = sys._getframe(depth + 1)  # +1 to skip this function itself
    except ValueError:
        return ("", 0)
    return (os.path.basename(frame.f_code.co_filename), frame.f_lineno)


def caller_segment(depth: int = 1) -> str:
    """Render ``"<file>:<line> "`` for the frame ``depth`` levels above the caller."""
    file_name, line_number = caller_location(depth + 1)
    if not file_name:
        return ""
    return f"{file_name}:{line_number} "
