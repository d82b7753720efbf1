"""Console writer"""

import sys
from typing import Optional, TextIO

from prefix_logger.writers.base_writer import BaseWriter


class ConsoleWriter(BaseWriter):
    """Write logs to a console stream."""

    def __init__(self, stream: Optional[TextIO] = None, encoding: str = "utf-8"):
        """
        Initialize console writer.

        Args:
            stream: Output stream (default: sys.stderr, looked up on each write)
            encoding: Used to decode lines for streams without a binary buffer
        """
        self._stream = stream
        self.encoding = encoding

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stderr

    def write(self, data: bytes) -> int:
        """Write encoded line to the stream and flush it."""
        stream = self.stream
        buffer = getattr(stream, "buffer", None)
        if buffer is not None:
            # Text layer may hold earlier print() output
            stream.flush()
            buffer.write(data)
            buffer.flush()
        else:
            stream.write(data.decode(self.encoding, errors="replace"))
            stream.flush()
        return len(data)

    def flush(self):
        """Flush stream."""
        self.stream.flush()
