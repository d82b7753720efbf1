"""
Base writer interface

A writer is the sink a Logger flushes finished lines into. Loggers only
require a ``write(bytes)`` method, so file objects opened in binary mode,
``io.BytesIO`` and sockets wrapped with ``makefile("wb")`` work as well.
"""

from abc import ABC, abstractmethod


class BaseWriter(ABC):
    """
    Abstract base class for log writers.

    Thread Safety:
        Loggers derived from one another share their writer and do not
        serialize writes between them, so implementations must accept
        concurrent write() calls.
    """

    @abstractmethod
    def write(self, data: bytes) -> int:
        """
        Write one complete log line.

        Args:
            data: Encoded line

        Returns:
            Number of bytes written
        """
        pass

    def flush(self) -> None:
        """Flush buffered output."""

    def close(self) -> None:
        """Release the underlying resource."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
